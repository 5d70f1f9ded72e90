"""
Shared translation helpers — addresses, custom fields and absent-key handling.

onX payloads omit a key entirely when Magento has no value for it; they never
carry null in its place. compact() drops None values from a dict built with
every candidate key, which keeps each translator a flat field listing.
"""

from typing import Any, Dict, List, Optional, Tuple


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of data without the keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def custom_field(vendor_ns: str, name: str, value: Any) -> Dict[str, str]:
    """A namespaced onX custom field, e.g. {"name": "m2:state", "value": "new"}."""
    return {"name": f"{vendor_ns}:{name}", "value": "" if value is None else str(value)}


def abs_amount(value: Optional[float]) -> float:
    """Magnitude of a Magento adjustment.

    Magento stores discounts as negative numbers on orders and positive
    numbers on items; onX always wants the non-negative magnitude.
    """
    return abs(value or 0)


def street_lines(street: Optional[List[str]]) -> Tuple[str, str]:
    lines = list(street or [])
    return (lines[0] if lines else "", lines[1] if len(lines) > 1 else "")


def address_to_canonical(addr: Optional[Dict]) -> Optional[Dict[str, Any]]:
    """Map a flat Magento address (orders, shipments) to an onX Address.

    Region may be a plain string on order addresses or a nested
    {"region_code", "region"} object on customer addresses.
    """
    if not addr:
        return None

    region = addr.get("region")
    if isinstance(region, dict):
        state = region.get("region_code") or region.get("region")
    else:
        state = addr.get("region_code") or region

    address1, address2 = street_lines(addr.get("street"))

    return compact({
        "firstName": addr.get("firstname"),
        "lastName": addr.get("lastname"),
        "company": addr.get("company"),
        "address1": address1,
        "address2": address2,
        "city": addr.get("city"),
        "stateOrProvince": state,
        "zipCodeOrPostalCode": addr.get("postcode"),
        "country": addr.get("country_id"),
        "phone": addr.get("telephone"),
        "email": addr.get("email"),
    })


def address_to_native(addr: Optional[Dict], email: str) -> Dict[str, Any]:
    """Map an onX Address to a Magento order address.

    Magento rejects order addresses missing name, postcode, country or
    telephone, so placeholders fill the gaps.
    """
    addr = addr or {}
    return compact({
        "firstname": addr.get("firstName") or "Guest",
        "lastname": addr.get("lastName") or "Customer",
        "company": addr.get("company"),
        "street": [line for line in (addr.get("address1"), addr.get("address2")) if line],
        "city": addr.get("city") or "",
        "region_code": addr.get("stateOrProvince"),
        "postcode": addr.get("zipCodeOrPostalCode") or "00000",
        "country_id": addr.get("country") or "US",
        "telephone": addr.get("phone") or "0000000000",
        "email": addr.get("email") or email,
    })


def merge_address_update(current: Dict, update: Dict) -> Dict:
    """Overlay the non-empty fields of an onX Address onto a Magento address."""
    merged = dict(current)
    field_map = {
        "firstName": "firstname",
        "lastName": "lastname",
        "company": "company",
        "city": "city",
        "stateOrProvince": "region_code",
        "zipCodeOrPostalCode": "postcode",
        "country": "country_id",
        "phone": "telephone",
        "email": "email",
    }
    for onx_key, m2_key in field_map.items():
        if update.get(onx_key):
            merged[m2_key] = update[onx_key]
    if update.get("address1"):
        merged["street"] = [update["address1"], update.get("address2") or ""]
    return merged
