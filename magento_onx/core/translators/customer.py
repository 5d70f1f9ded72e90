"""
Customer Translator — Magento customer -> onX Customer.

Customer addresses carry default_shipping/default_billing flags instead of
named roles; they become onX address names "shipping", "billing" or "other".
"""

from typing import Any, Dict

from .base import address_to_canonical, compact, custom_field

GENDER_MAP = {1: "male", 2: "female", 3: "not_specified"}


class CustomerTranslator:
    """Translates Magento customers into onX Customers."""

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def to_canonical(self, customer: Dict) -> Dict[str, Any]:
        gender = customer.get("gender")
        return compact({
            "id": str(customer.get("id")),
            "email": customer.get("email"),
            "firstName": customer.get("firstname"),
            "lastName": customer.get("lastname"),
            "phone": "",
            "status": "active",
            "type": "individual",
            "addresses": [
                {"name": self._address_name(addr), "address": address_to_canonical(addr) or {}}
                for addr in customer.get("addresses") or []
            ],
            "notes": "",
            "createdAt": customer.get("created_at"),
            "updatedAt": customer.get("updated_at"),
            "tags": [],
            "customFields": [
                custom_field(self.vendor_ns, "group_id", customer.get("group_id")),
                custom_field(self.vendor_ns, "gender", GENDER_MAP.get(gender, "") if gender else ""),
            ],
        })

    @staticmethod
    def _address_name(addr: Dict) -> str:
        if addr.get("default_shipping"):
            return "shipping"
        if addr.get("default_billing"):
            return "billing"
        return "other"
