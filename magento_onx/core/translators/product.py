"""
Product Translators — Magento catalog products -> onX Product / ProductVariant.

Magento models a product with variants as a "configurable" parent whose
children are "simple" products. The parent maps to an onX Product; each
simple child maps to an onX ProductVariant.

Product options come from extension_attributes.configurable_product_options.
onX consumers require at least one option, so a product without any gets a
single {"name": "Default", "values": []} option.

Simple products carry no currency, so variant translation takes the store
currency from the caller. selectedOptions are resolved beforehand by
variant_options.resolve_variant_options() when the parent is known.
"""

from typing import Any, Callable, Dict, List, Optional

from ..records import ProductRecord
from .base import compact, custom_field

DEFAULT_OPTION_NAME = "Default"
WEIGHT_UNIT = "lb"
DIMENSION_UNIT = "in"


class ProductTranslator:
    """Translates Magento catalog products into onX Products."""

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def to_canonical(self, product: ProductRecord) -> Dict[str, Any]:
        options = [
            {"name": opt.label, "values": list(opt.values)}
            for opt in product.configurable_options
        ]

        return compact({
            "id": str(product.id),
            "externalId": product.sku,
            "externalProductId": product.sku,
            "name": product.name,
            "description": product.attribute("description"),
            "handle": product.attribute("url_key"),
            "status": "active" if product.status == 1 else "inactive",
            "vendor": product.attribute("manufacturer") or "",
            "categories": list(product.category_ids),
            "options": options or [{"name": DEFAULT_OPTION_NAME, "values": []}],
            "imageURLs": list(product.image_files),
            "tags": [],
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
            "customFields": [
                custom_field(self.vendor_ns, "type_id", product.type_id),
                custom_field(self.vendor_ns, "attribute_set_id", product.attribute_set_id),
            ],
        })


class VariantTranslator:
    """Translates Magento simple products into onX ProductVariants.

    Attributes:
        vendor_ns: Namespace prefix for custom field names.
        currency: Store currency stamped on price and cost.
    """

    def __init__(self, vendor_ns: str, currency: str):
        self.vendor_ns = vendor_ns
        self.currency = currency

    def to_canonical(
        self,
        product: ProductRecord,
        parent_id: Optional[str] = None,
        selected_options: Optional[List[Dict[str, str]]] = None,
    ) -> Dict[str, Any]:
        """Translate one simple product.

        Args:
            product: The simple (child) product.
            parent_id: onX id of the configurable parent, when known. Without
                it the variant carries externalProductId = its own SKU.
            selected_options: Pre-resolved [{"name", "value"}] list.
        """
        special_price = product.attribute("special_price")
        cost = _optional_number(product.attribute("cost"))

        return compact({
            "id": str(product.id),
            "externalId": product.sku,
            "productId": parent_id or None,
            "externalProductId": None if parent_id else product.sku,
            "sku": product.sku,
            "barcode": product.attribute("barcode") or product.attribute("gtin") or None,
            "upc": product.attribute("upc") or None,
            "title": product.name,
            "selectedOptions": list(selected_options or []),
            "price": product.price,
            "currency": self.currency,
            "compareAtPrice": _optional_number(special_price),
            "cost": cost,
            "costCurrency": self.currency if cost is not None else None,
            "inventoryNotTracked": False,
            "weight": {"value": product.weight, "unit": WEIGHT_UNIT} if product.weight else None,
            "dimensions": build_dimensions(product.attribute),
            "imageURLs": list(product.image_files),
            "taxable": True,
            "tags": [],
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
            "customFields": [
                custom_field(self.vendor_ns, "type_id", product.type_id),
            ],
        })


def _number(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _optional_number(value) -> Optional[float]:
    """float(value), or None when the value is empty or not numeric."""
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def build_dimensions(get_attr: Callable[[str], Any]) -> Optional[Dict[str, Any]]:
    """Dimensions from the ts_dimensions_* attributes, or None if all are unset."""
    length = get_attr("ts_dimensions_length")
    width = get_attr("ts_dimensions_width")
    height = get_attr("ts_dimensions_height")

    if not (length or width or height):
        return None

    return {
        "length": _number(length),
        "width": _number(width),
        "height": _number(height),
        "unit": DIMENSION_UNIT,
    }
