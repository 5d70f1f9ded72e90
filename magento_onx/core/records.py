"""
Records — Typed views over the Magento payloads the adapter branches on.

Most native payloads are read with dict.get() at the translation boundary.
The shapes below are the ones whose structure drives control flow:

  - Configurable option metadata and custom attributes, which the variant
    option resolver cross-references.
  - Return documents, which differ by deployment edition:
        RmaRecord          Adobe Commerce  GET/POST /V1/returns
        CreditMemoRecord   Open Source     GET /V1/creditmemos, POST /V1/order/{id}/refund
    ReturnDocument is the union of the two; the return translator dispatches
    on the concrete type rather than probing keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class CustomAttribute:
    attribute_code: str
    value: Any

    @classmethod
    def from_dict(cls, data: Dict) -> "CustomAttribute":
        return cls(attribute_code=data.get("attribute_code", ""), value=data.get("value"))


@dataclass
class ConfigurableOption:
    """One entry of extension_attributes.configurable_product_options."""

    attribute_id: int
    label: str
    attribute_code: Optional[str] = None
    values: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "ConfigurableOption":
        return cls(
            attribute_id=data.get("attribute_id"),
            label=data.get("label", ""),
            attribute_code=data.get("attribute_code") or None,
            values=[str(v.get("value_index")) for v in data.get("values") or []],
        )


@dataclass
class ProductRecord:
    """A catalog product (configurable parent or simple child)."""

    id: int
    sku: str
    name: str = ""
    type_id: str = "simple"
    status: Optional[int] = None
    price: Optional[float] = None
    weight: Optional[float] = None
    attribute_set_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    custom_attributes: List[CustomAttribute] = field(default_factory=list)
    configurable_options: List[ConfigurableOption] = field(default_factory=list)
    category_ids: List[str] = field(default_factory=list)
    image_files: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "ProductRecord":
        ext = data.get("extension_attributes") or {}
        return cls(
            id=data.get("id"),
            sku=data.get("sku", ""),
            name=data.get("name", ""),
            type_id=data.get("type_id", "simple"),
            status=data.get("status"),
            price=data.get("price"),
            weight=data.get("weight"),
            attribute_set_id=data.get("attribute_set_id"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            custom_attributes=[
                CustomAttribute.from_dict(a) for a in data.get("custom_attributes") or []
            ],
            configurable_options=[
                ConfigurableOption.from_dict(o)
                for o in ext.get("configurable_product_options") or []
            ],
            category_ids=[str(c.get("category_id")) for c in ext.get("category_links") or []],
            image_files=[img.get("file") for img in data.get("media_gallery_entries") or []],
        )

    def attribute(self, code: str) -> Any:
        """Value of a custom attribute, or None if the product lacks it."""
        for attr in self.custom_attributes:
            if attr.attribute_code == code:
                return attr.value
        return None


@dataclass
class RmaItem:
    order_item_id: int
    qty_requested: float
    entity_id: Optional[int] = None
    product_sku: Optional[str] = None
    product_name: Optional[str] = None
    product_price: Optional[float] = None
    reason: Optional[str] = None
    condition: Optional[str] = None
    resolution: Optional[str] = None


@dataclass
class RmaComment:
    comment: str
    is_visible_on_front: bool = False
    is_customer_notified: bool = False


@dataclass
class RmaRecord:
    """An Adobe Commerce RMA (Magento_Rma)."""

    entity_id: int
    order_id: int
    increment_id: Optional[str] = None
    status: Optional[str] = None
    date_requested: Optional[str] = None
    items: List[RmaItem] = field(default_factory=list)
    comments: List[RmaComment] = field(default_factory=list)
    tracks: List[Dict] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "RmaRecord":
        return cls(
            entity_id=data.get("entity_id"),
            order_id=data.get("order_id"),
            increment_id=data.get("increment_id"),
            status=data.get("status"),
            date_requested=data.get("date_requested"),
            items=[
                RmaItem(
                    order_item_id=item.get("order_item_id"),
                    qty_requested=item.get("qty_requested", 0),
                    entity_id=item.get("entity_id"),
                    product_sku=item.get("product_sku"),
                    product_name=item.get("product_name"),
                    product_price=item.get("product_price"),
                    reason=item.get("reason"),
                    condition=item.get("condition"),
                    resolution=item.get("resolution"),
                )
                for item in data.get("items") or []
            ],
            comments=[
                RmaComment(
                    comment=c.get("comment", ""),
                    is_visible_on_front=bool(c.get("is_visible_on_front")),
                    is_customer_notified=bool(c.get("is_customer_notified")),
                )
                for c in data.get("comments") or []
            ],
            tracks=list(data.get("tracks") or []),
        )


@dataclass
class CreditMemoItem:
    order_item_id: int
    qty: float
    entity_id: Optional[int] = None
    sku: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    row_total: Optional[float] = None


@dataclass
class CreditMemoRecord:
    """A Magento Open Source credit memo (refund document)."""

    entity_id: int
    order_id: int
    increment_id: Optional[str] = None
    invoice_id: Optional[int] = None
    subtotal: Optional[float] = None
    grand_total: Optional[float] = None
    shipping_amount: Optional[float] = None
    adjustment_negative: Optional[float] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    items: List[CreditMemoItem] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "CreditMemoRecord":
        return cls(
            entity_id=data.get("entity_id"),
            order_id=data.get("order_id"),
            increment_id=data.get("increment_id"),
            invoice_id=data.get("invoice_id"),
            subtotal=data.get("subtotal"),
            grand_total=data.get("grand_total"),
            shipping_amount=data.get("shipping_amount"),
            adjustment_negative=data.get("adjustment_negative"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            items=[
                CreditMemoItem(
                    order_item_id=item.get("order_item_id"),
                    qty=item.get("qty", 0),
                    entity_id=item.get("entity_id"),
                    sku=item.get("sku"),
                    name=item.get("name"),
                    price=item.get("price"),
                    row_total=item.get("row_total"),
                )
                for item in data.get("items") or []
            ],
            comments=[c.get("comment", "") for c in data.get("comments") or []],
        )


ReturnDocument = Union[RmaRecord, CreditMemoRecord]
