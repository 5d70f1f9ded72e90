"""
Order Translator — Magento sales order <-> onX Order.

Read direction (GET /V1/orders, /V1/orders/{id}):
  - Configurable products appear twice in order items: a "configurable"
    parent line carrying the price and a "simple" child line carrying the
    real SKU. Only the child is kept so quantities aren't double counted.
  - The shipping address is not a top-level field; it lives in
    extension_attributes.shipping_assignments[0].shipping.address.
  - discount_amount is stored negative; orderDiscount is its magnitude.

Write direction (POST /V1/orders):
  The admin endpoint bypasses cart pricing, so every item needs an explicit
  price and the totals are computed here when the caller leaves them out.
"""

from typing import Any, Dict, List, Optional

from .base import abs_amount, address_to_canonical, address_to_native, compact, custom_field

CONFIGURABLE_TYPE = "configurable"
DEFAULT_CURRENCY = "USD"
DEFAULT_SHIPPING_METHOD = "flatrate"
DEFAULT_PAYMENT_METHOD = "checkmo"
GUEST_EMAIL = "guest@example.com"


class OrderTranslator:
    """Translates orders between the Magento and onX shapes.

    Attributes:
        vendor_ns: Namespace prefix for custom field names.
    """

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def to_canonical(self, m2_order: Dict, include_line_items: bool = True) -> Dict[str, Any]:
        """Translate a Magento order into an onX Order."""
        state = m2_order.get("state")
        payment = m2_order.get("payment")

        order = compact({
            "id": str(m2_order.get("entity_id")),
            "externalId": m2_order.get("ext_order_id") or None,
            "name": m2_order.get("increment_id"),
            "status": state,
            "lineItems": self._line_items(m2_order.get("items") or []) if include_line_items else None,
            "customer": compact({
                "email": m2_order.get("customer_email"),
                "firstName": m2_order.get("customer_firstname"),
                "lastName": m2_order.get("customer_lastname"),
            }),
            "billingAddress": address_to_canonical(m2_order.get("billing_address")),
            "currency": m2_order.get("order_currency_code"),
            "subTotalPrice": m2_order.get("subtotal"),
            "totalPrice": m2_order.get("grand_total"),
            "orderTax": m2_order.get("tax_amount"),
            "orderDiscount": abs_amount(m2_order.get("discount_amount")),
            "orderNote": "",
            "orderSource": "magento2",
            "paymentStatus": "paid" if state == "complete" else state,
            "payments": [{"method": payment.get("method")}] if payment else [],
            "refunds": [],
            "discounts": [],
            "tags": [],
            # ShippingInfo
            "shippingAddress": self._shipping_address(m2_order),
            "shippingCarrier": m2_order.get("shipping_description"),
            "shippingClass": "",
            "shippingCode": m2_order.get("shipping_method") or "",
            "shippingNote": "",
            "shippingPrice": m2_order.get("shipping_amount"),
            "giftNote": "",
            "incoterms": "",
            "createdAt": m2_order.get("created_at"),
            "updatedAt": m2_order.get("updated_at"),
            "customFields": [
                custom_field(self.vendor_ns, "state", state),
                custom_field(self.vendor_ns, "status", m2_order.get("status")),
                custom_field(self.vendor_ns, "store_id", m2_order.get("store_id")),
            ],
        })
        return order

    def _line_items(self, items: List[Dict]) -> List[Dict[str, Any]]:
        return [
            compact({
                "id": str(item.get("item_id")),
                "sku": item.get("sku"),
                "quantity": item.get("qty_ordered"),
                "unitPrice": item.get("price"),
                "unitDiscount": abs_amount(item.get("discount_amount")),
                "totalPrice": item.get("row_total"),
                "name": item.get("name"),
                "customFields": [
                    custom_field(self.vendor_ns, "product_type", item.get("product_type") or "simple"),
                ],
            })
            for item in items
            if item.get("product_type") != CONFIGURABLE_TYPE
        ]

    @staticmethod
    def _shipping_address(m2_order: Dict) -> Optional[Dict[str, Any]]:
        assignments = (m2_order.get("extension_attributes") or {}).get("shipping_assignments") or []
        if not assignments:
            return None
        address = (assignments[0].get("shipping") or {}).get("address")
        return address_to_canonical(address)

    def to_native(self, draft: Dict) -> Dict[str, Any]:
        """Build the POST /V1/orders "entity" payload from an onX order draft."""
        customer = draft.get("customer") or {}
        billing = draft.get("billingAddress") or {}
        email = customer.get("email") or billing.get("email") or GUEST_EMAIL

        items = [self._native_item(li) for li in draft.get("lineItems") or []]

        subtotal = draft.get("subTotalPrice")
        if subtotal is None:
            subtotal = sum(i["row_total"] for i in items)
        shipping_amount = draft.get("shippingPrice") or 0
        discount = draft.get("orderDiscount") or 0
        tax = draft.get("orderTax") or 0
        grand_total = draft.get("totalPrice")
        if grand_total is None:
            grand_total = subtotal + shipping_amount + tax - discount

        billing_addr = address_to_native(billing, email)
        shipping_addr = address_to_native(draft.get("shippingAddress") or billing, email)

        carrier_code = draft.get("shippingCode") or draft.get("shippingCarrier") or DEFAULT_SHIPPING_METHOD
        method_code = draft.get("shippingClass") or DEFAULT_SHIPPING_METHOD
        shipping_method = f"{carrier_code}_{method_code}"

        currency = draft.get("currency") or DEFAULT_CURRENCY
        native_discount = -discount if discount > 0 else 0

        entity = {
            "customer_email": email,
            "customer_firstname": customer.get("firstName") or billing_addr["firstname"],
            "customer_lastname": customer.get("lastName") or billing_addr["lastname"],
            "base_currency_code": currency,
            "global_currency_code": currency,
            "order_currency_code": currency,
            "store_currency_code": currency,
            "store_id": 1,
            "state": draft.get("status") or "new",
            "status": draft.get("status") or "pending",
            "is_virtual": 0,
            "subtotal": subtotal,
            "base_subtotal": subtotal,
            "grand_total": grand_total,
            "base_grand_total": grand_total,
            "shipping_amount": shipping_amount,
            "base_shipping_amount": shipping_amount,
            "tax_amount": tax,
            "base_tax_amount": tax,
            "discount_amount": native_discount,
            "base_discount_amount": native_discount,
            "shipping_description": draft.get("shippingCarrier") or "Flat Rate - Fixed",
            "shipping_method": shipping_method,
            "items": items,
            "billing_address": billing_addr,
            "payment": {"method": DEFAULT_PAYMENT_METHOD},
            "extension_attributes": {
                "shipping_assignments": [
                    {
                        "shipping": {"address": shipping_addr, "method": shipping_method},
                        "items": items,
                    }
                ],
            },
        }

        if draft.get("externalId"):
            entity["ext_order_id"] = draft["externalId"]

        return entity

    @staticmethod
    def _native_item(line_item: Dict) -> Dict[str, Any]:
        price = line_item.get("unitPrice") or 0
        quantity = line_item.get("quantity") or 0
        row_total = line_item.get("totalPrice")
        if row_total is None:
            row_total = price * quantity
        return {
            "sku": line_item.get("sku"),
            "name": line_item.get("name") or line_item.get("sku"),
            "qty_ordered": quantity,
            "price": price,
            "base_price": price,
            "row_total": row_total,
            "base_row_total": row_total,
            "product_type": "simple",
        }


def status_history_comment(comment: str, notify_customer: bool = False) -> Dict[str, Any]:
    """Body for POST /V1/orders/{id}/comments."""
    return {
        "statusHistory": {
            "comment": comment,
            "is_customer_notified": 1 if notify_customer else 0,
            "is_visible_on_front": 0,
        }
    }
