"""
Fulfillment Translator — Magento shipment <-> onX Fulfillment.

A shipment's tracks become trackingNumbers; the first track supplies the
carrier title and code. With MSI enabled the shipping source is in
extension_attributes.source_code and maps to locationId.
"""

from typing import Any, Dict, List, Optional

from .base import address_to_canonical, compact, custom_field

SHIPPING_INFO_FIELDS = (
    "shippingClass",
    "shippingNote",
    "shippingPrice",
    "giftNote",
    "incoterms",
    "expectedShipDate",
    "expectedDeliveryDate",
    "shipByDate",
)


class FulfillmentTranslator:
    """Translates shipments into onX Fulfillments and ship requests back."""

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def to_canonical(self, shipment: Dict, request: Optional[Dict] = None) -> Dict[str, Any]:
        """Translate a shipment.

        Args:
            shipment: GET /V1/shipments/{id} response or list item.
            request: The fulfill-order parameters when translating a shipment
                just created; its ShippingInfo fields fill what Magento
                doesn't store.
        """
        request = request or {}
        tracks = shipment.get("tracks") or []
        primary = tracks[0] if tracks else {}
        ext = shipment.get("extension_attributes") or {}

        fulfillment = {
            "id": str(shipment.get("entity_id")),
            "orderId": str(request.get("orderId") or shipment.get("order_id")),
            "status": "shipped",
            "lineItems": [
                compact({
                    "id": str(item.get("entity_id") or ""),
                    "sku": item.get("sku"),
                    "quantity": item.get("qty"),
                    "name": item.get("name") or "",
                })
                for item in shipment.get("items") or []
            ],
            "trackingNumbers": [t.get("track_number") for t in tracks],
            "shippingAddress": address_to_canonical(shipment.get("shipping_address")),
            "shippingCarrier": primary.get("title") or request.get("shippingCarrier"),
            "shippingCode": primary.get("carrier_code") or request.get("shippingCode"),
            "locationId": request.get("locationId") or ext.get("source_code") or None,
            "tags": list(request.get("tags") or []),
            "customFields": list(request.get("customFields") or []) + [
                custom_field(self.vendor_ns, "shipment_id", shipment.get("entity_id")),
                custom_field(self.vendor_ns, "increment_id", shipment.get("increment_id") or ""),
            ],
            "createdAt": shipment.get("created_at"),
            "updatedAt": shipment.get("updated_at"),
        }
        for key in SHIPPING_INFO_FIELDS:
            fulfillment[key] = request.get(key)

        return compact(fulfillment)

    @staticmethod
    def to_native(request: Dict) -> Dict[str, Any]:
        """Build the POST /V1/order/{id}/ship payload from fulfill-order params."""
        payload: Dict[str, Any] = {"notify": True}

        tracking_numbers: List[str] = request.get("trackingNumbers") or []
        if tracking_numbers:
            carrier_code = request.get("shippingCode") or request.get("shippingCarrier") or "custom"
            title = request.get("shippingCarrier") or "Carrier"
            payload["tracks"] = [
                {"carrier_code": carrier_code, "title": title, "track_number": number}
                for number in tracking_numbers
            ]

        if request.get("shippingNote"):
            payload["comment"] = {"comment": request["shippingNote"], "is_visible_on_front": 0}

        if request.get("locationId"):
            payload["arguments"] = {
                "extension_attributes": {"source_code": request["locationId"]},
            }

        return payload
