"""
Fulfillment operations — fulfill-order, get-fulfillments.

Magento represents fulfillments as shipments. Creating one is a two-step
exchange: POST /V1/order/{id}/ship answers with the new shipment id only,
so the shipment is read back before translation.
"""

from typing import Any, Dict

from ..results import OperationContext, canonical_operation
from ..search_criteria import build_search_criteria, ids_filter, temporal_params
from ..translators import FulfillmentTranslator


@canonical_operation("fulfill-order")
def fulfill_order(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    order_id = str(params["orderId"])
    translator = FulfillmentTranslator(context.vendor_ns)

    shipment_id = client.post(f"order/{order_id}/ship", translator.to_native(params))
    shipment = client.get(f"shipments/{shipment_id}")

    return {"fulfillment": translator.to_canonical(shipment, request=params)}


@canonical_operation("get-fulfillments")
def get_fulfillments(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Query shipments by shipment id or order id."""
    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("order_id", params.get("orderIds")),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("shipments", criteria)

    translator = FulfillmentTranslator(context.vendor_ns)
    return {"fulfillments": [translator.to_canonical(s) for s in result.get("items") or []]}
