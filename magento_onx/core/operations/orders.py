"""
Order operations — create-order, update-order, cancel-order, get-orders.

Magento's admin API has limited order editing. update-order maps the onX
fields it can:

    status "holded"/"on_hold"  POST /V1/orders/{id}/hold
    status "unhold"            POST /V1/orders/{id}/unhold
    orderNote                  POST /V1/orders/{id}/comments
    billingAddress             merged onto the current address, PUT /V1/orders/{id}

Other fields are accepted and ignored. Every write operation re-reads the
order and returns its current onX shape.
"""

from typing import Any, Dict

from ..results import OperationContext, OperationFailed, canonical_operation
from ..search_criteria import build_search_criteria, ids_filter, temporal_params
from ..translators import OrderTranslator, status_history_comment
from ..translators.base import merge_address_update

HOLD_STATUSES = ("holded", "on_hold")
UNHOLD_STATUS = "unhold"


def _fetch_order(client, order_id: str) -> Dict:
    return client.get(f"orders/{order_id}")


@canonical_operation("create-order")
def create_order(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Create an order from params["order"] via POST /V1/orders."""
    draft = params["order"]
    translator = OrderTranslator(context.vendor_ns)

    m2_order = client.post("orders", {"entity": translator.to_native(draft)})

    if draft.get("orderNote"):
        client.post(
            f"orders/{m2_order['entity_id']}/comments",
            status_history_comment(draft["orderNote"]),
        )

    return {"order": translator.to_canonical(m2_order)}


@canonical_operation("update-order")
def update_order(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    order_id = str(params["id"])
    updates = params.get("updates") or {}

    status = updates.get("status")
    if status in HOLD_STATUSES:
        client.post(f"orders/{order_id}/hold", {})
    elif status == UNHOLD_STATUS:
        client.post(f"orders/{order_id}/unhold", {})

    if updates.get("orderNote"):
        client.post(f"orders/{order_id}/comments", status_history_comment(updates["orderNote"]))

    if updates.get("billingAddress"):
        current = _fetch_order(client, order_id)
        if current.get("billing_address"):
            address = merge_address_update(current["billing_address"], updates["billingAddress"])
            client.put(
                f"orders/{order_id}",
                {"entity": {"entity_id": int(order_id), "billing_address": address}},
            )

    translator = OrderTranslator(context.vendor_ns)
    return {"order": translator.to_canonical(_fetch_order(client, order_id))}


@canonical_operation("cancel-order")
def cancel_order(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Cancel an order; Magento answers false for non-cancellable orders."""
    order_id = str(params["orderId"])

    if not client.post(f"orders/{order_id}/cancel", {}):
        raise OperationFailed(
            f"Order {order_id} could not be cancelled. It may be shipped, "
            "completed, or in a non-cancellable state."
        )

    reason = " - ".join(p for p in (params.get("reason"), params.get("notes")) if p)
    if reason:
        client.post(
            f"orders/{order_id}/comments",
            status_history_comment(
                f"Cancelled via onX: {reason}",
                notify_customer=bool(params.get("notifyCustomer")),
            ),
        )

    translator = OrderTranslator(context.vendor_ns)
    return {"order": translator.to_canonical(_fetch_order(client, order_id))}


@canonical_operation("get-orders")
def get_orders(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Query orders by id, external id, state or increment id (onX "name")."""
    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("ext_order_id", params.get("externalIds")),
        ids_filter("state", params.get("statuses")),
        ids_filter("increment_id", params.get("names")),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("orders", criteria)

    include_line_items = params.get("includeLineItems") is not False
    translator = OrderTranslator(context.vendor_ns)
    orders = [
        translator.to_canonical(o, include_line_items=include_line_items)
        for o in result.get("items") or []
    ]
    return {"orders": orders}
