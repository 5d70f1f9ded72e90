"""
Return Translator — Magento RMAs and credit memos <-> onX Return.

Returns are backed by different documents depending on the edition:

  rma           Adobe Commerce RMA. Carries per-item inspection detail
                (condition, resolution), reasons, tracks and comments, but no
                money: refunds happen later through a credit memo.
  credit_memo   Open Source refund document. Carries the financial
                aggregates (subtotal, grand total, shipping refund, negative
                adjustment as restocking fee) but no inspection detail.

Both become the same onX Return. The origin is always recorded in the
"<ns>:return_type" custom field, and each origin leaves the other's field
subset out entirely: an RMA return has no financial aggregate keys and a
credit memo return has no line-item inspection keys.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..records import CreditMemoRecord, ReturnDocument, RmaRecord
from .base import abs_amount, compact, custom_field

ORIGIN_RMA = "rma"
ORIGIN_CREDIT_MEMO = "credit_memo"

# Present only on credit memo returns
FINANCIAL_FIELDS = (
    "returnTotal",
    "exchangeTotal",
    "refundAmount",
    "refundMethod",
    "refundStatus",
    "refundTransactionId",
    "shippingRefundAmount",
    "returnShippingFees",
    "restockingFee",
    "completedAt",
)

# Present only on RMA return line items
INSPECTION_FIELDS = ("inspection",)

# Echoed back from a create-return request on either origin
PASSTHROUGH_FIELDS = (
    "returnMethod",
    "returnShippingAddress",
    "locationId",
    "receivedAt",
    "returnInstructions",
    "declineReason",
    "statusPageUrl",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _total_quantity(line_items: List[Dict]) -> float:
    return sum(li.get("quantityReturned") or 0 for li in line_items)


def _join_comments(comments: List[str]) -> Optional[str]:
    return "; ".join(c for c in comments if c) or None


class ReturnTranslator:
    """Translates return documents of either origin into onX Returns."""

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def to_canonical(self, document: ReturnDocument) -> Dict[str, Any]:
        if isinstance(document, RmaRecord):
            return self._from_rma(document)
        if isinstance(document, CreditMemoRecord):
            return self._from_credit_memo(document)
        raise TypeError(f"Unsupported return document: {type(document).__name__}")

    def _origin_field(self, origin: str) -> Dict[str, str]:
        return custom_field(self.vendor_ns, "return_type", origin)

    # ------------------------------------------------------------------
    # Read direction
    # ------------------------------------------------------------------

    def _from_rma(self, rma: RmaRecord) -> Dict[str, Any]:
        line_items = [
            compact({
                "id": str(item.entity_id or ""),
                "orderLineItemId": str(item.order_item_id),
                "sku": item.product_sku or "",
                "quantityReturned": item.qty_requested,
                "returnReason": item.reason or "",
                "inspection": compact({
                    "conditionCategory": item.condition or None,
                    "dispositionOutcome": item.resolution or None,
                    "note": "",
                }),
                "unitPrice": item.product_price or None,
                "name": item.product_name or "",
            })
            for item in rma.items
        ]

        return compact({
            "id": str(rma.entity_id),
            "returnNumber": rma.increment_id,
            "orderId": str(rma.order_id),
            "status": rma.status or "requested",
            "outcome": "refund",
            "returnLineItems": line_items,
            "exchangeLineItems": [],
            "totalQuantity": _total_quantity(line_items),
            "labels": [
                {"carrier": t.get("carrier_title") or "", "trackingNumber": t.get("track_number") or ""}
                for t in rma.tracks
            ],
            "requestedAt": rma.date_requested,
            "customerNote": _join_comments([c.comment for c in rma.comments if c.is_visible_on_front]),
            "internalNote": _join_comments([c.comment for c in rma.comments if not c.is_visible_on_front]),
            "tags": [],
            "customFields": [
                self._origin_field(ORIGIN_RMA),
                custom_field(self.vendor_ns, "rma_entity_id", rma.entity_id),
            ],
            "createdAt": rma.date_requested,
            "updatedAt": rma.date_requested,
        })

    def _from_credit_memo(self, memo: CreditMemoRecord) -> Dict[str, Any]:
        line_items = [
            compact({
                "id": str(item.entity_id or ""),
                "orderLineItemId": str(item.order_item_id),
                "sku": item.sku or "",
                "quantityReturned": item.qty,
                "returnReason": "",
                "unitPrice": item.price or None,
                "refundAmount": item.row_total or None,
                "name": item.name or "",
            })
            for item in memo.items
        ]

        return compact({
            "id": str(memo.entity_id),
            "returnNumber": memo.increment_id,
            "orderId": str(memo.order_id),
            "status": "refunded",
            "outcome": "refund",
            "returnLineItems": line_items,
            "exchangeLineItems": [],
            "totalQuantity": _total_quantity(line_items),
            "labels": [],
            # Financial aggregates
            "returnTotal": memo.subtotal,
            "refundAmount": memo.grand_total,
            "refundMethod": "original_payment",
            "refundStatus": "refunded",
            "shippingRefundAmount": memo.shipping_amount or 0,
            "restockingFee": abs_amount(memo.adjustment_negative),
            "requestedAt": memo.created_at,
            "completedAt": memo.created_at,
            "customerNote": _join_comments(memo.comments),
            "tags": [],
            "customFields": [
                self._origin_field(ORIGIN_CREDIT_MEMO),
                custom_field(self.vendor_ns, "creditmemo_id", memo.entity_id),
                custom_field(self.vendor_ns, "invoice_id", memo.invoice_id or ""),
            ],
            "createdAt": memo.created_at,
            "updatedAt": memo.updated_at,
        })

    # ------------------------------------------------------------------
    # Write direction
    # ------------------------------------------------------------------

    @staticmethod
    def to_rma_payload(draft: Dict) -> Dict[str, Any]:
        """Body for POST /V1/returns."""
        customer_note = draft.get("customerNote")
        return {
            "rmaDataInterface": {
                "order_id": int(draft["orderId"]),
                "items": [
                    {
                        "order_item_id": int(item["orderLineItemId"]),
                        "qty_requested": item["quantityReturned"],
                        "reason": item.get("returnReason", ""),
                        "condition": (item.get("inspection") or {}).get("conditionCategory") or "",
                    }
                    for item in draft.get("returnLineItems") or []
                ],
                "comments": [
                    {"comment": customer_note, "is_customer_notified": True, "is_visible_on_front": True}
                ] if customer_note else [],
            }
        }

    @staticmethod
    def to_refund_payload(draft: Dict) -> Dict[str, Any]:
        """Body for POST /V1/order/{id}/refund (creates a credit memo)."""
        return {
            "items": [
                {"order_item_id": int(item["orderLineItemId"]), "qty": item["quantityReturned"]}
                for item in draft.get("returnLineItems") or []
            ],
            "notify": True,
            "comment": {
                "comment": draft.get("customerNote") or f"Return via onX: {draft.get('outcome')}",
                "is_visible_on_front": 0,
            },
            "arguments": {
                "shipping_amount": draft.get("shippingRefundAmount") or 0,
                "adjustment_positive": 0,
                "adjustment_negative": draft.get("restockingFee") or 0,
            },
        }

    def from_created_rma(self, rma: Dict, draft: Dict) -> Dict[str, Any]:
        """onX Return for an RMA just created from draft."""
        now = _now()
        requested_at = rma.get("date_requested") or draft.get("requestedAt") or now
        line_items = [dict(li) for li in draft.get("returnLineItems") or []]

        result = {
            "id": str(rma.get("entity_id")),
            "returnNumber": rma.get("increment_id") or draft.get("returnNumber"),
            "orderId": draft.get("orderId"),
            "status": rma.get("status") or "requested",
            "outcome": draft.get("outcome"),
            "returnLineItems": line_items,
            "exchangeLineItems": list(draft.get("exchangeLineItems") or []),
            "totalQuantity": draft.get("totalQuantity") or _total_quantity(line_items),
            "labels": list(draft.get("labels") or []),
            "requestedAt": requested_at,
            "customerNote": draft.get("customerNote"),
            "internalNote": draft.get("internalNote"),
            "tags": list(draft.get("tags") or []),
            "customFields": self._without_origin(draft.get("customFields")) + [
                self._origin_field(ORIGIN_RMA),
                custom_field(self.vendor_ns, "rma_entity_id", rma.get("entity_id")),
            ],
            "createdAt": requested_at,
            "updatedAt": requested_at,
        }
        for key in PASSTHROUGH_FIELDS:
            result[key] = draft.get(key)
        return compact(result)

    def from_created_credit_memo(self, credit_memo_id: Any, draft: Dict) -> Dict[str, Any]:
        """onX Return for a credit memo just created from draft.

        POST /V1/order/{id}/refund answers with the new credit memo id only,
        so the rest of the Return is echoed from the draft.
        """
        now = _now()
        line_items = [
            {k: v for k, v in li.items() if k not in INSPECTION_FIELDS}
            for li in draft.get("returnLineItems") or []
        ]
        memo_id = credit_memo_id.get("entity_id") if isinstance(credit_memo_id, dict) else credit_memo_id

        result = {
            "id": str(memo_id),
            "returnNumber": draft.get("returnNumber"),
            "orderId": draft.get("orderId"),
            "status": "refunded",
            "outcome": draft.get("outcome"),
            "returnLineItems": line_items,
            "exchangeLineItems": list(draft.get("exchangeLineItems") or []),
            "totalQuantity": draft.get("totalQuantity") or _total_quantity(line_items),
            "labels": list(draft.get("labels") or []),
            "returnTotal": draft.get("returnTotal"),
            "refundAmount": draft.get("refundAmount"),
            "refundMethod": "original_payment",
            "refundStatus": "refunded",
            "shippingRefundAmount": draft.get("shippingRefundAmount") or 0,
            "returnShippingFees": draft.get("returnShippingFees") or 0,
            "restockingFee": draft.get("restockingFee") or 0,
            "requestedAt": draft.get("requestedAt") or now,
            "completedAt": now,
            "customerNote": draft.get("customerNote"),
            "internalNote": draft.get("internalNote")
            or "RMA not available - processed as credit memo (Magento Open Source)",
            "tags": list(draft.get("tags") or []),
            "customFields": self._without_origin(draft.get("customFields")) + [
                self._origin_field(ORIGIN_CREDIT_MEMO),
                custom_field(self.vendor_ns, "creditmemo_id", memo_id),
            ],
            "createdAt": now,
            "updatedAt": now,
        }
        for key in PASSTHROUGH_FIELDS:
            result[key] = draft.get(key)
        return compact(result)

    def _without_origin(self, fields: Optional[List[Dict]]) -> List[Dict]:
        """Caller custom fields minus any origin tag; the adapter sets its own."""
        origin_name = f"{self.vendor_ns}:return_type"
        return [f for f in fields or [] if f.get("name") != origin_name]
