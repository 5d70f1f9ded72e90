"""
Return operations — get-returns, create-return.

Adobe Commerce manages returns as RMAs; Magento Open Source has no RMA module
and records refunds as credit memos. Both operations try the RMA resource
first and, when it answers 404/403, repeat the equivalent call against the
credit memo resource. Each operation makes that decision on its own, every
time it runs.

    get-returns     GET  /V1/returns             ->  GET  /V1/creditmemos
    create-return   POST /V1/returns             ->  POST /V1/order/{id}/refund

Credit memos only support id and order id filters; returnNumbers and
statuses apply to RMAs only. outcomes is accepted but has no native filter.
"""

from typing import Any, Dict, List

from ..capability import CapabilityFallbackResolver
from ..records import CreditMemoRecord, RmaRecord
from ..results import OperationContext, canonical_operation
from ..search_criteria import build_search_criteria, ids_filter, temporal_params
from ..translators import ReturnTranslator


@canonical_operation("get-returns")
def get_returns(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    translator = ReturnTranslator(context.vendor_ns)
    resolver = CapabilityFallbackResolver("get-returns")

    _, returns = resolver.resolve(
        lambda: _query_rmas(client, translator, params),
        lambda: _query_credit_memos(client, translator, params),
    )
    return {"returns": returns}


def _query_rmas(client, translator: ReturnTranslator, params: Dict) -> List[Dict[str, Any]]:
    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("order_id", params.get("orderIds")),
        ids_filter("status", params.get("statuses")),
        ids_filter("increment_id", params.get("returnNumbers")),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("returns", criteria)
    return [translator.to_canonical(RmaRecord.from_dict(r)) for r in result.get("items") or []]


def _query_credit_memos(client, translator: ReturnTranslator, params: Dict) -> List[Dict[str, Any]]:
    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("order_id", params.get("orderIds")),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("creditmemos", criteria)
    return [translator.to_canonical(CreditMemoRecord.from_dict(cm)) for cm in result.get("items") or []]


@canonical_operation("create-return")
def create_return(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Create an RMA, or a credit memo where RMAs aren't available."""
    draft = params["return"]
    translator = ReturnTranslator(context.vendor_ns)
    resolver = CapabilityFallbackResolver("create-return")

    def create_rma():
        rma = client.post("returns", translator.to_rma_payload(draft))
        return translator.from_created_rma(rma, draft)

    def create_credit_memo():
        memo_id = client.post(f"order/{draft['orderId']}/refund", translator.to_refund_payload(draft))
        return translator.from_created_credit_memo(memo_id, draft)

    _, created = resolver.resolve(create_rma, create_credit_memo)
    return {"return": created}
