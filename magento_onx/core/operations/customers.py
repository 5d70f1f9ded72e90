"""
Customer operations — get-customers.
"""

from typing import Any, Dict

from ..results import OperationContext, canonical_operation
from ..search_criteria import build_search_criteria, ids_filter, temporal_params
from ..translators import CustomerTranslator


@canonical_operation("get-customers")
def get_customers(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Query customers by id or email via GET /V1/customers/search."""
    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("email", params.get("emails")),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("customers/search", criteria)

    translator = CustomerTranslator(context.vendor_ns)
    return {"customers": [translator.to_canonical(c) for c in result.get("items") or []]}
