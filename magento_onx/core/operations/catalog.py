"""
Catalog operations — get-products, get-product-variants.

get-product-variants has two modes:

  productIds given   For each parent id: look the parent up, fetch its
                     children from GET /V1/configurable-products/{sku}/children
                     and resolve each child's selectedOptions against the
                     parent's configurable options. Parents are independent;
                     one that fails (not found, not configurable) is logged
                     and left out of the result.
  otherwise          Query simple products directly by id/sku. The parent is
                     unknown in this mode, so variants carry
                     externalProductId instead of productId.
"""

import logging
from typing import Any, Dict, List
from urllib.parse import quote

from ..records import ProductRecord
from ..results import OperationContext, canonical_operation
from ..search_criteria import (
    SearchCriteria,
    FilterGroup,
    build_search_criteria,
    eq_filter,
    ids_filter,
    temporal_params,
)
from ..translators import ProductTranslator, VariantTranslator
from ..variant_options import resolve_variant_options

logger = logging.getLogger(__name__)

SIMPLE_TYPE = "simple"


@canonical_operation("get-products")
def get_products(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    """Query products by id or SKU; a single SKU uses GET /V1/products/{sku}."""
    translator = ProductTranslator(context.vendor_ns)
    skus = params.get("skus") or []

    if len(skus) == 1:
        product = client.get(f"products/{quote(skus[0], safe='')}")
        return {"products": [translator.to_canonical(ProductRecord.from_dict(product))]}

    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("sku", skus),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("products", criteria)

    products = [
        translator.to_canonical(ProductRecord.from_dict(p)) for p in result.get("items") or []
    ]
    return {"products": products}


@canonical_operation("get-product-variants")
def get_product_variants(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    translator = VariantTranslator(context.vendor_ns, context.currency)

    if params.get("productIds"):
        variants = []
        for parent_id in params["productIds"]:
            try:
                variants.extend(_variants_for_parent(client, translator, str(parent_id)))
            except Exception as e:
                logger.warning("Skipping variants of product %s: %s", parent_id, e)
        return {"productVariants": variants}

    extra_filters = [
        ids_filter("entity_id", params.get("ids")),
        ids_filter("sku", params.get("skus")),
        eq_filter("type_id", SIMPLE_TYPE),
    ]
    criteria = build_search_criteria(extra_filters=extra_filters, **temporal_params(params))
    result = client.get("products", criteria)

    variants = [
        translator.to_canonical(ProductRecord.from_dict(p)) for p in result.get("items") or []
    ]
    return {"productVariants": variants}


def _variants_for_parent(client, translator: VariantTranslator, parent_id: str) -> List[Dict[str, Any]]:
    """Translate every child of one configurable parent."""
    criteria = SearchCriteria(
        filter_groups=[FilterGroup([eq_filter("entity_id", parent_id)])],
        page_size=1,
    )
    result = client.get("products", criteria)
    items = result.get("items") or []
    if not items:
        logger.info("Product %s not found, no variants", parent_id)
        return []

    parent = ProductRecord.from_dict(items[0])
    response = client.get(f"configurable-products/{quote(parent.sku, safe='')}/children")

    children = [ProductRecord.from_dict(c) for c in response or []]
    selected = resolve_variant_options(parent.configurable_options, children)
    return [
        translator.to_canonical(child, parent_id=parent_id, selected_options=selected[child.sku])
        for child in children
    ]
