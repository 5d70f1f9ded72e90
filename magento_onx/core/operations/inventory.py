"""
Inventory operations — get-inventory.

Stock is read from MSI source items (Magento 2.3+) when the deployment has
them; otherwise from the legacy per-SKU stock item endpoint. The choice is
made by CapabilityFallbackResolver on every call.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..capability import CapabilityFallbackResolver
from ..errors import TransportError, ValidationError
from ..results import OperationContext, canonical_operation
from ..search_criteria import FilterGroup, SearchCriteria, ids_filter
from ..translators import InventoryTranslator

logger = logging.getLogger(__name__)

# Source items returned per requested SKU in one MSI page
SOURCES_PER_SKU = 10


@canonical_operation("get-inventory")
def get_inventory(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
    skus = list(params.get("skus") or [])
    if not skus:
        raise ValidationError("At least one SKU is required")

    translator = InventoryTranslator(context.vendor_ns)
    resolver = CapabilityFallbackResolver("inventory")

    _, inventory = resolver.resolve(
        lambda: _msi_inventory(client, translator, skus, params.get("locationIds")),
        lambda: _legacy_inventory(client, translator, skus),
    )
    return {"inventory": inventory}


def _msi_inventory(
    client, translator: InventoryTranslator, skus: List[str], location_ids: Optional[List[str]]
) -> List[Dict[str, Any]]:
    groups = [FilterGroup([ids_filter("sku", skus)])]
    location_filter = ids_filter("source_code", location_ids)
    if location_filter:
        groups.append(FilterGroup([location_filter]))

    criteria = SearchCriteria(filter_groups=groups, page_size=len(skus) * SOURCES_PER_SKU)
    result = client.get("inventory/source-items", criteria)
    return [translator.from_source_item(item) for item in result.get("items") or []]


def _legacy_inventory(client, translator: InventoryTranslator, skus: List[str]) -> List[Dict[str, Any]]:
    """One stock item call per SKU; SKUs Magento answers 404 for are left out."""
    records = []
    for sku in skus:
        try:
            stock_item = client.get(f"stockItems/{quote(sku, safe='')}")
        except TransportError as e:
            if e.status_code != 404:
                raise
            logger.info("No legacy stock for %s: %s", sku, e)
            continue
        records.append(translator.from_stock_item(sku, stock_item))
    return records
