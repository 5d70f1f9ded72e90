"""
Inventory Translator — MSI source items and legacy stock items -> onX InventoryRecord.

Magento only reports a single quantity per source, so available and onHand
are the same and unavailable is always 0. Legacy (pre-MSI) stock has no
sources; its records use the "default" location.
"""

from typing import Any, Dict

LEGACY_LOCATION = "default"


class InventoryTranslator:
    """Translates Magento stock data into onX InventoryRecords.

    tenantId carries the vendor namespace; Magento has no tenant concept.
    """

    def __init__(self, vendor_ns: str):
        self.vendor_ns = vendor_ns

    def from_source_item(self, item: Dict) -> Dict[str, Any]:
        """Map a GET /V1/inventory/source-items entry."""
        return self._record(item.get("sku"), item.get("source_code"), item.get("quantity"))

    def from_stock_item(self, sku: str, stock_item: Dict) -> Dict[str, Any]:
        """Map a GET /V1/stockItems/{sku} response."""
        return self._record(sku, LEGACY_LOCATION, stock_item.get("qty"))

    def _record(self, sku, location_id, quantity) -> Dict[str, Any]:
        quantity = quantity or 0
        return {
            "sku": sku,
            "locationId": location_id,
            "available": quantity,
            "onHand": quantity,
            "unavailable": 0,
            "tenantId": self.vendor_ns,
        }
