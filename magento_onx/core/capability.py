"""
Capability Resolver — Picks the Magento resource a deployment supports.

Some onX operations map to resources that only exist on some editions:

    Returns    Adobe Commerce: RMAs (/V1/returns)
               Open Source:    credit memos (/V1/creditmemos, /V1/order/{id}/refund)
    Inventory  MSI (2.3+):     /V1/inventory/source-items
               Legacy:         /V1/stockItems/{sku}

Each call tries the modern resource first. A 404 or 403
(CapabilityAbsentError) means the resource is missing or not granted on
this deployment, and the equivalent legacy call is made once instead. Any
other failure (validation, rate limit, server error, timeout) propagates
untouched so a real error is never reported as a missing feature.

The decision is made fresh on every call; nothing is remembered between
calls.
"""

import enum
import logging
from typing import Callable, Tuple, TypeVar

from .errors import CapabilityAbsentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Capability(enum.Enum):
    MODERN = "modern"
    LEGACY = "legacy"


class CapabilityFallbackResolver:
    """Runs a modern operation with a one-shot legacy fallback.

    Attributes:
        name: Label for log output (e.g., "returns").
    """

    def __init__(self, name: str):
        self.name = name

    def resolve(self, modern: Callable[[], T], legacy: Callable[[], T]) -> Tuple[Capability, T]:
        """Run modern(); on CapabilityAbsentError run legacy() instead.

        Returns:
            (Capability used, result of the call that succeeded).

        Raises:
            Whatever modern() raises other than CapabilityAbsentError, or
            whatever legacy() raises.
        """
        try:
            return Capability.MODERN, modern()
        except CapabilityAbsentError as e:
            logger.info(
                "%s: %s %s returned %s, falling back to legacy resource",
                self.name, e.method, e.endpoint, e.status_code,
            )
        return Capability.LEGACY, legacy()
