"""
Results — Uniform response envelope and operation registry.

Every onX operation answers with the same envelope:

    {"success": True, "orders": [...]}                       on success
    {"success": False, "error": "get-orders failed: ..."}    on any failure

The canonical_operation decorator enforces this at each operation's entry
point: whatever an operation raises (transport errors, timeouts, validation
errors, translation bugs) is logged and turned into a failure envelope, so
no exception crosses the operation boundary.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

# Operation name -> wrapped callable(client, context, params)
OPERATIONS: Dict[str, Callable[..., Dict[str, Any]]] = {}


@dataclass(frozen=True)
class OperationContext:
    """Adapter-wide settings shared by every operation call.

    Attributes:
        vendor_ns: Namespace prefix for custom field names (default "m2").
        currency: Store currency for variants, which carry none natively.
    """

    vendor_ns: str = "m2"
    currency: str = "USD"


class OperationFailed(Exception):
    """An operation reached a non-exceptional failure (e.g., cancel refused)."""


def success_result(**payload) -> Dict[str, Any]:
    return {"success": True, **payload}


def error_result(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def canonical_operation(name: str):
    """Register an operation and wrap it in the envelope.

    The wrapped function returns the payload dict (e.g. {"orders": [...]})
    and may raise anything; the wrapper returns the envelope.
    """

    def decorator(func: Callable[..., Dict[str, Any]]):
        @functools.wraps(func)
        def wrapper(client, context: OperationContext, params: Dict[str, Any]) -> Dict[str, Any]:
            try:
                return success_result(**func(client, context, params or {}))
            except Exception as e:
                logger.warning("%s failed: %s", name, e)
                logger.debug("%s traceback", name, exc_info=True)
                return error_result(f"{name} failed: {e}")

        wrapper.operation_name = name
        OPERATIONS[name] = wrapper
        return wrapper

    return decorator
