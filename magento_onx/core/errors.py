"""
Errors — Typed failures raised by the transport client and operations.

  MagentoAdapterError     Base class for everything below.
  TransportError          Non-success HTTP response (status, method, endpoint).
  CapabilityAbsentError   404/403 response; the resource looks unsupported or
                          unauthorized on this deployment. Only the capability
                          resolver reacts to it specifically.
  TransportTimeoutError   The request exceeded the configured timeout.
  ValidationError         Caller input failed a precondition before any call.
"""

from typing import Optional


# Human hints appended to TransportError messages for known status codes
STATUS_HINTS = {
    401: "Authentication failed - check M2_ACCESS_TOKEN",
    403: "Forbidden - the integration lacks permission for this resource",
    404: "Resource not found",
    429: "Rate limited - reduce request frequency",
}

CAPABILITY_ABSENT_STATUSES = (403, 404)


class MagentoAdapterError(Exception):
    """Base class for adapter errors."""


class TransportError(MagentoAdapterError):
    """A Magento REST call returned a non-success status.

    Attributes:
        status_code: HTTP status returned by Magento.
        method: HTTP method of the failed call ("GET", "POST", "PUT").
        endpoint: Endpoint path as passed by the caller (e.g., "orders/5").
        detail: Message extracted from the response body.
    """

    def __init__(self, status_code: int, method: str, endpoint: str, detail: str = ""):
        self.status_code = status_code
        self.method = method
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        hint = STATUS_HINTS.get(self.status_code, "")
        context = f"{hint}. " if hint else ""
        return (
            f"Magento API error: {self.method} {self.endpoint} returned "
            f"{self.status_code}. {context}Detail: {self.detail}"
        )


class CapabilityAbsentError(TransportError):
    """404/403 from Magento: the resource is absent or forbidden here."""


class TransportTimeoutError(MagentoAdapterError):
    """A Magento REST call did not complete within the configured timeout."""

    def __init__(self, method: str, endpoint: str, timeout: Optional[float] = None):
        self.method = method
        self.endpoint = endpoint
        self.timeout = timeout
        super().__init__(
            f"Magento API timeout: {method} {endpoint} exceeded {timeout}s"
        )


class ValidationError(MagentoAdapterError):
    """Caller input failed a precondition; no transport call was made."""


def error_for_status(status_code: int, method: str, endpoint: str, detail: str) -> TransportError:
    """Build the typed error matching a non-success status code."""
    if status_code in CAPABILITY_ABSENT_STATUSES:
        return CapabilityAbsentError(status_code, method, endpoint, detail)
    return TransportError(status_code, method, endpoint, detail)
