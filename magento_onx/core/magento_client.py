"""
Magento REST Client — Handles all HTTP communication with Adobe Commerce.

This module is responsible for every call the adapter makes to the Magento
store. It uses the admin REST API rather than GraphQL because REST covers the
full admin surface (orders, inventory, shipments, RMAs, credit memos) and
supports searchCriteria filtering.

URL layout:
    {store_url}/rest/{store_view}/{api_version}/{endpoint}

    The store view segment is omitted for the "default" store view, e.g.
    https://magento.example.com/rest/V1/orders

Authentication:
    An integration access token is sent as a Bearer header on the session.

Errors:
    Non-success responses raise TransportError (or CapabilityAbsentError for
    404/403) carrying status code, method and endpoint. The message is
    taken from the JSON body's "message" field when present, else the raw
    response text. A request that exceeds the timeout raises
    TransportTimeoutError.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .errors import TransportTimeoutError, error_for_status
from .search_criteria import SearchCriteria

logger = logging.getLogger(__name__)


class MagentoRESTClient:
    """Client for the Magento 2 admin REST API.

    Manages a requests.Session with the Bearer token and JSON headers set
    once. All API calls go through this single session.

    Attributes:
        store_url: Base URL of the Magento store (trailing slash stripped).
        api_version: REST version segment (e.g., "V1").
        store_view_code: Store view code; "default" adds no URL prefix.
        timeout: Per-request timeout in seconds.
        debug: If True, log response sizes.
    """

    def __init__(
        self,
        store_url: str,
        access_token: str,
        api_version: str = "V1",
        store_view_code: str = "default",
        timeout: float = 30,
        debug: bool = False,
    ):
        self.store_url = store_url.rstrip("/")
        self.api_version = api_version
        self.store_view_code = store_view_code
        self.timeout = timeout
        self.debug = debug
        self._session = requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if access_token:
            self._session.headers.update({"Authorization": f"Bearer {access_token}"})

    def build_url(self, endpoint: str) -> str:
        """Resolve an endpoint path (e.g., "orders/5") to a full REST URL."""
        store_prefix = "" if self.store_view_code == "default" else f"/{self.store_view_code}"
        return f"{self.store_url}/rest{store_prefix}/{self.api_version}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str, criteria: Optional[SearchCriteria] = None) -> Any:
        """GET an endpoint, optionally with searchCriteria query parameters."""
        params = criteria.to_params() if criteria else None
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, body: Any) -> Any:
        """POST a JSON body to an endpoint."""
        return self._request("POST", endpoint, json=body)

    def put(self, endpoint: str, body: Any) -> Any:
        """PUT a JSON body to an endpoint."""
        return self._request("PUT", endpoint, json=body)

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = self.build_url(endpoint)
        logger.debug("%s %s", method, url)

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            raise TransportTimeoutError(method, endpoint, self.timeout) from e

        if not response.ok:
            raise error_for_status(
                response.status_code, method, endpoint, self._error_detail(response)
            )

        if self.debug:
            logger.debug("  %s %s -> %s (%d bytes)", method, endpoint, response.status_code, len(response.content))

        return response.json()

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Extract the message from a Magento error body.

        Magento error bodies look like {"message": "...", "parameters": [...]}.
        Non-JSON bodies (proxies, HTML error pages) are returned as raw text.
        """
        try:
            body: Dict[str, Any] = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return str(body)
