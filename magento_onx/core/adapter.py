"""
Commerce Adapter — Configuration and dispatch for the onX operations.

This module ties the adapter together: it loads configuration from the
environment, builds the Magento REST client once, and dispatches named onX
operations to the registered operation functions.

Configuration:
    All settings are loaded from environment variables (typically via .env file).
    Required: M2_BASE_URL, M2_ACCESS_TOKEN.
    See config/settings.py for defaults.

Typical usage:
    adapter = CommerceAdapter(env_file="./.env")
    if adapter.validate_config():
        result = adapter.run("get-orders", {"ids": ["12"]})

The settings read here (store URL, namespace, currency, timeout) are fixed
for the adapter's lifetime. Nothing learned during a call, such as which
returns backend the store supports, is kept for the next one.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..config import DEFAULT_SETTINGS, REQUIRED_ENV_VARS
from .magento_client import MagentoRESTClient
from .results import OPERATIONS, OperationContext, error_result
from . import operations  # noqa: F401  (registers the operations)

# Names used by other onX adapters for the same operation
OPERATION_ALIASES = {
    "create-sales-order": "create-order",
}


class CommerceAdapter:
    """Runs onX operations against one Magento store.

    Attributes:
        store_url: Base URL of the Magento store (e.g., "https://magento.example.com").
        access_token: Integration access token sent as a Bearer header.
        api_version: REST API version segment (default: "V1").
        store_view_code: Store view code (default: "default").
        timeout: Per-request timeout in seconds (default: 30).
        currency: Store currency for variants (default: "USD").
        vendor_ns: Custom field namespace (default: "m2").
        debug: Whether to enable verbose transport logging (default: False).
    """

    def __init__(self, env_file: str = "./.env", client: Optional[MagentoRESTClient] = None):
        """Initialize the adapter by loading configuration from environment.

        Args:
            env_file: Path to a .env file. If the file exists, it is loaded via
                      python-dotenv. Otherwise, falls back to system environment.
            client: Pre-built transport client; built from the settings when None.
        """
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)

        # Magento connection (required)
        self.store_url = os.getenv("M2_BASE_URL", "").rstrip("/")
        self.access_token = os.getenv("M2_ACCESS_TOKEN", "")

        self.api_version = os.getenv("M2_API_VERSION", DEFAULT_SETTINGS["M2_API_VERSION"])
        self.store_view_code = os.getenv("M2_STORE_VIEW", DEFAULT_SETTINGS["M2_STORE_VIEW"])
        self.timeout = float(os.getenv("M2_TIMEOUT", str(DEFAULT_SETTINGS["M2_TIMEOUT"])))
        self.currency = os.getenv("M2_STORE_CURRENCY", DEFAULT_SETTINGS["M2_STORE_CURRENCY"])
        self.vendor_ns = os.getenv("ONX_VENDOR_NAMESPACE", DEFAULT_SETTINGS["ONX_VENDOR_NAMESPACE"])
        self.debug = os.getenv("DEBUG", str(DEFAULT_SETTINGS["DEBUG"])).lower() == "true"

        self._client = client

    @property
    def client(self) -> MagentoRESTClient:
        """The transport client, built on first use."""
        if self._client is None:
            self._client = MagentoRESTClient(
                self.store_url,
                self.access_token,
                api_version=self.api_version,
                store_view_code=self.store_view_code,
                timeout=self.timeout,
                debug=self.debug,
            )
        return self._client

    @property
    def context(self) -> OperationContext:
        return OperationContext(vendor_ns=self.vendor_ns, currency=self.currency)

    def validate_config(self) -> bool:
        """Validate that all required configuration values are present.

        Returns:
            True if all required values are present, False otherwise.
            Prints specific error messages for each missing value.
        """
        values = {"M2_BASE_URL": self.store_url, "M2_ACCESS_TOKEN": self.access_token}
        errors = [f"{key} is required" for key in REQUIRED_ENV_VARS if not values[key]]

        if errors:
            print("\nConfiguration Errors:")
            for err in errors:
                print(f"  - {err}")
            return False
        return True

    @staticmethod
    def operation_names():
        return sorted(set(OPERATIONS) | set(OPERATION_ALIASES))

    def run(self, operation: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run one onX operation by name.

        Returns:
            The operation's envelope; an unknown operation name also yields a
            failure envelope rather than raising.
        """
        name = OPERATION_ALIASES.get(operation, operation)
        func = OPERATIONS.get(name)
        if func is None:
            return error_result(f"Unknown operation: {operation}")
        return func(self.client, self.context, params or {})
