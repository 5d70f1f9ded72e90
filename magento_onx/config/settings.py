"""
Settings — Default configuration values for the Magento onX adapter.

This module provides the DEFAULT_SETTINGS dict that the adapter uses as
fallback values when environment variables are not set. The actual configuration
is loaded from .env at runtime; these defaults let the adapter work out of the
box against a default store view.

Configuration precedence (highest to lowest):
  1. CLI flags (--debug)
  2. Environment variables (from .env file)
  3. DEFAULT_SETTINGS (this file)

Settings reference:
  M2_API_VERSION          REST API version segment in every URL (default: V1)
  M2_TIMEOUT              Per-request timeout in seconds (default: 30)
  M2_STORE_VIEW           Store view code; "default" adds no URL prefix
  M2_STORE_CURRENCY       Currency stamped on variants (simple products carry none)
  ONX_VENDOR_NAMESPACE    Prefix for custom field names (e.g., "m2:state")
  DEBUG                   Whether to log verbose transport output (default: False)
"""

DEFAULT_SETTINGS = {
    "M2_API_VERSION": "V1",
    "M2_TIMEOUT": 30,
    "M2_STORE_VIEW": "default",
    "M2_STORE_CURRENCY": "USD",
    "ONX_VENDOR_NAMESPACE": "m2",
    "DEBUG": False,
}

REQUIRED_ENV_VARS = [
    "M2_BASE_URL",
    "M2_ACCESS_TOKEN",
]
