"""
magento-onx — onX commerce operations for Magento 2 / Adobe Commerce.

Translates the platform-neutral onX order, customer, catalog, inventory,
fulfillment and return operations into Magento 2 REST calls, and maps the
native responses back into the canonical schema.

  config/   Default settings and required environment variables.
  core/     Transport client, search criteria, translators, operations.
"""

from .core import CommerceAdapter

__version__ = "0.1.0"
