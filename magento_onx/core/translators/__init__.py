"""
Translators — One class per onX entity, mapping Magento payloads both ways.

  order.py        OrderTranslator        orders, line items, order create payload
  customer.py     CustomerTranslator     customers and their addresses
  product.py      ProductTranslator      configurable/simple products -> Product
                  VariantTranslator      simple products -> ProductVariant
  fulfillment.py  FulfillmentTranslator  shipments, ship payload
  returns.py      ReturnTranslator       RMAs and credit memos, both write payloads
  inventory.py    InventoryTranslator    MSI source items and legacy stock items

Translators hold only the vendor namespace (and currency for variants) and
keep no state between calls.
"""

from .order import OrderTranslator, status_history_comment
from .customer import CustomerTranslator
from .product import ProductTranslator, VariantTranslator
from .fulfillment import FulfillmentTranslator
from .returns import ReturnTranslator, ORIGIN_RMA, ORIGIN_CREDIT_MEMO
from .inventory import InventoryTranslator
