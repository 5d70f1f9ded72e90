"""
Operations — The twelve onX operations, registered by name on import.

  Actions:  create-order, update-order, cancel-order, fulfill-order, create-return
  Queries:  get-orders, get-customers, get-products, get-product-variants,
            get-inventory, get-fulfillments, get-returns

Each operation takes (client, context, params) and returns the result
envelope; see results.canonical_operation.
"""

from .orders import create_order, update_order, cancel_order, get_orders
from .customers import get_customers
from .catalog import get_products, get_product_variants
from .inventory import get_inventory
from .fulfillments import fulfill_order, get_fulfillments
from .returns import get_returns, create_return
