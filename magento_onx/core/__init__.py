"""
Core package — The translation and query-adapter modules.

Each module handles one concern:

  adapter.py           Configuration loading and operation dispatch
  magento_client.py    HTTP communication with Magento (GET/POST/PUT)
  errors.py            Typed transport, timeout and validation errors
  search_criteria.py   onX filters/paging -> Magento searchCriteria
  records.py           Typed views of products, RMAs and credit memos
  translators/         Magento <-> onX entity translation
  variant_options.py   Child selectedOptions from parent option metadata
  capability.py        RMA/credit memo and MSI/legacy fallback
  results.py           Result envelope and operation registry
  operations/          The twelve onX operations
"""

from .adapter import CommerceAdapter
from .magento_client import MagentoRESTClient
from .errors import (
    MagentoAdapterError,
    TransportError,
    CapabilityAbsentError,
    TransportTimeoutError,
    ValidationError,
)
from .search_criteria import SearchCriteria, build_search_criteria, ids_filter
from .capability import Capability, CapabilityFallbackResolver
from .variant_options import resolve_selected_options
from .results import OPERATIONS, OperationContext
