"""
Search Criteria — Builds Magento searchCriteria query parameters.

Magento list endpoints (GET /V1/orders, /V1/products, /V1/customers/search, ...)
accept a nested searchCriteria structure flattened into query parameters:

    searchCriteria[filterGroups][0][filters][0][field]=created_at
    searchCriteria[filterGroups][0][filters][0][value]=2024-01-01
    searchCriteria[filterGroups][0][filters][0][conditionType]=gteq
    searchCriteria[sortOrders][0][field]=created_at
    searchCriteria[sortOrders][0][direction]=DESC
    searchCriteria[currentPage]=1
    searchCriteria[pageSize]=10

Filters inside one group are ORed by Magento; groups are ANDed. This adapter
only ever emits single-filter groups, so every filter narrows the result.

onX paginates with skip/pageSize while Magento uses 1-indexed pages, so the
page is derived as skip // pageSize + 1.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

DEFAULT_PAGE_SIZE = 10

CONDITION_EQ = "eq"
CONDITION_IN = "in"
CONDITION_GTEQ = "gteq"
CONDITION_LTEQ = "lteq"


@dataclass
class Filter:
    field: str
    value: str
    condition_type: Optional[str] = CONDITION_EQ


@dataclass
class FilterGroup:
    filters: List[Filter] = field(default_factory=list)


@dataclass
class SortOrder:
    field: str
    direction: str = "DESC"


@dataclass
class SearchCriteria:
    """A Magento search request.

    filter_groups is None, never an empty list, when nothing is filtered so
    "no constraint" can't be confused with "match nothing".
    """

    filter_groups: Optional[List[FilterGroup]] = None
    sort_orders: Optional[List[SortOrder]] = None
    current_page: Optional[int] = None
    page_size: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        """Flatten into the searchCriteria[...] query parameter dict."""
        params = {}

        for gi, group in enumerate(self.filter_groups or []):
            for fi, flt in enumerate(group.filters):
                prefix = f"searchCriteria[filterGroups][{gi}][filters][{fi}]"
                params[f"{prefix}[field]"] = flt.field
                params[f"{prefix}[value]"] = flt.value
                if flt.condition_type:
                    params[f"{prefix}[conditionType]"] = flt.condition_type

        for i, sort in enumerate(self.sort_orders or []):
            params[f"searchCriteria[sortOrders][{i}][field]"] = sort.field
            params[f"searchCriteria[sortOrders][{i}][direction]"] = sort.direction

        if self.current_page is not None:
            params["searchCriteria[currentPage]"] = str(self.current_page)
        if self.page_size is not None:
            params["searchCriteria[pageSize]"] = str(self.page_size)

        return params


def ids_filter(field_name: str, ids: Optional[Sequence[str]]) -> Optional[Filter]:
    """Build one membership filter over a list of values.

    The values are comma-joined into a single "in" filter. An empty or
    missing list yields None so callers never send a filter that matches
    nothing.
    """
    if not ids:
        return None
    return Filter(field=field_name, value=",".join(str(i) for i in ids), condition_type=CONDITION_IN)


def eq_filter(field_name: str, value) -> Filter:
    return Filter(field=field_name, value=str(value), condition_type=CONDITION_EQ)


def build_search_criteria(
    created_at_min: Optional[str] = None,
    created_at_max: Optional[str] = None,
    updated_at_min: Optional[str] = None,
    updated_at_max: Optional[str] = None,
    skip: Optional[int] = None,
    page_size: Optional[int] = None,
    extra_filters: Optional[Sequence[Optional[Filter]]] = None,
) -> SearchCriteria:
    """Translate onX temporal/paging parameters into a SearchCriteria.

    Args:
        created_at_min/created_at_max: Inclusive created_at bounds (ISO-8601).
        updated_at_min/updated_at_max: Inclusive updated_at bounds (ISO-8601).
        skip: Number of records to skip (default 0).
        page_size: Records per page (default 10).
        extra_filters: Additional filters, one group each. None entries
            (e.g. from ids_filter on an empty list) are ignored.

    Returns:
        SearchCriteria sorted newest-created first.
    """
    bounds = [
        ("created_at", created_at_min, CONDITION_GTEQ),
        ("created_at", created_at_max, CONDITION_LTEQ),
        ("updated_at", updated_at_min, CONDITION_GTEQ),
        ("updated_at", updated_at_max, CONDITION_LTEQ),
    ]

    filter_groups = []
    for field_name, value, condition in bounds:
        if value:
            filter_groups.append(FilterGroup([Filter(field_name, value, condition)]))

    for flt in extra_filters or []:
        if flt is not None:
            filter_groups.append(FilterGroup([flt]))

    size = page_size or DEFAULT_PAGE_SIZE
    offset = skip or 0

    return SearchCriteria(
        filter_groups=filter_groups or None,
        sort_orders=[SortOrder("created_at", "DESC")],
        current_page=offset // size + 1,
        page_size=size,
    )


def temporal_params(params: Dict) -> Dict:
    """Pick the onX temporal/paging keys out of an operation's params.

    Maps the camelCase onX names to build_search_criteria() keyword arguments.
    """
    return {
        "created_at_min": params.get("createdAtMin"),
        "created_at_max": params.get("createdAtMax"),
        "updated_at_min": params.get("updatedAtMin"),
        "updated_at_max": params.get("updatedAtMax"),
        "skip": params.get("skip"),
        "page_size": params.get("pageSize"),
    }
