"""
Variant Options — Rebuilds a child product's selected options.

In Magento 2 a variant is a simple product linked to a configurable parent.
The parent declares its configurable options:

    "configurable_product_options": [
      {"attribute_id": 93, "label": "Color", "attribute_code": "color",
       "values": [{"value_index": 42}, {"value_index": 43}]}
    ]

and each child stores its chosen value as a custom attribute:

    "custom_attributes": [{"attribute_code": "color", "value": "42"}]

For every parent option, in declaration order, the child is searched for the
option's attribute code. When the option carries no explicit attribute_code,
one is derived from the label ("Shoe Size" -> "shoe_size"). Derived codes are
a best-effort guess and can miss the real platform code; OptionMatch records
which kind of key was used so callers can tell a heuristic miss apart from an
option that genuinely doesn't apply to the child.

Values are surfaced raw (the stored option id); no value-index-to-label
lookup is done.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .records import ConfigurableOption, ProductRecord

logger = logging.getLogger(__name__)

KEY_EXPLICIT = "explicit"
KEY_DERIVED = "derived"


@dataclass
class OptionMatch:
    name: str
    attribute_code: str
    key_source: str
    value: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.value is not None

    @property
    def heuristic_miss(self) -> bool:
        """True when a derived key found nothing on the child."""
        return not self.matched and self.key_source == KEY_DERIVED


def option_lookup_key(option: ConfigurableOption) -> Tuple[str, str]:
    """Return (attribute_code, key_source) used to search the child."""
    if option.attribute_code:
        return option.attribute_code, KEY_EXPLICIT
    return re.sub(r"\s+", "_", (option.label or "").lower()), KEY_DERIVED


def resolve_option_matches(
    options: List[ConfigurableOption], child: ProductRecord
) -> List[OptionMatch]:
    """Resolve every parent option against one child, keeping the misses."""
    matches = []
    for option in options:
        code, source = option_lookup_key(option)
        value = child.attribute(code)
        matches.append(OptionMatch(
            name=option.label,
            attribute_code=code,
            key_source=source,
            value=str(value) if value is not None else None,
        ))
    return matches


def resolve_selected_options(
    options: List[ConfigurableOption], child: ProductRecord
) -> List[Dict[str, str]]:
    """Build the onX selectedOptions list for one child product.

    Options the child has no attribute for are skipped; a partial list is a
    valid result.

    Returns:
        [{"name": <option label>, "value": <raw stored value>}, ...] in the
        parent's option order.
    """
    selected = []
    for match in resolve_option_matches(options, child):
        if match.matched:
            selected.append({"name": match.name, "value": match.value})
        elif match.heuristic_miss:
            logger.debug(
                "Child %s has no attribute '%s' derived from option label '%s'",
                child.sku, match.attribute_code, match.name,
            )
    return selected


def resolve_variant_options(
    options: List[ConfigurableOption], children: List[ProductRecord]
) -> Dict[str, List[Dict[str, str]]]:
    """Resolve selected options for every child, keyed by child SKU."""
    return {child.sku: resolve_selected_options(options, child) for child in children}
