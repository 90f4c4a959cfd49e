"""
County and lender normalization, the normalization registry and region mapping.
"""

from .county import UNKNOWN, normalize_county
from .lender import LENDER_OVERRIDES, LenderOverride, expand_lender, normalize_lender
from .region_mapper import (
    Region,
    get_all_regions,
    get_ordered_regions,
    get_region_from_county,
)
from .registry import NormalizationRegistry, NormalizationRule, regex_rule

__all__ = [
    "UNKNOWN",
    "normalize_county",
    "normalize_lender",
    "expand_lender",
    "LenderOverride",
    "LENDER_OVERRIDES",
    "NormalizationRegistry",
    "NormalizationRule",
    "regex_rule",
    "Region",
    "get_region_from_county",
    "get_ordered_regions",
    "get_all_regions",
]
