"""
Extensible normalization registry.

Holds ordered post-processing rules for counties and lenders, plus extra
lender consolidation overrides, so deployments can add institution-specific
fixes without forking the base normalizers.
"""

import re
from typing import Any, Callable

from .county import normalize_county
from .lender import LENDER_OVERRIDES, LenderOverride, normalize_lender

NormalizationRule = Callable[[str], str]


def regex_rule(pattern: str, replacement: str) -> NormalizationRule:
    """
    Build a rule that applies a case-insensitive regex substitution.

    Args:
        pattern: Regular expression to search for
        replacement: Replacement text (may use group references)

    Returns:
        Rule callable

    Raises:
        ValueError: If the pattern does not compile
    """
    try:
        compiled = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ValueError(f"Invalid normalization pattern '{pattern}': {e}") from e

    def rule(value: str) -> str:
        return compiled.sub(replacement, value)

    rule.__name__ = f"regex_rule({pattern!r})"
    return rule


class NormalizationRegistry:
    """
    Runs the base normalizers, then each registered rule in order.

    Usage:
        registry = NormalizationRegistry()
        registry.add_county_rule(lambda county: county.replace("Dade City", "Pasco"))
        registry.normalize_county("dade city")  # -> "Pasco"
    """

    def __init__(self):
        self.county_rules: list[NormalizationRule] = []
        self.lender_rules: list[NormalizationRule] = []
        self.lender_overrides: list[LenderOverride] = []

    def add_county_rule(self, rule: NormalizationRule) -> "NormalizationRegistry":
        self.county_rules.append(rule)
        return self

    def add_lender_rule(self, rule: NormalizationRule) -> "NormalizationRegistry":
        self.lender_rules.append(rule)
        return self

    def add_lender_override(self, override: LenderOverride) -> "NormalizationRegistry":
        """Append an override evaluated after the built-in consolidation table."""
        self.lender_overrides.append(override)
        return self

    def normalize_county(self, county: Any) -> str:
        result = normalize_county(county)
        for rule in self.county_rules:
            result = rule(result)
        return result

    def normalize_lender(self, lender: Any) -> str:
        result = normalize_lender(lender, overrides=(*LENDER_OVERRIDES, *self.lender_overrides))
        for rule in self.lender_rules:
            result = rule(result)
        return result

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(county_rules={len(self.county_rules)}, "
            f"lender_rules={len(self.lender_rules)}, "
            f"lender_overrides={len(self.lender_overrides)})"
        )
