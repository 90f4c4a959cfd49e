"""
Validation rule engine and configuration management.
"""

from .rule_config import NormalizationRuleLoader, RuleConfigBuilder, default_rules
from .rule_engine import RuleEngine, validate_row

__all__ = [
    "RuleEngine",
    "RuleConfigBuilder",
    "NormalizationRuleLoader",
    "default_rules",
    "validate_row",
]
