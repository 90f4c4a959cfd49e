"""
Rule configuration management.

Builds the field validation rule chain and loads normalization rules from
YAML files into a NormalizationRegistry.
"""

import re
from pathlib import Path
from typing import Any

import yaml

from ...observability.logger import get_logger
from ..models import raw_record as fields
from ..normalization import LenderOverride, NormalizationRegistry, regex_rule

logger = get_logger(__name__)


class RuleConfigBuilder:
    """
    Programmatically build validation rule configurations.
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []

    def _add(self, rule_name: str, rule_type: str, field_name: str, parameters: dict[str, Any]) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "enabled": True,
        })
        return self

    def add_required_field(
        self,
        field_name: str,
        label: str | None = None,
        min_length: int | None = None,
    ) -> "RuleConfigBuilder":
        """Add a required text field rule."""
        params: dict[str, Any] = {"label": label or field_name}
        if min_length is not None:
            params["min_length"] = min_length
        return self._add(f"{field_name}_required", "required_field", field_name, params)

    def add_lender_check(
        self,
        field_name: str = fields.LENDER,
        fallback_field: str = fields.PLAINTIFF,
    ) -> "RuleConfigBuilder":
        """Add the lender/plaintiff rule."""
        return self._add(
            f"{field_name}_check", "lender", field_name, {"fallback_field": fallback_field}
        )

    def add_upb_check(self, field_name: str = fields.UPB, max_value: float = 1_000_000_000) -> "RuleConfigBuilder":
        """Add the UPB coercion and magnitude rule."""
        return self._add(f"{field_name}_check", "upb", field_name, {"max_value": max_value})

    def add_date_check(
        self,
        field_name: str = fields.COMPLAINT_DATE,
        label: str = "Complaint date",
        max_age_years: int = 10,
    ) -> "RuleConfigBuilder":
        """Add a date coercion and plausibility rule."""
        return self._add(
            f"{field_name}_check",
            "complaint_date",
            field_name,
            {"label": label, "max_age_years": max_age_years},
        )

    def add_json_scan(self, keywords: tuple[str, ...] | None = None) -> "RuleConfigBuilder":
        """Add the embedded-JSON scan over every field."""
        params: dict[str, Any] = {}
        if keywords is not None:
            params["keywords"] = keywords
        return self._add("json_fields", "json_fields", "*", params)

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules


def default_rules() -> list[dict[str, Any]]:
    """The standard complaint row rule chain, in evaluation order."""
    return (
        RuleConfigBuilder()
        .add_required_field(fields.PROPERTY_ADDRESS, label="property address", min_length=5)
        .add_required_field(fields.COUNTY, label="county")
        .add_lender_check()
        .add_upb_check()
        .add_date_check()
        .add_json_scan()
        .build()
    )


class NormalizationRuleLoader:
    """
    Loads normalization rules from a YAML configuration file.

    Expected YAML format:
    ```yaml
    county_rules:
      - pattern: "^Dade City$"
        replacement: "Pasco"

    lender_rules:
      - pattern: "^Bank Of Ny Mellon$"
        replacement: "Bank Of New York Mellon"

    lender_overrides:
      - name: rocket
        pattern: "^rocket\\s+mortgage\\b"
        canonical: "Rocket Mortgage"
    ```
    """

    SECTIONS = ("county_rules", "lender_rules", "lender_overrides")

    def __init__(self, config_path: str | Path):
        """
        Initialize the loader.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Normalization rule file not found: {config_path}")

    def load(self, registry: NormalizationRegistry | None = None) -> NormalizationRegistry:
        """
        Parse the file and register its rules.

        Args:
            registry: Registry to extend (a new one is created if omitted)

        Returns:
            The registry with all rules registered in file order

        Raises:
            ValueError: If the YAML is invalid or a rule is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError("Normalization rule file must contain a mapping")

        unknown = sorted(set(config) - set(self.SECTIONS))
        if unknown:
            raise ValueError(f"Unknown sections in normalization rule file: {', '.join(unknown)}")

        registry = registry or NormalizationRegistry()

        for idx, rule_def in enumerate(self._section(config, "county_rules")):
            pattern, replacement = self._substitution(rule_def, "county_rules", idx)
            registry.add_county_rule(regex_rule(pattern, replacement))

        for idx, rule_def in enumerate(self._section(config, "lender_rules")):
            pattern, replacement = self._substitution(rule_def, "lender_rules", idx)
            registry.add_lender_rule(regex_rule(pattern, replacement))

        for idx, rule_def in enumerate(self._section(config, "lender_overrides")):
            registry.add_lender_override(self._override(rule_def, idx))

        logger.debug(f"Loaded normalization rules from {self.config_path}: {registry!r}")
        return registry

    @staticmethod
    def _section(config: dict[str, Any], name: str) -> list[dict[str, Any]]:
        section = config.get(name) or []
        if not isinstance(section, list):
            raise ValueError(f"Section '{name}' must be a list")
        return section

    @staticmethod
    def _substitution(rule_def: Any, section: str, idx: int) -> tuple[str, str]:
        if not isinstance(rule_def, dict) or "pattern" not in rule_def:
            raise ValueError(f"Rule {idx} in '{section}' is missing 'pattern'")
        return str(rule_def["pattern"]), str(rule_def.get("replacement", ""))

    @staticmethod
    def _override(rule_def: Any, idx: int) -> LenderOverride:
        if not isinstance(rule_def, dict) or "pattern" not in rule_def:
            raise ValueError(f"Rule {idx} in 'lender_overrides' is missing 'pattern'")
        if "canonical" not in rule_def:
            raise ValueError(f"Rule {idx} in 'lender_overrides' is missing 'canonical'")
        name = str(rule_def.get("name", f"override_{idx}"))
        try:
            return LenderOverride.compile(name, str(rule_def["pattern"]), str(rule_def["canonical"]))
        except re.error as e:
            raise ValueError(f"Invalid pattern in lender override '{name}': {e}") from e
