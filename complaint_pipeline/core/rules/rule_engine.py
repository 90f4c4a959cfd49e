"""
Rule engine for running field validators over raw complaint rows.

The rule engine builds validators from rule configurations, applies them to
a row in order and assembles the ProcessedRecord with separate error and
warning lists.
"""

from datetime import datetime
from typing import Any

from ..models import ProcessedRecord, RawRecord
from ..validators import (
    BaseValidator,
    DateValidator,
    FieldIssue,
    JSONFieldValidator,
    LenderValidator,
    RequiredFieldValidator,
    UPBValidator,
)
from .rule_config import default_rules


class RuleEngine:
    """
    Orchestrates field validators on raw rows.

    Each rule contributes error- and warning-class issues; a row is valid iff
    no rule reported an error. Coerced values (upb, complaint_date) are copied
    onto the ProcessedRecord.
    """

    VALIDATOR_REGISTRY: dict[str, type[BaseValidator]] = {
        "required_field": RequiredFieldValidator,
        "lender": LenderValidator,
        "upb": UPBValidator,
        "complaint_date": DateValidator,
        "json_fields": JSONFieldValidator,
    }

    def __init__(self, rules: list[dict[str, Any]] | None = None, now: datetime | None = None):
        """
        Initialize the rule engine with validation rules.

        Args:
            rules: List of rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (required_field, lender, upb, complaint_date, json_fields)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - enabled: bool (default True)
                   Defaults to the standard complaint rule chain.
            now: Reference time for date plausibility checks (default: current time)
        """
        self.rules = default_rules() if rules is None else rules
        self.now = now
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            rule_type = rule["rule_type"]
            parameters = dict(rule.get("parameters", {}))

            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            if rule_type == "complaint_date" and self.now is not None:
                parameters.setdefault("now", self.now)

            try:
                validator = validator_class(rule["field_name"], parameters)
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Failed to create validator for rule '{rule_name}': {e}") from e
            self.validators.append((rule_name, validator))

    def validate_row(self, row: RawRecord, index: int) -> ProcessedRecord:
        """
        Validate one raw row.

        Args:
            row: The raw row mapping
            index: Zero-based position of the row in its batch

        Returns:
            ProcessedRecord with coerced values and issue lists; the
            normalized county and lender are left empty for a later pass
        """
        payload = dict(row)
        issues: list[FieldIssue] = []
        coerced: dict[str, Any] = {}

        for _rule_name, validator in self.validators:
            result = validator.validate(payload.get(validator.field_name), payload)
            issues.extend(result.issues)
            coerced.update(result.coerced)

        errors = [issue.message for issue in issues if issue.is_error]
        warnings = [issue.message for issue in issues if not issue.is_error]

        return ProcessedRecord(
            row_index=index,
            raw=payload,
            upb=coerced.get("upb"),
            complaint_date=coerced.get("complaint_date"),
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts by type
        """
        counts: dict[str, int] = {}
        for _, validator in self.validators:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1
        return {"total_rules": len(self.validators), "rules_by_type": counts}


def validate_row(row: RawRecord, index: int, now: datetime | None = None) -> ProcessedRecord:
    """Validate one row with the standard rule chain."""
    return RuleEngine(now=now).validate_row(row, index)
