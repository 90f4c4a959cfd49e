"""
Base validator interface for all field validation rules.

Validators never raise for bad data during normal processing: they return a
FieldResult listing error- and warning-class issues plus any coerced values.
`check()` is the strict variant for standalone use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal

Severity = Literal["error", "warning"]


class ValidationError(Exception):
    """Raised by BaseValidator.check() when a rule reports an error."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


@dataclass(frozen=True)
class FieldIssue:
    """A single problem found in one field."""

    field_name: str
    message: str
    severity: Severity = "error"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


@dataclass
class FieldResult:
    """
    Outcome of running one validator on one row.

    Attributes:
        issues: Problems found, in discovery order
        coerced: ProcessedRecord attribute updates (e.g. {"upb": 250000.0})
    """

    issues: list[FieldIssue] = field(default_factory=list)
    coerced: dict[str, Any] = field(default_factory=dict)

    def error(self, field_name: str, message: str) -> None:
        self.issues.append(FieldIssue(field_name, message, "error"))

    def warning(self, field_name: str, message: str) -> None:
        self.issues.append(FieldIssue(field_name, message, "warning"))

    @property
    def errors(self) -> list[FieldIssue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> list[FieldIssue]:
        return [i for i in self.issues if not i.is_error]


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one field concern (required_field, lender,
    upb, complaint_date, json_fields).
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the raw row field to validate
            parameters: Rule-specific parameters (e.g. max_value for upb)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        """
        Validate a value.

        Args:
            value: The field value (None if missing)
            record: The entire raw row (for context-dependent validation)

        Returns:
            FieldResult with issues and coerced values
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def check(self, value: Any, record: dict[str, Any]) -> FieldResult:
        """
        Validate and raise on the first error-class issue.

        Raises:
            ValidationError: If any error was found
        """
        result = self.validate(value, record)
        for issue in result.errors:
            raise ValidationError(self.rule_type, issue.field_name, issue.message)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
