"""
RequiredFieldValidator - ensures a field is present and not empty.
"""

from typing import Any

from .base_validator import BaseValidator, FieldResult


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required text field is present and not empty.

    Parameters:
    - label: Human-readable field name used in messages (default: field name)
    - min_length: Length below which a warning is raised (optional)

    Fails if the value is missing, None, or blank after trimming.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.label = self.parameters.get("label", field_name)
        self.min_length = self.parameters.get("min_length")

    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        result = FieldResult()
        if isinstance(value, str):
            value = value.strip()

        if not value:
            result.error(self.field_name, f"Missing or empty {self.label}")
        elif (
            self.min_length is not None
            and isinstance(value, str)
            and len(value) < self.min_length
        ):
            result.warning(self.field_name, f"{self.label.capitalize()} seems too short")

        return result

    @property
    def rule_type(self) -> str:
        return "required_field"
