"""
LenderValidator - validates the lender field with plaintiff as fallback.
"""

from datetime import date
from typing import Any

from ..models import raw_record as fields
from .base_validator import BaseValidator, FieldResult


class LenderValidator(BaseValidator):
    """
    Either lender or plaintiff must be present, and the value used must be text.

    Parameters:
    - fallback_field: Field consulted when the lender is missing (default: plaintiff)
    """

    def __init__(self, field_name: str = fields.LENDER, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.fallback_field = self.parameters.get("fallback_field", fields.PLAINTIFF)

    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        result = FieldResult()
        lender = value.strip() if isinstance(value, str) else value
        fallback = record.get(self.fallback_field)
        fallback = fallback.strip() if isinstance(fallback, str) else fallback

        if not lender and not fallback:
            result.error(self.field_name, "Missing or empty lender/plaintiff")

        effective = lender if lender is not None else fallback
        if isinstance(effective, date):
            result.error(self.field_name, "Invalid lender/plaintiff value: date")
        elif effective is not None and not isinstance(effective, str):
            result.error(
                self.field_name,
                f"Invalid lender/plaintiff value type: {type(effective).__name__}",
            )

        return result

    @property
    def rule_type(self) -> str:
        return "lender"
