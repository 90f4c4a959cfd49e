"""
UPBValidator - coerces and sanity-checks the unpaid principal balance.
"""

import math
import numbers
import re
from decimal import Decimal
from typing import Any

from .base_validator import BaseValidator, FieldResult

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)")


def parse_leading_float(text: str) -> float | None:
    """
    Parse the longest numeric prefix of `text`, like a lenient float parse.

    Returns:
        The parsed number, or None when the text has no numeric prefix
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(0))


class UPBValidator(BaseValidator):
    """
    Validates the UPB field and coerces it to a float.

    Parameters:
    - max_value: Values above this raise an "unusually high" warning
                 (default: 1,000,000,000)

    Missing UPB, negative, zero and unusually high values are warnings; text
    without digits, unparseable text and non-numeric types are errors.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.max_value = self.parameters.get("max_value", 1_000_000_000)

    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        result = FieldResult()

        if value is None:
            result.warning(self.field_name, "UPB is missing")
            return result

        if isinstance(value, str):
            cleaned = _NON_NUMERIC.sub("", value.strip())
            if cleaned == "":
                result.error(self.field_name, "UPB is empty or contains no numbers")
                return result
            amount = parse_leading_float(cleaned)
            if amount is None:
                result.error(self.field_name, f'Invalid UPB format: "{value}"')
                return result
        elif isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool):
            amount = float(value)
            if math.isnan(amount) or math.isinf(amount):
                result.error(self.field_name, f'Invalid UPB format: "{value}"')
                return result
        else:
            result.error(self.field_name, f"Invalid UPB type: {type(value).__name__}")
            return result

        self._check_magnitude(amount, result)
        result.coerced["upb"] = amount
        return result

    def _check_magnitude(self, amount: float, result: FieldResult) -> None:
        if amount < 0:
            result.warning(self.field_name, "UPB is negative")
        elif amount == 0:
            result.warning(self.field_name, "UPB is zero")
        elif amount > self.max_value:
            result.warning(self.field_name, "UPB seems unusually high")

    @property
    def rule_type(self) -> str:
        return "upb"
