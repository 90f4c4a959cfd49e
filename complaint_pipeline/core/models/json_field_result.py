"""
JSONFieldResult model: outcome of validating one embedded-JSON field.
"""

from typing import Any

from pydantic import BaseModel


class JSONFieldResult(BaseModel):
    """
    Attributes:
        is_valid: False only when the value could not be parsed or repaired
        parsed: Parsed value (None for empty input or on failure)
        error: Error message, or the auto-fix notice when was_fixed is set
        was_fixed: True when parsing only succeeded after repair
    """

    is_valid: bool
    parsed: Any = None
    error: str | None = None
    was_fixed: bool = False
