"""
Field validation rule implementations.

Provides validators for required fields, lender/plaintiff, UPB, complaint
date and embedded JSON content.
"""

from .base_validator import BaseValidator, FieldIssue, FieldResult, Severity, ValidationError
from .date_validator import DateValidator
from .json_field_validator import (
    JSON_NAME_KEYWORDS,
    JSONFieldValidator,
    attempt_json_fix,
    is_json_candidate,
    looks_like_json,
    validate_json_field,
)
from .lender_validator import LenderValidator
from .required_field_validator import RequiredFieldValidator
from .upb_validator import UPBValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "FieldIssue",
    "FieldResult",
    "Severity",
    "RequiredFieldValidator",
    "LenderValidator",
    "UPBValidator",
    "DateValidator",
    "JSONFieldValidator",
    "JSON_NAME_KEYWORDS",
    "validate_json_field",
    "attempt_json_fix",
    "is_json_candidate",
    "looks_like_json",
]
