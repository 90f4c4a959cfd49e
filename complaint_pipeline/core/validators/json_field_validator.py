"""
JSONFieldValidator - finds embedded JSON in a row and validates or repairs it.

A field is a JSON candidate when its name suggests structured content
(metadata, details, extra, ...) or when its string value looks like JSON.
Malformed JSON gets a single repair pass that balances unmatched braces and
brackets and wraps bare key/value content in braces. Repaired values are
reported as warnings; values that still fail to parse are errors.
"""

import json
import re
from typing import Any

from ..models import JSONFieldResult
from .base_validator import BaseValidator, FieldResult

JSON_NAME_KEYWORDS: tuple[str, ...] = (
    "json",
    "metadata",
    "data",
    "details",
    "info",
    "extra",
    "additional",
)

_LEADING_BRACKET = re.compile(r"^\s*[{\[]")
CONTEXT_WINDOW = 40


def looks_like_json(text: str) -> bool:
    """Return True if the string is shaped like a JSON document."""
    trimmed = text.strip()
    return (
        (trimmed.startswith("{") and trimmed.endswith("}"))
        or (trimmed.startswith("[") and trimmed.endswith("]"))
        or trimmed.startswith('"')
        or _LEADING_BRACKET.match(trimmed) is not None
    )


def attempt_json_fix(text: str) -> str:
    """
    Apply the single repair pass.

    Args:
        text: Malformed JSON text

    Returns:
        Candidate repaired text (may still be invalid)
    """
    fixed = text.strip()

    open_braces, close_braces = fixed.count("{"), fixed.count("}")
    open_brackets, close_brackets = fixed.count("["), fixed.count("]")
    if open_braces > close_braces:
        fixed += "}" * (open_braces - close_braces)
    if open_brackets > close_brackets:
        fixed += "]" * (open_brackets - close_brackets)

    if not fixed.startswith(("{", "[")) and ":" in fixed:
        fixed = "{" + fixed + "}"

    return fixed


def validate_json_field(value: Any, field_name: str) -> JSONFieldResult:
    """
    Validate and parse one embedded-JSON field.

    Args:
        value: Field value (string, already-parsed structure, or anything else)
        field_name: Field name used in messages

    Returns:
        JSONFieldResult describing the outcome

    Examples:
        >>> validate_json_field('{"key": "value"}', "metadata").parsed
        {'key': 'value'}
        >>> validate_json_field('{"key": "value"', "metadata").was_fixed
        True
    """
    if value is None or value == "":
        return JSONFieldResult(is_valid=True, parsed=None)

    if not isinstance(value, str):
        # dicts, lists and scalars are already usable as-is
        return JSONFieldResult(is_valid=True, parsed=value)

    trimmed = value.strip()
    if not looks_like_json(trimmed) and len(trimmed) < 2:
        return JSONFieldResult(is_valid=True, parsed=value)

    try:
        return JSONFieldResult(is_valid=True, parsed=json.loads(trimmed))
    except json.JSONDecodeError as error:
        original_error = error

    fixed = attempt_json_fix(trimmed)
    try:
        parsed = json.loads(fixed)
    except json.JSONDecodeError:
        pass
    else:
        return JSONFieldResult(
            is_valid=True,
            parsed=parsed,
            was_fixed=True,
            error=f"JSON in {field_name} was malformed but auto-fixed",
        )

    message = f"Invalid JSON in {field_name}: {original_error.msg} (char {original_error.pos})"
    start = max(0, original_error.pos - CONTEXT_WINDOW // 2)
    end = min(len(trimmed), original_error.pos + CONTEXT_WINDOW // 2)
    message += f' (near: "{trimmed[start:end]}")'
    return JSONFieldResult(is_valid=False, parsed=None, error=message)


def is_json_candidate(field_name: str, value: Any, keywords: tuple[str, ...] = JSON_NAME_KEYWORDS) -> bool:
    name = field_name.lower()
    if any(keyword in name for keyword in keywords):
        return True
    return isinstance(value, str) and looks_like_json(value)


class JSONFieldValidator(BaseValidator):
    """
    Scans every field of the row for embedded JSON.

    Parameters:
    - keywords: Field-name substrings that mark a JSON candidate
                (default: json, metadata, data, details, info, extra, additional)
    - exclude: Field names never treated as JSON candidates
    """

    def __init__(self, field_name: str = "*", parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.keywords = tuple(k.lower() for k in self.parameters.get("keywords", JSON_NAME_KEYWORDS))
        self.exclude = frozenset(self.parameters.get("exclude", ()))

    def validate(self, value: Any, record: dict[str, Any]) -> FieldResult:
        result = FieldResult()
        for name, field_value in record.items():
            if name in self.exclude or not is_json_candidate(str(name), field_value, self.keywords):
                continue
            outcome = validate_json_field(field_value, str(name))
            if not outcome.is_valid and outcome.error:
                result.error(str(name), outcome.error)
            elif outcome.was_fixed and outcome.error:
                result.warning(str(name), outcome.error)
        return result

    @property
    def rule_type(self) -> str:
        return "json_fields"
