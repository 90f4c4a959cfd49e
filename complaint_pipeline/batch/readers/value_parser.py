"""
Light parsing of raw cell text into row values.
"""

import re
from collections.abc import Mapping
from typing import Any

from ...core.models import raw_record as fields
from ...utils.dates import coerce_datetime
from .column_mapping import map_column_name

DATE_FIELDS = frozenset({fields.COMPLAINT_DATE, "defaultDate"})

# Only text already in canonical number form becomes a number: "1,500" and
# "1.50" stay strings and are left to the validators.
_CANONICAL_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d*[1-9])?")


def parse_value(value: Any, field_name: str | None = None) -> Any:
    """
    Parse one cell.

    Args:
        value: Cell text; non-text values are returned unchanged
        field_name: Standard field name the cell maps to

    Returns:
        None for blank cells, an int or float for canonical numbers, a datetime
        for parseable date fields, otherwise the trimmed text
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return None

    if _CANONICAL_NUMBER.fullmatch(text):
        return float(text) if "." in text else int(text)

    if field_name in DATE_FIELDS:
        parsed = coerce_datetime(text)
        if parsed is not None:
            return parsed

    return text


def map_row(row: Mapping[str, Any], mapping: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Map one spreadsheet row to a record keyed by field name.

    Blank cells are left out. When several headers map to the same field the
    first non-blank cell wins, so a fallback column only fills a blank.
    """
    mapped: dict[str, Any] = {}
    for header, cell in row.items():
        key = map_column_name(header, mapping)
        value = parse_value(cell, key)
        if value is not None:
            mapped.setdefault(key, value)
    return mapped
