"""
Row source abstraction consumed by the pipeline entry points.
"""

from typing import Any, Protocol, runtime_checkable

DEFAULT_SHEET_NAME = "Sheet1"


@runtime_checkable
class RowSource(Protocol):
    """Anything that can produce the raw rows of a named sheet."""

    def fetch_rows(self, sheet_name: str = DEFAULT_SHEET_NAME) -> list[dict[str, Any]]: ...
