"""
JSON row source.
"""

import json
from pathlib import Path
from typing import Any

from ...observability.logger import get_logger
from .source import DEFAULT_SHEET_NAME
from .value_parser import map_row

logger = get_logger(__name__)


class JSONRowReader:
    """
    Reads complaint rows from a JSON export.

    The document is either a list of row objects, or an object mapping sheet
    names to such lists.
    """

    def __init__(self, path: str | Path, column_mapping: dict[str, str] | None = None):
        self.path = Path(path)
        self.column_mapping = column_mapping

    def fetch_rows(self, sheet_name: str = DEFAULT_SHEET_NAME) -> list[dict[str, Any]]:
        """
        Read and map all rows of a sheet.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document shape is not supported or the sheet is missing
        """
        if not self.path.exists():
            raise FileNotFoundError(f"JSON file not found: {self.path}")

        document = json.loads(self.path.read_text(encoding="utf-8"))

        if isinstance(document, dict):
            if sheet_name not in document:
                raise ValueError(f"Sheet {sheet_name!r} not found in {self.path}")
            document = document[sheet_name]

        if not isinstance(document, list):
            raise ValueError(
                f"Expected a list of rows in {self.path}, got: {type(document).__name__}"
            )

        rows = []
        for item in document:
            if not isinstance(item, dict):
                raise ValueError(f"Expected row objects in {self.path}, got: {type(item).__name__}")
            # Cells keep their JSON type; only strings go through text parsing
            rows.append(map_row(item, self.column_mapping))

        logger.debug(
            "Read JSON rows",
            extra={"path": str(self.path), "sheet": sheet_name, "row_count": len(rows)},
        )
        return rows
