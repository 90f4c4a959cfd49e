"""
CSV row source using pandas.
"""

from pathlib import Path
from typing import Any

import pandas as pd

from ...observability.logger import get_logger
from .source import DEFAULT_SHEET_NAME
from .value_parser import map_row

logger = get_logger(__name__)


class CSVRowReader:
    """
    Reads complaint rows from CSV exports.

    `path` is either one CSV file, or a directory holding one `<sheet>.csv`
    per sheet.
    """

    def __init__(self, path: str | Path, column_mapping: dict[str, str] | None = None, delimiter: str = ","):
        """
        Initialize CSV reader.

        Args:
            path: CSV file or directory of per-sheet CSV files
            column_mapping: Header mapping; defaults to the standard mapping
            delimiter: Field delimiter
        """
        self.path = Path(path)
        self.column_mapping = column_mapping
        self.delimiter = delimiter

    def resolve(self, sheet_name: str = DEFAULT_SHEET_NAME) -> Path:
        if self.path.is_dir():
            return self.path / f"{sheet_name}.csv"
        return self.path

    def fetch_rows(self, sheet_name: str = DEFAULT_SHEET_NAME) -> list[dict[str, Any]]:
        """
        Read and map all rows of a sheet.

        Returns:
            Row records keyed by standard field name

        Raises:
            FileNotFoundError: If the CSV file does not exist
        """
        file_path = self.resolve(sheet_name)
        if not file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {file_path}")

        # Every cell as text; blank handling belongs to parse_value
        df = pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            sep=self.delimiter,
            skip_blank_lines=True,
        )
        rows = [map_row(row, self.column_mapping) for row in df.to_dict(orient="records")]

        logger.debug(
            "Read CSV rows",
            extra={"path": str(file_path), "sheet": sheet_name, "row_count": len(rows)},
        )
        return rows
