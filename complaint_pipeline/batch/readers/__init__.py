"""
Batch row sources.
"""

from .column_mapping import DEFAULT_COLUMN_MAPPING, load_column_mapping, map_column_name
from .csv_reader import CSVRowReader
from .json_reader import JSONRowReader
from .source import DEFAULT_SHEET_NAME, RowSource
from .value_parser import map_row, parse_value

__all__ = [
    "RowSource",
    "DEFAULT_SHEET_NAME",
    "CSVRowReader",
    "JSONRowReader",
    "DEFAULT_COLUMN_MAPPING",
    "map_column_name",
    "load_column_mapping",
    "map_row",
    "parse_value",
]
