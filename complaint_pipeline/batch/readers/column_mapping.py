"""
Spreadsheet header to field-name mapping.
"""

from pathlib import Path

import yaml

from ...core.models import raw_record as fields

DEFAULT_COLUMN_MAPPING: dict[str, str] = {
    "Property Address": fields.PROPERTY_ADDRESS,
    "County": fields.COUNTY,
    "Plaintiff": fields.PLAINTIFF,
    "Sum of Unpaid Balance(s)": fields.UPB,
    # Fallback when the sum column is empty
    "Unpaid Balance(s)": fields.UPB,
    "Meets Criteria?": fields.MEETS_CRITERIA,
    "Processing Log": fields.COMPLAINT_DATE,
    "Document Title": "documentTitle",
    "Defendant": "defendant",
    "Original Loan Amount": "originalLoanAmount",
    "Default Date": "defaultDate",
}


def map_column_name(column_name: str, mapping: dict[str, str] | None = None) -> str:
    """
    Map a column header to its standard field name.

    Unknown headers pass through trimmed.
    """
    mapping = DEFAULT_COLUMN_MAPPING if mapping is None else mapping
    trimmed = str(column_name).strip()
    return mapping.get(trimmed, trimmed)


def load_column_mapping(path: str | Path) -> dict[str, str]:
    """
    Load a header mapping from YAML, layered over the defaults.

    The file is a flat mapping of header text to field name.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping of strings
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Column mapping file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"Column mapping in {path} must map header strings to field names")

    return {**DEFAULT_COLUMN_MAPPING, **{k.strip(): v for k, v in data.items()}}
