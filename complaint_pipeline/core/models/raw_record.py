"""
RawRecord type and the well-known field names of a complaint row.
"""

from collections.abc import Mapping
from typing import Any

# One spreadsheet row after column mapping; extra fields are allowed.
RawRecord = Mapping[str, Any]

PROPERTY_ADDRESS = "propertyAddress"
COUNTY = "county"
LENDER = "lender"
PLAINTIFF = "plaintiff"
UPB = "upb"
MEETS_CRITERIA = "meetsCriteria"
COMPLAINT_DATE = "complaintDate"
