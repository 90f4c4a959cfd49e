"""
DuplicateMatch model: the duplicate detector's verdict for one row.
"""

from typing import Literal

from pydantic import BaseModel

DuplicateStrategy = Literal["exact", "without_upb", "address_date", "fuzzy_address"]


class DuplicateMatch(BaseModel):
    """
    Attributes:
        is_duplicate: Whether an earlier row claimed one of this row's keys
        duplicate_of: Index of the earlier row
        strategy: Name of the key strategy that matched
    """

    is_duplicate: bool = False
    duplicate_of: int | None = None
    strategy: DuplicateStrategy | None = None
