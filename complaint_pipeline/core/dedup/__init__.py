"""
Multi-strategy duplicate detection over normalized records.
"""

from .duplicate_detector import (
    KEY_STRATEGIES,
    DuplicateDetector,
    create_row_keys,
    detect_duplicates,
    normalize_for_comparison,
)

__all__ = [
    "KEY_STRATEGIES",
    "DuplicateDetector",
    "create_row_keys",
    "detect_duplicates",
    "normalize_for_comparison",
]
