"""
County name normalization.

Maps free-text county values ("broward county, FL", "Dade", "NYC") onto a
canonical display string so that textual variants group together.
"""

import re
from typing import Any

UNKNOWN = "Unknown"

_STATE_SUFFIX = re.compile(
    r",\s*(florida|fl|california|ca|texas|tx|new york|ny)\s*$", re.IGNORECASE
)
_COUNTY_SUFFIX = re.compile(r"\s+county\s*$", re.IGNORECASE)
_MIAMI_DADE = re.compile(r"^miami\s*-?\s*dade(\s+county)?$", re.IGNORECASE)
_MIAMI_DADE_SPACED = re.compile(r"\bmiami\s+dade\b", re.IGNORECASE)
_WORD_SEPARATORS = re.compile(r"[\s-]+")

# Applied in order as whole-word replacements.
COUNTY_ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    ("nyc", "new york"),
    ("ny", "new york"),
    ("new york city", "new york"),
    ("st.", "saint"),
    ("st", "saint"),
    ("ft.", "fort"),
    ("ft", "fort"),
)


def _whole_word(token: str) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(token)}(?!\w)", re.IGNORECASE)


_ABBREVIATION_PATTERNS = tuple(
    (_whole_word(token), replacement) for token, replacement in COUNTY_ABBREVIATIONS
)


def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:]


def normalize_county(county: Any) -> str:
    """
    Normalize a county name to its canonical display form.

    Args:
        county: Raw county value (usually a string)

    Returns:
        Title-cased county without state or "County" suffix, or "Unknown"

    Examples:
        >>> normalize_county("broward county, FL")
        'Broward'
        >>> normalize_county("miami dade county")
        'Miami-Dade'
        >>> normalize_county("st. lucie")
        'Saint Lucie'
    """
    if not county:
        return UNKNOWN

    normalized = str(county).strip().lower()
    normalized = _STATE_SUFFIX.sub("", normalized).strip()
    normalized = _COUNTY_SUFFIX.sub("", normalized).strip()

    if normalized == "dade":
        normalized = "miami-dade"
    normalized = _MIAMI_DADE.sub("miami-dade", normalized)

    for pattern, replacement in _ABBREVIATION_PATTERNS:
        normalized = pattern.sub(replacement, normalized)

    parts = [p for p in _WORD_SEPARATORS.split(normalized) if p]
    separator = "-" if "-" in normalized else " "
    normalized = separator.join(_title_word(p) for p in parts)

    normalized = _MIAMI_DADE_SPACED.sub("Miami-Dade", normalized)

    return normalized or UNKNOWN
