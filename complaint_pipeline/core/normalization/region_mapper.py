"""
County to region mapping.
"""

from typing import Any, Literal

from .county import normalize_county

Region = Literal["Miami-Dade", "Other Florida", "New York", "Other/Unmapped"]

MIAMI_DADE: Region = "Miami-Dade"
OTHER_FLORIDA: Region = "Other Florida"
NEW_YORK: Region = "New York"
OTHER_UNMAPPED: Region = "Other/Unmapped"

REGION_MAPPING: dict[str, Region] = {
    # Miami-Dade
    "Miami-Dade": MIAMI_DADE,
    "Dade": MIAMI_DADE,
    "Miami Dade": MIAMI_DADE,
    "Miami-Dade County": MIAMI_DADE,
    "Miami Dade County": MIAMI_DADE,
    # Other Florida
    "Pinellas": OTHER_FLORIDA,
    "Pinellas County": OTHER_FLORIDA,
    "Orange": OTHER_FLORIDA,
    "Orange County": OTHER_FLORIDA,
    "Broward": OTHER_FLORIDA,
    "Broward County": OTHER_FLORIDA,
    "Collier": OTHER_FLORIDA,
    "Collier County": OTHER_FLORIDA,
    "Volusia": OTHER_FLORIDA,
    "Volusia County": OTHER_FLORIDA,
    # New York
    "Kings": NEW_YORK,
    "Kings County": NEW_YORK,
    "Suffolk": NEW_YORK,
    "Suffolk County": NEW_YORK,
    "Bronx": NEW_YORK,
    "Bronxs": NEW_YORK,  # common typo
    "Bronx County": NEW_YORK,
    "New York": NEW_YORK,
    "New York County": NEW_YORK,
    "Queens": NEW_YORK,
    "Queens County": NEW_YORK,
    "Nassau": NEW_YORK,
    "Nassau County": NEW_YORK,
    "Rockland": NEW_YORK,
    "Rockland County": NEW_YORK,
    "Westchester": NEW_YORK,
    "Westchester County": NEW_YORK,
}


def get_region_from_county(county: Any) -> Region:
    """
    Map a county name to its region.

    Args:
        county: Raw or normalized county name

    Returns:
        The region, or "Other/Unmapped" for counties not in the table
    """
    if not county:
        return OTHER_UNMAPPED

    normalized = normalize_county(county)
    if normalized in REGION_MAPPING:
        return REGION_MAPPING[normalized]

    lowered = normalized.lower()
    for key, region in REGION_MAPPING.items():
        if key.lower() == lowered:
            return region

    return OTHER_UNMAPPED


def get_ordered_regions() -> list[Region]:
    """Named regions in display order, without Other/Unmapped."""
    return [MIAMI_DADE, OTHER_FLORIDA, NEW_YORK]


def get_all_regions() -> list[Region]:
    return [MIAMI_DADE, OTHER_FLORIDA, NEW_YORK, OTHER_UNMAPPED]
