"""
Environment-driven settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SUMMARY_YEARS = ("2024", "2025")


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_format: str
    normalization_rules_path: str | None
    column_mapping_path: str | None
    summary_years: tuple[str, ...]


def _split_years(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_SUMMARY_YEARS
    years = tuple(part.strip() for part in raw.split(",") if part.strip())
    for year in years:
        if not (year.isdigit() and len(year) == 4):
            raise ValueError(f"SUMMARY_YEARS entries must be four-digit years, got '{year}'")
    return years or DEFAULT_SUMMARY_YEARS


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        normalization_rules_path=os.getenv("NORMALIZATION_RULES_PATH") or None,
        column_mapping_path=os.getenv("COLUMN_MAPPING_PATH") or None,
        summary_years=_split_years(os.getenv("SUMMARY_YEARS")),
    )
