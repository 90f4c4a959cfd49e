"""
Lender / plaintiff name normalization.

Lender names arrive in many spellings of the same institution
("Wells Fargo Bank, N.A.", "WELLSFARGO BANK NA", ...). The generic rules below
expand abbreviations, singularize and title-case; an ordered table of
consolidation overrides then pins specific known institutions to one name.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable

UNKNOWN = "Unknown"

_PUNCTUATION = re.compile(r"[.,;:!?'\"()]")
_UNITED_STATES = re.compile(r"\b(us|united states)\b", re.IGNORECASE)
_LEADING_THE = re.compile(r"^the\s+", re.IGNORECASE)
_COMPANY_TYPE = re.compile(
    r"\b(incorporated|corporation|limited liability company|llc|inc|corp)\b",
    re.IGNORECASE,
)
_TRAILING_COMPANY = re.compile(r"\s+company\s*$", re.IGNORECASE)
_REDUNDANT_DESIGNATOR = re.compile(
    r"(\bcompany)\s+(incorporated|corporation)\s*$", re.IGNORECASE
)
_WHITESPACE = re.compile(r"\s+")

ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    # Company types
    ("inc", "incorporated"),
    ("llc", "limited liability company"),
    ("ltd", "limited"),
    ("corp", "corporation"),
    ("co", "company"),
    ("lp", "limited partnership"),
    ("llp", "limited liability partnership"),
    # Financial institutions
    ("na", "national association"),
    ("fsa", "federal savings association"),
    ("fcu", "federal credit union"),
    ("cu", "credit union"),
    ("fcb", "federal credit bank"),
    # Common words
    ("amp", "and"),
    ("mtg", "mortgage"),
    ("svc", "service"),
    ("svcs", "services"),
    ("mgmt", "management"),
    ("fin", "financial"),
    ("fnd", "fund"),
    ("grp", "group"),
)

PLURALS: tuple[tuple[str, str], ...] = (
    ("banks", "bank"),
    ("mortgages", "mortgage"),
    ("services", "service"),
    ("groups", "group"),
    ("companies", "company"),
    ("corporations", "corporation"),
    ("associations", "association"),
    ("unions", "union"),
    ("funds", "fund"),
    ("trusts", "trust"),
)

WORD_VARIATIONS: tuple[tuple[str, str], ...] = (
    ("finance", "financial"),
)

LOWERCASE_WORDS = frozenset({"the", "of", "and", "a", "an", "in", "on", "at", "to", "for"})


def _word_table(pairs: Iterable[tuple[str, str]]) -> tuple[tuple[re.Pattern, str], ...]:
    return tuple(
        (re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE), replacement)
        for word, replacement in pairs
    )


_ABBREVIATION_PATTERNS = _word_table(ABBREVIATIONS)
_PLURAL_PATTERNS = _word_table(PLURALS)
_VARIATION_PATTERNS = _word_table(WORD_VARIATIONS)


@dataclass(frozen=True)
class LenderOverride:
    """
    One consolidation rule: if `pattern` matches the lowercased, expanded
    lender name, the canonical name is returned verbatim.
    """

    name: str
    pattern: re.Pattern
    canonical: str

    @classmethod
    def compile(cls, name: str, pattern: str, canonical: str) -> "LenderOverride":
        return cls(name=name, pattern=re.compile(pattern, re.IGNORECASE), canonical=canonical)

    def matches(self, normalized: str) -> bool:
        return self.pattern.search(normalized) is not None


# Evaluated in order; first match wins.
LENDER_OVERRIDES: tuple[LenderOverride, ...] = (
    LenderOverride.compile("wilmington", r"^wilmington\b", "Wilmington"),
    LenderOverride.compile("jpmorgan", r"^jpmorgan\b", "JPMorgan"),
    LenderOverride.compile("wells_fargo", r"^wells\s*fargo\b", "Wells Fargo"),
    LenderOverride.compile(
        "computershare",
        r"^computershare\s+trust\s+company\s+national\b",
        "Computer Trust Company",
    ),
    LenderOverride.compile("lincoln_street", r"^lincoln\s+street\b", "Lincoln Street"),
    LenderOverride.compile(
        "american_general_life",
        r"^american\s+general\s+life\s+insurance\b",
        "American General Life",
    ),
    LenderOverride.compile("ef_mortgage", r"ef\s+mortgage", "EF Mortgage"),
    LenderOverride.compile("tryon_street", r"(tryon|tyron)\s+street", "Tryon Street"),
    LenderOverride.compile("sig_rcrs", r"^sig\s*rcrs\b", "SIG RCRS"),
    LenderOverride.compile("sig_cre", r"^sig\s*cre\b", "Sig Cre"),
)


def _apply(patterns: tuple[tuple[re.Pattern, str], ...], text: str) -> str:
    for pattern, replacement in patterns:
        text = pattern.sub(replacement, text)
    return text


def _title_case(text: str) -> str:
    words = text.split(" ")
    titled = []
    for position, word in enumerate(words):
        if position > 0 and word in LOWERCASE_WORDS:
            titled.append(word)
        else:
            titled.append(word[:1].upper() + word[1:])
    return " ".join(titled)


def expand_lender(lender: str) -> str:
    """
    Run the generic lowercase rules (steps before overrides and title-casing).

    Args:
        lender: Raw lender text

    Returns:
        Lowercased, expanded, whitespace-collapsed lender name
    """
    normalized = lender.strip().lower()
    normalized = _PUNCTUATION.sub("", normalized)
    normalized = _UNITED_STATES.sub("united states", normalized)
    normalized = normalized.replace("&", " and ")
    normalized = _apply(_ABBREVIATION_PATTERNS, normalized)
    normalized = _apply(_PLURAL_PATTERNS, normalized)
    normalized = _apply(_VARIATION_PATTERNS, normalized)
    normalized = _LEADING_THE.sub("", normalized.strip())

    if _COMPANY_TYPE.search(normalized):
        normalized = _TRAILING_COMPANY.sub("", normalized)
        # "Abc Mortgage Company Inc" groups with "Abc Mortgage Company"
        normalized = _REDUNDANT_DESIGNATOR.sub(r"\1", normalized)

    return _WHITESPACE.sub(" ", normalized).strip()


def normalize_lender(
    lender: Any,
    overrides: Iterable[LenderOverride] = LENDER_OVERRIDES,
) -> str:
    """
    Normalize a lender/plaintiff name to its canonical grouping key.

    Args:
        lender: Raw lender value; dates and empty values yield "Unknown"
        overrides: Ordered consolidation overrides to evaluate before title-casing

    Returns:
        Canonical lender name

    Examples:
        >>> normalize_lender("ABC, Inc.")
        'Abc Incorporated'
        >>> normalize_lender("Wells Fargo Bank, N.A.")
        'Wells Fargo'
    """
    if not lender or isinstance(lender, date):
        return UNKNOWN

    normalized = expand_lender(str(lender))
    if not normalized:
        return UNKNOWN

    for override in overrides:
        if override.matches(normalized):
            return override.canonical

    return _title_case(normalized)
