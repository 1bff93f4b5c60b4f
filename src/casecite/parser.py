"""
Case citation parser.

This module turns a free-text federal case citation into CitationComponents.
There is no grammar: each component is pulled out by its own regular
expression, scanned independently over the full original text.

Recognized components:
    - Case name: "Brown v. Board of Education" -> party_one, party_two
    - Reporter citation: "347 U.S. 483" -> volume, reporter, page
    - Court and year: "(9th Cir. 1990)" -> court, year
    - Pinpoint: ", 164" right before the parenthetical or at the end
    - Subsequent history: ", aff'd, 500 U.S. 1" -> one entry per annotation

Failure semantics:
    parse_citation() never raises. A component whose pattern does not match
    stays empty. An unexpected error inside one extractor is logged and
    leaves only that component empty; the other components keep their
    results.

Example Usage:
    ```python
    from casecite.parser import parse_citation

    components = parse_citation("Roe v. Wade, 410 U.S. 113, 164 (1973)")
    components.party_one    # "Roe"
    components.reporter     # "U.S."
    components.pinpoint     # "164"
    components.year         # "1973"
    ```

Python Learning Notes:
    - re.compile() builds a pattern once at import time for reuse
    - Lookaheads (?=...) test what follows without consuming it
    - re.split() with maxsplit=1 splits only at the first separator
"""

import logging
import re
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .reporters import REPORTERS, match_reporters
from .schema import CitationComponents

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Any "<volume> <reporter> <page>" token from the reporter table.
_REPORTER_TOKEN = "|".join(f"(?:{reporter.pattern.pattern})" for reporter in REPORTERS)

# Leading text up to the first comma or the first reporter token.
CASE_NAME_PATTERN = re.compile(
    rf"^\s*(.*?)\s*(?=,|{_REPORTER_TOKEN}|$)", re.IGNORECASE | re.DOTALL
)

PARTY_SEPARATOR_PATTERN = re.compile(r"\s+v\.?\s+")

# Parenthetical ending in exactly four digits: "(9th Cir. 1990)", "(1954)"
COURT_YEAR_PATTERN = re.compile(r"\(([^()]*?)\s*(?<!\d)(\d{4})\)")

PINPOINT_PATTERN = re.compile(r",\s*(\d+)\s*(?:\(|$)")

_HISTORY_MARKER = r"(?:aff['’]d|rev['’]d|cert\.\s*denied)"

# An annotation runs from its marker to the next "(", the next comma-led
# marker, or the end of the text.
HISTORY_PATTERN = re.compile(
    rf",\s*({_HISTORY_MARKER}.*?)\s*(?=\(|,\s*{_HISTORY_MARKER}|$)",
    re.IGNORECASE | re.DOTALL,
)


def extract_parties(text: str) -> Tuple[str, str]:
    """
    Extract the two party names from the leading case-name segment.

    The segment is split once on "v." or "v" surrounded by whitespace.

    Args:
        text: Citation text.

    Returns:
        Tuple[str, str]: (party_one, party_two), or ("", "") if the segment
            has no separator.

    Example:
        >>> extract_parties("Brown v. Board of Education, 347 U.S. 483 (1954)")
        ('Brown', 'Board of Education')
        >>> extract_parties("In re Gault, 387 U.S. 1 (1967)")
        ('', '')
    """
    match = CASE_NAME_PATTERN.match(text)
    if not match:
        return "", ""

    parts = PARTY_SEPARATOR_PATTERN.split(match.group(1), maxsplit=1)
    if len(parts) < 2:
        return "", ""

    return parts[0].strip(), parts[1].strip()


def extract_reporter_citation(text: str) -> Tuple[str, str, str]:
    """
    Extract (volume, reporter, page) using the reporter table.

    Every table entry is tried; a later match overwrites an earlier one, so
    the last matching entry in table order is kept.

    Returns:
        Tuple[str, str, str]: (volume, reporter abbreviation, page), all
            empty if no reporter matched.
    """
    volume, reporter, page = "", "", ""
    for match in match_reporters(text):
        volume = match.volume
        reporter = match.reporter.abbreviation
        page = match.page
    return volume, reporter, page


def extract_court_and_year(text: str) -> Tuple[str, str]:
    """Extract (court, year) from the first parenthetical ending in a year."""
    match = COURT_YEAR_PATTERN.search(text)
    if not match:
        return "", ""
    return match.group(1).strip(), match.group(2)


def extract_pinpoint(text: str) -> str:
    match = PINPOINT_PATTERN.search(text)
    return match.group(1) if match else ""


def extract_subsequent_history(text: str) -> List[str]:
    """
    Extract every subsequent history annotation, in citation order.

    Recognized markers are "aff'd", "rev'd" and "cert. denied", matched
    case-insensitively after a comma. Each annotation runs up to, but not
    including, the next parenthesis, the next history marker, or the end
    of the text.

    Example:
        >>> extract_subsequent_history(
        ...     "Smith v. Jones, 1 F.3d 2 (2d Cir. 1993), aff'd, 510 U.S. 3 (1994)"
        ... )
        ["aff'd, 510 U.S. 3"]
    """
    history = []
    for match in HISTORY_PATTERN.finditer(text):
        entry = match.group(1).strip()
        if entry:
            history.append(entry)
    return history


def _extract(extractor: Callable[[str], T], text: str, default: T) -> T:
    try:
        return extractor(text)
    except Exception as e:
        logger.error(f"Error in {extractor.__name__} for '{text}': {str(e)}")
        return default


def parse_citation(text: Optional[Any]) -> CitationComponents:
    """
    Parse a free-text case citation into its components.

    This function is total: it never raises, and anything it cannot
    recognize is left at the field's empty default. Each component is
    extracted independently, so a failure in one extractor does not
    discard the others.

    Args:
        text: Raw citation text. None or non-string input is treated as
            empty text.

    Returns:
        CitationComponents: A fresh record; nothing is cached between calls.

    Example:
        >>> c = parse_citation("Brown v. Board of Education, 347 U.S. 483 (1954)")
        >>> (c.party_one, c.party_two, c.volume, c.reporter, c.page, c.year)
        ('Brown', 'Board of Education', '347', 'U.S.', '483', '1954')
    """
    if not isinstance(text, str):
        if text is not None:
            logger.warning(f"Expected citation text, got {type(text).__name__}")
        text = ""

    text = text.strip()
    if not text:
        return CitationComponents()

    party_one, party_two = _extract(extract_parties, text, ("", ""))
    volume, reporter, page = _extract(extract_reporter_citation, text, ("", "", ""))
    court, year = _extract(extract_court_and_year, text, ("", ""))
    pinpoint = _extract(extract_pinpoint, text, "")
    history = _extract(extract_subsequent_history, text, [])

    components = CitationComponents(
        party_one=party_one,
        party_two=party_two,
        volume=volume,
        reporter=reporter,
        page=page,
        court=court,
        year=year,
        pinpoint=pinpoint,
        subsequent_history=history,
    )
    logger.debug(f"Parsed citation '{text}': {components.to_dict()}")
    return components
