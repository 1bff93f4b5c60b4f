"""
Federal reporter table.

The table enumerates the eight federal case reporters the parser recognizes.
Each entry pairs a Bluebook abbreviation with the reporter's full name and a
case-insensitive pattern matching "<volume> <abbreviation> <page>" with
flexible whitespace and optional periods.

Table order is part of the contract. The parser tries every entry and keeps
the last one that matches, so when two patterns overlap the entry later in
the table wins. Entries are ordered most-specific-last:

    - "F." also matches "F.2d" and "F.3d" text (the series digit is captured
      as the page), so both series follow it.
    - "F. Supp." also matches "F. Supp. 2d" text, so the second series
      follows it.

Example Usage:
    ```python
    from casecite.reporters import get_reporter, match_reporters

    get_reporter("f.3d").name       # "Federal Reporter, Third Series"

    for match in match_reporters("Smith v. Jones, 123 F.2d 456 (1950)"):
        print(match.reporter.abbreviation, match.volume, match.page)
    # F. 123 2
    # F.2d 123 456
    ```
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Reporter:
    """
    A single reporter table entry.

    Attributes:
        abbreviation: Bluebook abbreviation (e.g., "F. Supp. 2d").
        name: Full reporter name.
        pattern: Compiled pattern; group 1 is the volume, group 2 the page.
    """

    abbreviation: str
    name: str
    pattern: re.Pattern


@dataclass(frozen=True)
class ReporterMatch:
    """A reporter whose pattern matched, with the captured volume and page."""

    reporter: Reporter
    volume: str
    page: str


def _reporter(abbreviation: str, name: str, pattern: str) -> Reporter:
    return Reporter(abbreviation, name, re.compile(pattern, re.IGNORECASE))


REPORTERS: Tuple[Reporter, ...] = (
    _reporter("U.S.", "United States Reports", r"\b(\d+)\s+U\.?\s*S\.?\s+(\d+)\b"),
    _reporter("S. Ct.", "Supreme Court Reporter", r"\b(\d+)\s+S\.?\s*Ct\.?\s+(\d+)\b"),
    _reporter("L. Ed.", "Lawyers' Edition", r"\b(\d+)\s+L\.?\s*Ed\.?\s+(\d+)\b"),
    # The page may also be the "2"/"3" of F.2d/F.3d text, which the later
    # series entries override. Unlisted series such as F.4th do not match.
    _reporter("F.", "Federal Reporter", r"\b(\d+)\s+F\.?\s*(\d+)(?:\b|(?<=[23])(?=d\b))"),
    _reporter("F.2d", "Federal Reporter, Second Series", r"\b(\d+)\s+F\.?\s*2d\s+(\d+)\b"),
    _reporter("F.3d", "Federal Reporter, Third Series", r"\b(\d+)\s+F\.?\s*3d\s+(\d+)\b"),
    # Also matches F. Supp. 2d text, overridden by the next entry; not 3d.
    _reporter(
        "F. Supp.",
        "Federal Supplement",
        r"\b(\d+)\s+F\.?\s*Supp\.?\s*(\d+)(?:\b|(?<=2)(?=d\b))",
    ),
    _reporter(
        "F. Supp. 2d",
        "Federal Supplement, Second Series",
        r"\b(\d+)\s+F\.?\s*Supp\.?\s*2d\s+(\d+)\b",
    ),
)


def get_reporter(abbreviation: str) -> Optional[Reporter]:
    """
    Look up a reporter by abbreviation, ignoring case and surrounding whitespace.

    Args:
        abbreviation: Reporter abbreviation such as "U.S." or "f. supp.".

    Returns:
        Optional[Reporter]: The table entry, or None if the abbreviation is
            not one of the enumerated reporters.
    """
    if not abbreviation:
        return None

    wanted = abbreviation.strip().lower()
    for reporter in REPORTERS:
        if reporter.abbreviation.lower() == wanted:
            return reporter
    return None


def match_reporters(text: str) -> List[ReporterMatch]:
    """
    Try every reporter pattern against the text.

    Each pattern is searched independently over the full text and contributes
    at most its first match. Results keep table order, so the last element is
    the entry the parser retains.

    Args:
        text: Citation text to scan.

    Returns:
        List[ReporterMatch]: One element per matching table entry, in table order.
    """
    matches = []
    for reporter in REPORTERS:
        found = reporter.pattern.search(text)
        if found:
            matches.append(ReporterMatch(reporter, found.group(1), found.group(2)))
    return matches
