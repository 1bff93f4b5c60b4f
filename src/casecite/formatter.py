"""
Bluebook case citation formatter.

This module assembles a citation string from CitationComponents and a rule
flag mapping. Segments are emitted in a fixed order and each is omitted when
its source data is empty:

    1. Case name: "Brown v. Board of Education"
    2. Reporter: ", 347 U.S. 483" (volume, reporter and page all present)
    3. Pinpoint: ", 495"
    4. Court and year: " (9th Cir. 1990)", " (1954)" or " (9th Cir.)"
    5. Subsequent history: ", aff'd, 500 U.S. 1" (only with rule 10.7 on)

Rule flags consulted:
    - 10.2.1.d: drop a leading "The " from the case name
    - 10.2.1.c: abbreviate Corporation, Incorporated, Limited and Company
    - 10.7: include subsequent history

No other flag affects output. The reporter, pinpoint and court/year segments
are always included when their data is present.

Example Usage:
    ```python
    from casecite.formatter import format_case_name, generate_citation
    from casecite.parser import parse_citation

    format_case_name("The Acme Corporation", "Smith", {"10.2.1.d": True, "10.2.1.c": True})
    # "Acme Corp. v. Smith"

    components = parse_citation("Roe v. Wade, 410 U.S. 113, 164 (1973)")
    generate_citation(components, {})
    # "Roe v. Wade, 410 U.S. 113, 164 (1973)"
    ```
"""

import re
from typing import List, Optional, Tuple

from .rules import (
    CASE_NAME_ABBREVIATE_BUSINESS,
    CASE_NAME_OMIT_THE,
    SUBSEQUENT_HISTORY,
    RuleFlags,
    is_enabled,
)
from .schema import CitationComponents

LEADING_THE_PATTERN = re.compile(r"^the\s+", re.IGNORECASE)

BUSINESS_ABBREVIATIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\bCorporation\b", re.IGNORECASE), "Corp."),
    (re.compile(r"\bIncorporated\b", re.IGNORECASE), "Inc."),
    (re.compile(r"\bLimited\b", re.IGNORECASE), "Ltd."),
    (re.compile(r"\bCompany\b", re.IGNORECASE), "Co."),
]


def abbreviate_business_designations(name: str) -> str:
    """Replace every business designation word in the name with its abbreviation."""
    for pattern, abbreviation in BUSINESS_ABBREVIATIONS:
        name = pattern.sub(abbreviation, name)
    return name


def format_case_name(
    party_one: str, party_two: str, rule_flags: Optional[RuleFlags] = None
) -> str:
    """
    Format "<party_one> v. <party_two>" under the enabled case-name rules.

    Rules are applied to the combined name, in order: 10.2.1.d removes a
    leading "The " (case-insensitive) from the start of the name; 10.2.1.c
    abbreviates business designations anywhere in the name, so words in
    either party are replaced.

    Args:
        party_one: First party name.
        party_two: Second party name.
        rule_flags: Mapping of rule identifier to enabled state. Missing keys
            and a None mapping count as disabled.

    Returns:
        str: The formatted case name, or "" if either party is empty.
    """
    if not party_one or not party_two:
        return ""

    name = f"{party_one} v. {party_two}"

    if is_enabled(rule_flags, CASE_NAME_OMIT_THE):
        name = LEADING_THE_PATTERN.sub("", name, count=1)

    if is_enabled(rule_flags, CASE_NAME_ABBREVIATE_BUSINESS):
        name = abbreviate_business_designations(name)

    return name


def format_court_parenthetical(court: str, year: str) -> str:
    """Return " (<court> <year>)" with only the parts present, or "" if neither is."""
    if not court and not year:
        return ""
    return f" ({' '.join(part for part in (court, year) if part)})"


def generate_citation(
    components: CitationComponents, rule_flags: Optional[RuleFlags] = None
) -> str:
    """
    Assemble the full citation string from parsed components.

    Segments are concatenated as-is; with an empty case name the result
    starts at the reporter segment's ", " separator. Neither argument is
    modified, and equal inputs always produce equal output.

    Args:
        components: Parsed citation components.
        rule_flags: Mapping of rule identifier to enabled state.

    Returns:
        str: The formatted citation, or "" if every segment is empty.
    """
    citation = format_case_name(components.party_one, components.party_two, rule_flags)

    if components.volume and components.reporter and components.page:
        citation += f", {components.volume} {components.reporter} {components.page}"

    if components.pinpoint:
        citation += f", {components.pinpoint}"

    citation += format_court_parenthetical(components.court, components.year)

    if is_enabled(rule_flags, SUBSEQUENT_HISTORY) and components.subsequent_history:
        citation += ", " + ", ".join(components.subsequent_history)

    return citation
