"""
casecite - parse and reformat federal case citations.

casecite extracts the components of a free-text case citation (parties,
reporter volume and page, court, year, pinpoint, subsequent history) and
reassembles them under a small, toggleable subset of Bluebook rules.

The public API is two pure functions plus the reference tables they use:

    parse(text) -> CitationComponents
    format(components, rule_flags) -> str

Example Usage:
    ```python
    import casecite

    components = casecite.parse("The Acme Corporation v. Smith, 12 F.3d 34 (2d Cir. 1994)")
    flags = casecite.build_rule_flags(["10.2.1.c", "10.2.1.d"])
    casecite.format(components, flags)
    # "Acme Corp. v. Smith, 12 F.3d 34 (2d Cir. 1994)"
    ```
"""

from typing import Optional

from .formatter import format_case_name, generate_citation
from .parser import parse_citation
from .reporters import REPORTERS, Reporter, get_reporter
from .rules import RULES, RuleFlags, RuleGroup, all_rule_ids, build_rule_flags, is_wired
from .schema import CitationComponents

__version__ = "0.1.0"

parse = parse_citation
format = generate_citation


def reformat(text: str, rule_flags: Optional[RuleFlags] = None) -> str:
    """Parse a citation and format it in one step."""
    return generate_citation(parse_citation(text), rule_flags)


__all__ = [
    "CitationComponents",
    "REPORTERS",
    "RULES",
    "Reporter",
    "RuleFlags",
    "RuleGroup",
    "all_rule_ids",
    "build_rule_flags",
    "format",
    "format_case_name",
    "generate_citation",
    "get_reporter",
    "is_wired",
    "parse",
    "parse_citation",
    "reformat",
]
