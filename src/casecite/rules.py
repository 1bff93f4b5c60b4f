"""
Catalog of the Bluebook rules the formatter understands.

The catalog is static reference data: three rule groups, each with an
identifier, a display name, and a mapping of subrule identifier to
description. A presentation layer renders one toggle per identifier and
hands the resulting flag mapping to the formatter.

Only a few identifiers change formatter output:

    - "10.2.1.c": abbreviate business designations (Corporation -> Corp.)
    - "10.2.1.d": omit a leading "The" from the case name
    - "10.7": include subsequent history (the group flag, not its subrules)

Every other identifier is reserved. It is listed and toggleable but has no
effect on the formatted citation; is_wired() reports which is which.

Python Learning Notes:
    - MappingProxyType gives a read-only view over a dict
    - frozenset is an immutable set, suitable for module constants
    - Generators (yield) produce identifiers lazily in catalog order
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

RuleFlags = Mapping[str, bool]

CASE_NAME_ABBREVIATE_BUSINESS = "10.2.1.c"
CASE_NAME_OMIT_THE = "10.2.1.d"
SUBSEQUENT_HISTORY = "10.7"


@dataclass(frozen=True)
class RuleGroup:
    """
    A top-level rule and its subrules.

    Attributes:
        id: Rule identifier (e.g., "10.7").
        name: Display name.
        subrules: Read-only mapping of subrule identifier to description.
    """

    id: str
    name: str
    subrules: Mapping[str, str]


def _group(rule_id: str, name: str, subrules: Dict[str, str]) -> RuleGroup:
    return RuleGroup(rule_id, name, MappingProxyType(dict(subrules)))


RULES: Tuple[RuleGroup, ...] = (
    _group(
        "10.2.1",
        "Case Names",
        {
            "10.2.1.a": "Abbreviate party names",
            "10.2.1.b": 'Include "In re" and "Ex parte" procedural phrases',
            "10.2.1.c": "Abbreviate business designations (Corp., Inc., Ltd., Co.)",
            "10.2.1.d": 'Omit "The" as the first word of a party name',
            "10.2.1.e": "Include descriptive terms",
            "10.2.1.f": "Abbreviate geographic terms",
        },
    ),
    _group(
        "10.3",
        "Reporters and Court Parenthetical",
        {
            "10.3.1": "Cite the volume, reporter abbreviation, and first page",
            "10.4": "Indicate the deciding court and year in a parenthetical",
        },
    ),
    _group(
        "10.7",
        "Subsequent History",
        {
            "10.7.1.a": "Include affirmances (aff'd)",
            "10.7.1.b": "Include reversals (rev'd)",
            "10.7.1.c": "Include denials of certiorari (cert. denied)",
        },
    ),
)

WIRED_RULES: FrozenSet[str] = frozenset(
    {CASE_NAME_ABBREVIATE_BUSINESS, CASE_NAME_OMIT_THE, SUBSEQUENT_HISTORY}
)


def iter_rule_ids() -> Iterator[str]:
    """Yield every group and subrule identifier in catalog order."""
    for group in RULES:
        yield group.id
        yield from group.subrules


def all_rule_ids() -> List[str]:
    return list(iter_rule_ids())


def get_rule_group(rule_id: str) -> Optional[RuleGroup]:
    for group in RULES:
        if group.id == rule_id:
            return group
    return None


def describe_rule(rule_id: str) -> str:
    """
    Return the display text for a group or subrule identifier.

    Raises:
        KeyError: If the identifier is not in the catalog.
    """
    for group in RULES:
        if group.id == rule_id:
            return group.name
        if rule_id in group.subrules:
            return group.subrules[rule_id]
    raise KeyError(f"Unknown rule identifier: {rule_id}")


def is_wired(rule_id: str) -> bool:
    """Return True if toggling the identifier can change formatter output."""
    return rule_id in WIRED_RULES


def is_enabled(rule_flags: Optional[RuleFlags], rule_id: str) -> bool:
    """Look up a flag, treating a missing mapping or key as disabled."""
    if not rule_flags:
        return False
    return bool(rule_flags.get(rule_id, False))


def build_rule_flags(enabled: Iterable[str] = (), strict: bool = True) -> Dict[str, bool]:
    """
    Build a complete flag mapping with every catalog identifier present.

    Args:
        enabled: Identifiers to switch on. Surrounding whitespace is ignored.
        strict: If True, unknown identifiers raise ValueError. If False they
            are skipped with a warning.

    Returns:
        Dict[str, bool]: Every catalog identifier mapped to its enabled state.

    Raises:
        ValueError: If strict is True and an identifier is not in the catalog.

    Example Usage:
        ```python
        flags = build_rule_flags(["10.2.1.d", "10.7"])
        flags["10.7"]       # True
        flags["10.2.1.c"]   # False
        ```
    """
    flags = {rule_id: False for rule_id in iter_rule_ids()}

    for rule_id in enabled:
        rule_id = rule_id.strip()
        if not rule_id:
            continue
        if rule_id not in flags:
            if strict:
                raise ValueError(
                    f"Unknown rule identifier '{rule_id}'. "
                    f"Valid identifiers: {', '.join(flags)}"
                )
            logger.warning(f"Ignoring unknown rule identifier: {rule_id}")
            continue
        flags[rule_id] = True

    return flags
