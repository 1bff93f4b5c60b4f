"""
Pydantic schema for parsed case citation components.

This module defines the structured record the parser produces and the
formatter consumes. Every field defaults to an empty value: a citation that
only partly matches the parser's patterns still yields a valid record, with
unmatched fields left empty.

The schema is designed to support:
    - Read-only display of each component by a presentation layer
    - JSON serialization for the command-line interface
    - Construction from either snake_case or camelCase field names

Python Learning Notes:
    - Pydantic validates data at runtime and provides type hints
    - Field(...) allows adding descriptions and defaults
    - AliasChoices lets one field accept several input names
    - default_factory=list gives every instance its own list
"""

from typing import Any, Dict, List

from pydantic import AliasChoices, BaseModel, Field


class CitationComponents(BaseModel):
    """
    Components extracted from a single free-text case citation.

    Each instance is the result of one parse call and has no identity beyond
    it. No field is required; absence of a match leaves the field empty.

    Example:
        >>> components = CitationComponents(
        ...     party_one="Brown",
        ...     party_two="Board of Education",
        ...     volume="347",
        ...     reporter="U.S.",
        ...     page="483",
        ...     year="1954",
        ... )
        >>> components.is_empty()
        False
    """

    party_one: str = Field(
        default="",
        validation_alias=AliasChoices("party_one", "partyOne"),
        description="First named party; empty if no 'v.' separator was found",
    )
    party_two: str = Field(
        default="",
        validation_alias=AliasChoices("party_two", "partyTwo"),
        description="Second named party; empty if no 'v.' separator was found",
    )
    volume: str = Field(default="", description="Reporter volume number (digits)")
    reporter: str = Field(
        default="", description="Reporter abbreviation from the reporter table (e.g., 'F.3d')"
    )
    page: str = Field(default="", description="First page of the case (digits)")
    court: str = Field(
        default="", description="Court text from the parenthetical, year stripped"
    )
    year: str = Field(default="", description="Four-digit decision year")
    pinpoint: str = Field(default="", description="Pinpoint page reference (digits)")
    subsequent_history: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("subsequent_history", "subsequentHistory"),
        description="History annotations such as \"aff'd, 500 U.S. 1\", in citation order",
    )

    def is_empty(self) -> bool:
        """Return True if no field holds a parsed value."""
        return self == CitationComponents()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
