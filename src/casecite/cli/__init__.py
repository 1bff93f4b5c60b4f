"""
Command-line interface for casecite.

This module provides CLI commands for:
- Parsing a citation into its components
- Reformatting a citation under selected Bluebook rules
- Listing the rule catalog

Usage:
    casecite parse "<citation>"      # Show components
    casecite format "<citation>"     # Reformat
    casecite rules                   # List rule identifiers
"""

from .format import format_citation
from .main import main
from .parse import parse
from .rules import list_rules

__all__ = ["main", "parse", "format_citation", "list_rules"]
