"""
Format CLI command.

Parses a citation and prints it reformatted under the selected rules.
Enabled rules come from the environment defaults (CASECITE_ENABLED_RULES)
plus any --rule options.
"""

import sys
from typing import Tuple

import click

from ..formatter import generate_citation
from ..parser import parse_citation
from ..rules import all_rule_ids, build_rule_flags
from ..utils.config import CitationConfig


@click.command(name="format")
@click.argument("citation_text")
@click.option(
    "--rule",
    "-r",
    "rules",
    multiple=True,
    help="Enable a rule or subrule by identifier (repeatable, e.g. -r 10.2.1.d -r 10.7)",
)
@click.option(
    "--all-rules",
    is_flag=True,
    help="Enable every rule in the catalog",
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Ignore CASECITE_ENABLED_RULES and use only --rule options",
)
def format_citation(
    citation_text: str, rules: Tuple[str, ...], all_rules: bool, no_config: bool
):
    """
    Reformat a case citation using Bluebook rules.

    Examples:
        casecite format "The Acme Corporation v. Smith, 12 F.3d 34 (2d Cir. 1994)" -r 10.2.1.c -r 10.2.1.d
        casecite format "Smith v. Jones, 1 F.3d 2 (1993), aff'd, 510 U.S. 3 (1994)" --all-rules
    """
    try:
        if all_rules:
            enabled = all_rule_ids()
            strict = True
        elif no_config:
            enabled = list(rules)
            strict = True
        else:
            config = CitationConfig()
            enabled = config.enabled_rules + list(rules)
            strict = config.strict_rules

        rule_flags = build_rule_flags(enabled, strict=strict)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    citation = generate_citation(parse_citation(citation_text), rule_flags)
    if not citation:
        click.echo("No citation components recognized.", err=True)
        sys.exit(1)

    click.echo(citation)
