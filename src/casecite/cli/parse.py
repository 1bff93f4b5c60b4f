"""
Parse CLI command.

Shows the components extracted from a citation, one field per line, the way
a form would display them read-only.
"""

import json

import click

from ..parser import parse_citation

FIELD_LABELS = [
    ("party_one", "Party one"),
    ("party_two", "Party two"),
    ("volume", "Volume"),
    ("reporter", "Reporter"),
    ("page", "Page"),
    ("pinpoint", "Pinpoint"),
    ("court", "Court"),
    ("year", "Year"),
]


@click.command()
@click.argument("citation_text")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON",
)
def parse(citation_text: str, as_json: bool):
    """
    Parse a case citation into its components.

    Fields that could not be recognized are shown as empty.

    Examples:
        casecite parse "Brown v. Board of Education, 347 U.S. 483 (1954)"
        casecite parse "Roe v. Wade, 410 U.S. 113, 164 (1973)" --json
    """
    components = parse_citation(citation_text)

    if as_json:
        click.echo(json.dumps(components.to_dict(), indent=2))
        return

    values = components.to_dict()
    for field_name, label in FIELD_LABELS:
        click.echo(f"{label + ':':<20}{values[field_name]}")

    if components.subsequent_history:
        click.echo("Subsequent history:")
        for entry in components.subsequent_history:
            click.echo(f"  - {entry}")
    else:
        click.echo(f"{'Subsequent history:':<20}")
