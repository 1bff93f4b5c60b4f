"""
Main CLI entry point for casecite.

This module provides the primary command-line interface using Click.
All commands are organized into subcommands.
"""

import sys

import click
from dotenv import load_dotenv

from ..utils import CitationConfig, setup_logging
from .format import format_citation
from .parse import parse
from .rules import list_rules


@click.group(invoke_without_command=True)
@click.version_option(version="0.1.0", prog_name="casecite")
@click.pass_context
def main(ctx):
    """
    casecite - parse and reformat federal case citations.

    Extracts parties, reporter, court, year, pinpoint and subsequent
    history from a citation and reassembles it under selected Bluebook
    rules.
    """
    load_dotenv()

    try:
        config = CitationConfig()
        setup_logging(config.log_config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register subcommands
main.add_command(parse)
main.add_command(format_citation)
main.add_command(list_rules)


if __name__ == "__main__":
    main()
