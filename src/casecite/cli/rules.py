"""
Rules CLI command.

Lists the rule catalog so users can see which identifiers --rule accepts.
"""

import click

from ..rules import RULES, is_wired


@click.command(name="rules")
def list_rules():
    """
    List the Bluebook rules and subrules that can be enabled.

    Identifiers marked [reserved] are accepted but do not change the output.

    Example:
        casecite rules
    """
    for group in RULES:
        group_marker = "" if is_wired(group.id) else "  [reserved]"
        click.echo(f"{group.id:<10}{group.name}{group_marker}")
        for rule_id, description in group.subrules.items():
            marker = "" if is_wired(rule_id) else "  [reserved]"
            click.echo(f"  {rule_id:<10}{description}{marker}")
