# topmark:header:start
#
#   project      : FlowText
#   file         : version.py
#   file_relpath : src/flowtext/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText `version` command.

Prints the current FlowText version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from flowtext.constants import FLOWTEXT_VERSION


@click.command(
    name="version",
    help="Show the current version of FlowText.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["default", "json"]),
    default="default",
    help="Output format.",
)
def version_command(*, output_format: str = "default") -> None:
    """Show the current version of FlowText."""
    if output_format == "json":
        click.echo(json.dumps({"version": FLOWTEXT_VERSION}))
    else:
        click.echo(FLOWTEXT_VERSION)
