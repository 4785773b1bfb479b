# topmark:header:start
#
#   project      : FlowText
#   file         : elements.py
#   file_relpath : src/flowtext/cli/commands/elements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText `elements` command.

Lists the information elements of the active information model, along with
their identifiers and declared types. Useful to check that an extension file
was picked up.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from flowtext.ipfix.identity import FieldIdentity
    from flowtext.ipfix.registry import InformationModel, RegistryEntry


def _serialize(identity: FieldIdentity, entry: RegistryEntry) -> dict[str, Any]:
    return {
        "key": identity.key,
        "enterprise": identity.enterprise_number,
        "element": identity.element_id,
        "name": entry.name,
        "type": entry.type.type_name,
        "variable_length": entry.type.is_variable_length,
    }


@click.command(
    name="elements",
    help="List the information elements of the active information model.",
)
@click.option(
    "--enterprise",
    type=click.IntRange(min=0, max=0xFFFFFFFF),
    default=None,
    help="Only list elements of this enterprise number (0 for IANA).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["default", "json"]),
    default="default",
    help="Output format.",
)
def elements_command(
    *,
    enterprise: int | None = None,
    output_format: str = "default",
) -> None:
    """List information elements.

    Args:
        enterprise (int | None): Restrict the listing to one enterprise number.
        output_format (str): ``default`` (aligned text) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    model: InformationModel = ctx.obj["model"]

    rows = sorted(
        (identity, entry)
        for identity, entry in model.items()
        if enterprise is None or identity.enterprise_number == enterprise
    )

    if output_format == "json":
        click.echo(json.dumps([_serialize(i, e) for i, e in rows], indent=2))
        return

    if not rows:
        click.echo("No information elements.")
        return

    key_width = max(len(identity.key) for identity, _ in rows)
    name_width = max(len(entry.name) for _, entry in rows)
    for identity, entry in rows:
        click.echo(
            f"{identity.key:<{key_width}}  {entry.name:<{name_width}}  {entry.type.type_name}"
        )
