# topmark:header:start
#
#   project      : FlowText
#   file         : encode.py
#   file_relpath : src/flowtext/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText `encode` command.

Reads a JSON message document and prints one JSON line per data set, in the
same shape a collector would forward them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from flowtext.cli.errors import FlowtextUsageError, to_cli_error
from flowtext.ipfix.documents import loads_message
from flowtext.ipfix.errors import FlowtextError
from flowtext.ipfix.marshal import encode

if TYPE_CHECKING:
    from flowtext.ipfix.registry import InformationModel


@click.command(
    name="encode",
    help="Render the data sets of a message document as JSON lines.",
    epilog="""
MESSAGE is a JSON message document, or '-' to read it from standard input.
Each data set is printed on its own line. Bare values are typed with the
active information model (see 'flowtext elements').
""",
)
@click.argument("message_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--index",
    type=int,
    default=None,
    help="Only render the data set at this position.",
)
def encode_command(
    *,
    message_file: TextIO,
    index: int | None = None,
) -> None:
    """Render a message document.

    Args:
        message_file (TextIO): The opened message document.
        index (int | None): Position of the single data set to render; all data
            sets are rendered when ``None``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    model: InformationModel = ctx.obj["model"]

    try:
        message = loads_message(message_file.read(), model)
    except FlowtextError as exc:
        raise to_cli_error(exc) from exc

    count = len(message.data_sets)
    if index is not None and not 0 <= index < count:
        raise FlowtextUsageError(f"--index {index} out of range: message has {count} data sets")

    indices = range(count) if index is None else (index,)
    # Render everything first so a bad record yields no partial output
    lines: list[str] = []
    for i in indices:
        try:
            lines.append(encode(message, i))
        except FlowtextError as exc:
            cli_error = to_cli_error(exc)
            cli_error.message = f"data set {i}: {cli_error.message}"
            raise cli_error from exc

    for line in lines:
        click.echo(line)
