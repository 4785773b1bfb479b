# topmark:header:start
#
#   project      : FlowText
#   file         : main.py
#   file_relpath : src/flowtext/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText command line interface.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``settings``: the [`Settings`][flowtext.config.settings.Settings] in effect;
- ``model``: the [`InformationModel`][flowtext.ipfix.registry.InformationModel]
  subcommands use to type values.

The model is handed to subcommands explicitly; the CLI never replaces the
process-wide model.
"""

from __future__ import annotations

from pathlib import Path

import click

from flowtext.cli.commands.elements import elements_command
from flowtext.cli.commands.encode import encode_command
from flowtext.cli.commands.version import version_command
from flowtext.cli.errors import to_cli_error
from flowtext.cli.options import common_verbose_options, resolve_verbosity
from flowtext.config.logging import get_logger, resolve_env_log_level, setup_logging
from flowtext.config.settings import Settings, load_settings
from flowtext.constants import DEFAULT_TOML_CONFIG_NAME
from flowtext.ipfix.errors import FlowtextError
from flowtext.ipfix.registry import InformationModel, get_information_model, load_extensions

logger = get_logger(__name__)


def _resolve_settings(config_path: Path | None) -> Settings:
    """Load the explicit config file, or ``./flowtext.toml`` when present."""
    if config_path is None:
        candidate = Path(DEFAULT_TOML_CONFIG_NAME)
        if not candidate.is_file():
            return Settings()
        config_path = candidate
    return load_settings(config_path)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    config_path: Path | None,
    elements_dir: Path | None,
) -> None:
    """Initialize logging, settings and the information model on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        config_path (Path | None): Explicit ``--config`` file, if any.
        elements_dir (Path | None): Explicit ``--elements-dir``, if any.

    Raises:
        FlowtextCliError: If the configuration or element file is missing or malformed.
    """
    ctx.obj = ctx.obj or {}

    # Flags win over the environment; the config file is consulted last
    cli_level = resolve_verbosity(verbose, quiet)
    setup_logging(level=cli_level if cli_level is not None else resolve_env_log_level())

    try:
        settings = _resolve_settings(config_path).with_overrides(elements_dir=elements_dir)
        if cli_level is None and resolve_env_log_level() is None and settings.log_level is not None:
            setup_logging(level=settings.log_level)

        model: InformationModel = (
            load_extensions(settings.elements_dir)
            if settings.elements_dir is not None
            else get_information_model()
        )
    except FlowtextError as exc:
        raise to_cli_error(exc) from exc

    logger.debug("Using information model with %d elements", len(model))
    ctx.obj["settings"] = settings
    ctx.obj["model"] = model


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FlowText CLI: render decoded IPFIX records as JSON text.",
)
@common_verbose_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Settings file (default: ./{DEFAULT_TOML_CONFIG_NAME} when present).",
)
@click.option(
    "--elements-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding ipfix.elements; replaces the built-in IANA elements.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_path: Path | None,
    elements_dir: Path | None,
) -> None:
    """Entry point for the FlowText CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        config_path=config_path,
        elements_dir=elements_dir,
    )

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'flowtext encode MESSAGE.json' to render a message.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(encode_command)

cli.add_command(elements_command)

if __name__ == "__main__":
    cli()
