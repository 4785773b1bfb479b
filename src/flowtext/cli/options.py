# topmark:header:start
#
#   project      : FlowText
#   file         : options.py
#   file_relpath : src/flowtext/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from flowtext.cli.errors import FlowtextUsageError
from flowtext.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the log level requested by ``-v``/``-q`` flags.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or ``None`` when neither flag is given.

    Raises:
        FlowtextUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        One -v flag sets INFO, two set DEBUG, three or more set TRACE.
        One -q flag sets ERROR, two or more set CRITICAL.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FlowtextUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 2:
        return logging.CRITICAL
    if quiet_count == 1:
        return logging.ERROR
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors. Specify twice to only log critical errors.",
    )(f)
    return f
