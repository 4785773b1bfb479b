# topmark:header:start
#
#   project      : FlowText
#   file         : errors.py
#   file_relpath : src/flowtext/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FlowText CLI.

Commands translate library errors ([`flowtext.ipfix.errors`][flowtext.ipfix.errors])
into these Click exceptions so that each failure class exits with its own code.
"""

from __future__ import annotations

import click

from flowtext.cli.exit_codes import ExitCode
from flowtext.ipfix.errors import (
    ConfigurationNotFoundError,
    ConfigurationParseError,
    FlowtextError,
    MessageDocumentError,
    TextEncodingError,
    UnsupportedValueTypeError,
)


class FlowtextCliError(click.ClickException):
    """Base class for all FlowText CLI errors."""

    exit_code = ExitCode.FAILURE


class FlowtextUsageError(FlowtextCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FlowtextConfigError(FlowtextCliError):
    """Error for malformed configuration or element files."""

    exit_code = ExitCode.CONFIG_ERROR


class FlowtextFileNotFoundError(FlowtextCliError):
    """Error when a configuration or element file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FlowtextEncodingError(FlowtextCliError):
    """Error for malformed message documents and records that cannot be rendered."""

    exit_code = ExitCode.ENCODING_ERROR


def to_cli_error(exc: FlowtextError) -> FlowtextCliError:
    """Map a library error to the matching CLI error."""
    message = str(exc)
    if isinstance(exc, ConfigurationNotFoundError):
        return FlowtextFileNotFoundError(message)
    if isinstance(exc, ConfigurationParseError):
        return FlowtextConfigError(message)
    if isinstance(exc, (MessageDocumentError, UnsupportedValueTypeError, TextEncodingError)):
        return FlowtextEncodingError(message)
    return FlowtextCliError(message)
