# topmark:header:start
#
#   project      : FlowText
#   file         : errors.py
#   file_relpath : src/flowtext/ipfix/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FlowText library.

Every error is terminal for the operation that raised it; nothing is retried
internally. Each class also derives from the closest builtin exception so that
callers may catch either.
"""

from __future__ import annotations


class FlowtextError(Exception):
    """Base class for all FlowText library errors."""


class ConfigurationNotFoundError(FlowtextError, FileNotFoundError):
    """An element definition file or configuration file does not exist."""


class ConfigurationParseError(FlowtextError, ValueError):
    """An element definition file or configuration file is malformed."""


class UnsupportedValueTypeError(FlowtextError, TypeError):
    """A value reached the encoder with no formatting rule for its kind."""


class TextEncodingError(FlowtextError, ValueError):
    """A string value cannot be rendered as a JSON text literal."""


class MessageDocumentError(FlowtextError, ValueError):
    """A message document does not describe a valid IPFIX message."""
