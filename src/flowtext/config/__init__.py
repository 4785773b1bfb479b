# topmark:header:start
#
#   project      : FlowText
#   file         : __init__.py
#   file_relpath : src/flowtext/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText configuration: settings file loading and logging setup."""

from __future__ import annotations

from flowtext.config.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]
