# topmark:header:start
#
#   project      : FlowText
#   file         : __init__.py
#   file_relpath : src/flowtext/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText command line interface (Click)."""

from __future__ import annotations
