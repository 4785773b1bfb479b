# topmark:header:start
#
#   project      : FlowText
#   file         : __init__.py
#   file_relpath : src/flowtext/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText package.

FlowText renders decoded IPFIX export messages as compact JSON text and keeps
the information model that names and types every IPFIX field identifier. It
exposes a small typed API (``flowtext.ipfix``) and a CLI (``flowtext``).
"""

from __future__ import annotations
