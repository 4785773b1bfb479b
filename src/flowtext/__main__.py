# topmark:header:start
#
#   project      : FlowText
#   file         : __main__.py
#   file_relpath : src/flowtext/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FlowText via ``python -m flowtext``.

Delegates to :func:`flowtext.cli.main.cli`, the same entry point as the
``flowtext`` console script.

Examples:
    Encode every data set of a message document::

        python -m flowtext encode message.json
"""

from __future__ import annotations

from flowtext.cli.main import cli

if __name__ == "__main__":
    cli()
