# topmark:header:start
#
#   project      : FlowText
#   file         : __init__.py
#   file_relpath : src/flowtext/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText CLI subcommands."""
