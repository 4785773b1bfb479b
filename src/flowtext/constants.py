# topmark:header:start
#
#   project      : FlowText
#   file         : constants.py
#   file_relpath : src/flowtext/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FlowText Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FLOWTEXT_VERSION: str = get_version("flowtext")
except PackageNotFoundError:
    FLOWTEXT_VERSION = "0.0.0"

# Name of the information element extension file inside the elements directory
EXTENSION_ELEMENTS_FILENAME: str = "ipfix.elements"

# Default name of the FlowText configuration file
DEFAULT_TOML_CONFIG_NAME: str = "flowtext.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "FLOWTEXT_LOG_LEVEL"
