# topmark:header:start
#
#   project      : FlowText
#   file         : exit_codes.py
#   file_relpath : src/flowtext/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FlowText CLI.

FlowText aligns with the BSD `sysexits` convention so that supervisors and
shell pipelines can tell a bad configuration from a bad input record.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FlowText CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Malformed message document, or a record that cannot be
            rendered. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Configuration or element file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Malformed configuration or element file. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
