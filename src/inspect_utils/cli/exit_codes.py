# topmark:header:start
#
#   project      : inspect-utils
#   file         : exit_codes.py
#   file_relpath : src/inspect_utils/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the inspect-utils CLI.

Usage errors keep Click's own exit code (2), so a bad flag and a bad demo name
look the same to calling scripts. Configuration errors follow the BSD `sysexits`
convention.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the inspect-utils CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error; same value as Click's usage errors.
        CONFIG_ERROR: Invalid printer settings (flags, environment or TOML).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 78  # EX_CONFIG
