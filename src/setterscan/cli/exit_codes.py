# topmark:header:start
#
#   project      : SetterScan
#   file         : exit_codes.py
#   file_relpath : src/setterscan/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SetterScan CLI.

SetterScan aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. Kptfile warnings never change the exit code;
only fatal errors do.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SetterScan CLI.

    Attributes:
        SUCCESS: Successful execution (warnings may have been reported).
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: A package file, Kptfile or ResourceList cannot be read or
            interpreted. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The package directory, or the file named by the setter
            function's ``configPath``, does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: Internal failure. Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Configuration error (unreadable or malformed config file).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
