# semver-checks:header:start
#
#   project      : semver-checks
#   file         : exit_codes.py
#   file_relpath : src/semver_checks/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Exit codes for the semver-checks CLI.

Success paths (bug report, list, explain, a check without semver violations)
exit with `SUCCESS`; every failure (unknown explain id, a check reporting
violations, an engine error) exits with `FAILURE`. Invocation errors detected
by our own option validators follow the BSD `sysexits` convention
(`EX_USAGE`); Click's built-in parse errors keep Click's own exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the semver-checks CLI.

    Attributes:
        SUCCESS: Successful execution; for checks, no semver violations were found.
        FAILURE: Any failure: unknown query id, semver violations, or an engine error.
        USAGE_ERROR: Conflicting or incomplete options. Mirrors BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
