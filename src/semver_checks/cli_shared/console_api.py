# semver-checks:header:start
#
#   project      : semver-checks
#   file         : console_api.py
#   file_relpath : src/semver_checks/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by CLI commands and by the
comparison engine to emit user-facing output, separate from internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands.

    Implementations may use Click, Rich, or plain stdlib streams.
    """

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def status(self, text: str = "", *, nl: bool = True) -> None:
        """Write a status message to stderr (cargo-style shell output)."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
