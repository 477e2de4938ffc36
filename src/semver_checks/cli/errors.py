# semver-checks:header:start
#
#   project      : semver-checks
#   file         : errors.py
#   file_relpath : src/semver_checks/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Exceptions for the semver-checks CLI.

Usage:
    Raise these exceptions from option validators to signal invocation errors
    with standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from semver_checks.core.exit_codes import ExitCode
from semver_checks.core.keys import ArgKey


class SemverChecksError(click.ClickException):
    """Base class for all semver-checks CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get(ArgKey.CONSOLE) if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"error: {self.format_message()}")
            return
        super().show(file)


class SemverChecksUsageError(SemverChecksError):
    """Error for command-line invocation errors (conflicting or incomplete options)."""

    exit_code = ExitCode.USAGE_ERROR
