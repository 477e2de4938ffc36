# semver-checks:header:start
#
#   project      : semver-checks
#   file         : config.py
#   file_relpath : src/semver_checks/engine/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Output settings shared between the CLI and the comparison engine.

`GlobalConfig` carries the user-facing log level resolved from ``-v``/``-q``
and the console used for program output. Its ``shell_*`` helpers write
cargo-style status lines (a right-aligned, bold status word followed by the
message) to stderr, gated by the log level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semver_checks.cli_shared.console_api import ConsoleLike

#: Width of the right-aligned status column, as in cargo's shell output.
STATUS_WIDTH: int = 12


@dataclass
class GlobalConfig:
    """Process-wide output configuration for one invocation.

    Attributes:
        console (ConsoleLike): Program-output console.
        log_level (int | None): Minimum level of user-facing messages; ``None``
            silences everything (``-qqq``).
    """

    console: ConsoleLike
    log_level: int | None = logging.INFO

    def _enabled(self, level: int) -> bool:
        return self.log_level is not None and self.log_level <= level

    def is_error(self) -> bool:
        """Return True if error messages are shown."""
        return self._enabled(logging.ERROR)

    def is_warn(self) -> bool:
        """Return True if warnings are shown."""
        return self._enabled(logging.WARNING)

    def is_info(self) -> bool:
        """Return True if informational messages are shown."""
        return self._enabled(logging.INFO)

    def is_verbose(self) -> bool:
        """Return True if verbose (debug) messages are shown."""
        return self._enabled(logging.DEBUG)

    def shell_print(
        self,
        status: str,
        message: str,
        *,
        fg: str,
        justified: bool = True,
    ) -> None:
        """Write a status line to stderr.

        Args:
            status (str): Status word (e.g. ``Checking``).
            message (str): Message text.
            fg (str): Click color name for the status word.
            justified (bool): Right-align the status in a 12-column field; otherwise
                render ``status: message``.
        """
        if justified:
            head = self.console.styled(f"{status:>{STATUS_WIDTH}}", fg=fg, bold=True)
            self.console.status(f"{head} {message}")
        else:
            head = self.console.styled(f"{status}:", fg=fg, bold=True)
            self.console.status(f"{head} {message}")

    def shell_note(self, message: str) -> None:
        """Print a note (shown at the default level and above)."""
        if self.is_info():
            self.shell_print("note", message, fg="cyan", justified=False)

    def shell_warn(self, message: str) -> None:
        """Print a warning."""
        if self.is_warn():
            self.shell_print("warning", message, fg="yellow", justified=False)

    def shell_error(self, message: str) -> None:
        """Print an error."""
        if self.is_error():
            self.shell_print("error", message, fg="red", justified=False)
