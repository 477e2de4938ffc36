# semver-checks:header:start
#
#   project      : semver-checks
#   file         : bugreport.py
#   file_relpath : src/semver_checks/cli/commands/bugreport.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""``--bugreport``: print environment details for issue reports."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from semver_checks.bugreport import collect_bugreport, render_bugreport

if TYPE_CHECKING:
    from semver_checks.cli_shared.console_api import ConsoleLike


def run_bugreport(console: ConsoleLike, argv: Sequence[str] | None = None) -> None:
    """Print the bug report to stdout.

    Args:
        console (ConsoleLike): Program-output console.
        argv (Sequence[str] | None): Command line to report; defaults to `sys.argv`.
    """
    sections = collect_bugreport(sys.argv if argv is None else argv)
    console.print(render_bugreport(sections))
