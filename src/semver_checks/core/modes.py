# semver-checks:header:start
#
#   project      : semver-checks
#   file         : modes.py
#   file_relpath : src/semver_checks/core/modes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Operating mode selection.

Exactly one mode is live per invocation. The mode flags are globally exclusive
at the Click layer, so the priority order below only matters for callers that
bypass the CLI (tests, embedding applications).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from semver_checks.core.resolver import resolve_check_request

if TYPE_CHECKING:
    from pathlib import Path

    from semver_checks.core.args import SemverChecksArgs
    from semver_checks.core.request import CheckRequest


@dataclass(frozen=True, slots=True)
class BugReport:
    """Print an environment report for bug reports."""


@dataclass(frozen=True, slots=True)
class ListQueries:
    """Print the lint catalog."""


@dataclass(frozen=True, slots=True)
class ExplainQuery:
    """Explain one lint; ``query_id`` is resolved against the catalog later."""

    query_id: str


@dataclass(frozen=True, slots=True)
class CheckRelease:
    """Run the comparison engine on a resolved request."""

    request: CheckRequest


OperatingMode: TypeAlias = BugReport | ListQueries | ExplainQuery | CheckRelease


def select_mode(args: SemverChecksArgs, *, cwd: Path) -> OperatingMode:
    """Select the operating mode for an invocation.

    Priority: ``--bugreport``, ``--list``, ``--explain``, then check-release
    (the default). The check request is resolved only in the last case.

    Args:
        args (SemverChecksArgs): Raw arguments of the invocation.
        cwd (Path): The process working directory.

    Returns:
        OperatingMode: The selected mode.
    """
    if args.bugreport:
        return BugReport()
    if args.list_queries:
        return ListQueries()
    if args.explain is not None:
        return ExplainQuery(args.explain)
    return CheckRelease(resolve_check_request(args.check_release, cwd=cwd))
