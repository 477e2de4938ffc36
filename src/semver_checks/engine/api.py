# semver-checks:header:start
#
#   project      : semver-checks
#   file         : api.py
#   file_relpath : src/semver_checks/engine/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Protocols implemented by a comparison engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from semver_checks.core.request import CheckRequest
    from semver_checks.engine.config import GlobalConfig


class Report(Protocol):
    """Outcome of a check; the CLI only inspects whether it succeeded."""

    def success(self) -> bool:
        """Return True when no semver violations were found."""
        ...


@runtime_checkable
class CheckEngine(Protocol):
    """A comparison engine able to run a resolved check request.

    ``check_release`` blocks until the comparison is done. I/O, network and
    subprocess failures are raised as exceptions and propagate to the CLI
    unchanged.
    """

    def check_release(self, request: CheckRequest, config: GlobalConfig) -> Report:
        """Run the semver comparison described by ``request``."""
        ...
