# semver-checks:header:start
#
#   project      : semver-checks
#   file         : errors.py
#   file_relpath : src/semver_checks/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click-independent exceptions raised by the resolvers, the catalog and the engine loader.

Usage errors are not defined here: they are detected by the Click layer (see
[`semver_checks.cli.errors`][semver_checks.cli.errors]) before any resolver runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ResolutionError(RuntimeError):
    """A resolver received input that the argument parser guarantees cannot occur.

    This is a contract violation, not a user error; it is never recovered.
    """


class UnknownQueryError(LookupError):
    """An explain request named a query id that is not in the catalog.

    Attributes:
        query_id: The id that was requested.
        known_ids: Every id in the catalog, in catalog enumeration order.
    """

    def __init__(self, query_id: str, known_ids: Sequence[str]) -> None:
        self.query_id = query_id
        self.known_ids = tuple(known_ids)
        available = "\n  ".join(self.known_ids)
        super().__init__(f"Unknown id `{query_id}`, available id's:\n  {available}")

    def __str__(self) -> str:
        return str(self.args[0])


class EngineNotFoundError(RuntimeError):
    """No comparison engine could be located or loaded."""
