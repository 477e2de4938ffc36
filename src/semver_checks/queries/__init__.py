# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/queries/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Catalog of semver lints (queries) known to the CLI.

The catalog backs ``--list`` and ``--explain``. Lint definitions ship with the
package in ``lints.toml``; comparison engines may contribute more through the
``semver_checks.queries`` entry point group.
"""

from __future__ import annotations

from semver_checks.queries.catalog import (
    LintLevel,
    QueryCatalog,
    RequiredUpdate,
    SemverQuery,
    get_query_catalog,
)

__all__ = [
    "LintLevel",
    "QueryCatalog",
    "RequiredUpdate",
    "SemverQuery",
    "get_query_catalog",
]
