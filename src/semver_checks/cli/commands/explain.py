# semver-checks:header:start
#
#   project      : semver-checks
#   file         : explain.py
#   file_relpath : src/semver_checks/cli/commands/explain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""``--explain <ID>``: print the detailed explanation of one lint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_checks.queries.catalog import get_query_catalog

if TYPE_CHECKING:
    from semver_checks.cli_shared.console_api import ConsoleLike
    from semver_checks.queries.catalog import QueryCatalog


def run_explain(
    console: ConsoleLike,
    query_id: str,
    catalog: QueryCatalog | None = None,
) -> None:
    """Print the explanation of `query_id`.

    The reference text is preferred over the short description. When the lint has a
    reference link, it follows after a blank line as ``See also <link>``.

    Raises:
        UnknownQueryError: If `query_id` is not in the catalog.
    """
    catalog = catalog if catalog is not None else get_query_catalog()
    query = catalog.lookup(query_id)
    console.print((query.reference or query.description).rstrip("\n"))
    if query.reference_link:
        console.print()
        console.print(f"See also {query.reference_link}")
