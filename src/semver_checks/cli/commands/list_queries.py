# semver-checks:header:start
#
#   project      : semver-checks
#   file         : list_queries.py
#   file_relpath : src/semver_checks/cli/commands/list_queries.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""``--list``: print the lint catalog as an aligned table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from semver_checks.queries.catalog import get_query_catalog

if TYPE_CHECKING:
    from semver_checks.engine.config import GlobalConfig
    from semver_checks.queries.catalog import QueryCatalog

HEADER_ROW: tuple[str, str, str] = ("id", "type", "description")
SEPARATOR_ROW: tuple[str, str, str] = ("==", "====", "===========")


def build_rows(catalog: QueryCatalog) -> list[tuple[str, str, str]]:
    """Return the table rows: header, separator, then one row per lint."""
    rows: list[tuple[str, str, str]] = [HEADER_ROW, SEPARATOR_ROW]
    rows.extend(
        (query.id, query.required_update.value, query.description) for query in catalog
    )
    return rows


def format_rows(rows: Sequence[tuple[str, str, str]]) -> list[str]:
    """Left-align each column to its widest cell, separated by one space."""
    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    return [
        f"{first:<{widths[0]}} {second:<{widths[1]}} {third:<{widths[2]}}"
        for first, second, third in rows
    ]


def run_list_queries(config: GlobalConfig, catalog: QueryCatalog | None = None) -> None:
    """Print the catalog table to stdout and a usage note to stderr."""
    catalog = catalog if catalog is not None else get_query_catalog()
    for line in format_rows(build_rows(catalog)):
        config.console.print(line)
    config.shell_note("Use `--explain <id>` to see more details")
