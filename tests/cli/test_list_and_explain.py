# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_list_and_explain.py
#   file_relpath : tests/cli/test_list_and_explain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""CLI test: ``--list`` table layout and ``--explain`` output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from semver_checks.queries import catalog as catalog_mod
from semver_checks.queries.catalog import get_query_catalog
from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_semver_checks,
)
from tests.conftest import mark_cli
from tests.fakes import PLUGIN_QUERY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from click.testing import Result


def _table_lines(result: Result) -> list[str]:
    """Return the table rows (every output line starting with a known first cell)."""
    catalog = get_query_catalog()
    first_cells = {"id", "==", *catalog.ids()}
    return [line for line in result.output.splitlines() if line.split(" ", 1)[0] in first_cells]


@mark_cli
def test_list_prints_aligned_table() -> None:
    """It should print header, separator, and one aligned row per lint."""
    result: Result = run_semver_checks(["--list"])

    assert_SUCCESS(result)
    catalog = get_query_catalog()
    lines = _table_lines(result)
    assert len(lines) == len(catalog) + 2
    assert lines[0].split() == ["id", "type", "description"]
    assert lines[1].split() == ["==", "====", "==========="]

    id_width = max(len("id"), *(len(q.id) for q in catalog))
    type_width = max(len("type"), *(len(q.required_update.value) for q in catalog))
    for line, query in zip(lines[2:], catalog):
        prefix = f"{query.id:<{id_width}} {query.required_update.value:<{type_width}} "
        assert line.startswith(prefix)
        assert query.description in line


@mark_cli
def test_list_rows_follow_catalog_order() -> None:
    """Rows appear in lexicographic id order."""
    result: Result = run_semver_checks(["--list"])

    assert_SUCCESS(result)
    ids = [line.split(" ", 1)[0] for line in _table_lines(result)[2:]]
    assert ids == sorted(ids)


@mark_cli
def test_list_prints_explain_hint() -> None:
    """A note pointing at ``--explain`` follows the table."""
    result: Result = run_semver_checks(["--list"])

    assert_SUCCESS(result)
    assert "Use `--explain <id>` to see more details" in result.output


@mark_cli
@pytest.mark.usefixtures("query_plugins")
def test_list_survives_failing_plugins() -> None:
    """Broken lint plugins are skipped; the working plugin's lint is listed."""
    result: Result = run_semver_checks(["--list"])

    assert_SUCCESS(result)
    assert "Traceback" not in result.output
    assert any(line.startswith(PLUGIN_QUERY.id + " ") for line in result.output.splitlines())


@mark_cli
@pytest.mark.usefixtures("fresh_catalog")
def test_list_reports_catalog_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """A catalog that cannot be loaded ends ``--list`` with ``error:`` and exit 1."""

    def _unreadable() -> list[Mapping[str, Any]]:
        raise RuntimeError("Cannot read bundled lint catalog")

    monkeypatch.setattr(catalog_mod, "_load_bundled_tables", _unreadable)

    result: Result = run_semver_checks(["--list"])

    assert_FAILURE(result)
    assert "error: Cannot read bundled lint catalog" in result.output


@mark_cli
def test_explain_known_lint_prints_reference_and_link() -> None:
    """Explaining a lint with a reference prints it, then the link."""
    query = get_query_catalog().lookup("function_missing")
    assert query.reference is not None
    assert query.reference_link is not None

    result: Result = run_semver_checks(["--explain", "function_missing"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert query.reference.splitlines()[0] in result.output
    assert lines[-1] == f"See also {query.reference_link}"
    assert lines[-2] == ""


@mark_cli
def test_explain_falls_back_to_description_without_link() -> None:
    """A lint without reference or link prints only its description."""
    query = get_query_catalog().lookup("function_unsafe_added")
    assert query.reference is None
    assert query.reference_link is None

    result: Result = run_semver_checks(["--explain", "function_unsafe_added"])

    assert_SUCCESS(result)
    assert result.output.strip() == query.description
    assert "See also" not in result.output


@mark_cli
def test_explain_unknown_id_fails_with_listing() -> None:
    """An unknown id exits 1 and names the id and the known ids."""
    result: Result = run_semver_checks(["--explain", "no_such_lint"])

    assert_FAILURE(result)
    assert "error: Unknown id `no_such_lint`, available id's:" in result.output
    assert "  enum_missing" in result.output


@mark_cli
def test_explain_rejects_verbosity_flags() -> None:
    """Mode flags are exclusive, so ``-qqq`` is rejected alongside ``--explain``."""
    result: Result = run_semver_checks(["--explain", "no_such_lint", "-qqq"])

    assert_USAGE_ERROR(result)
