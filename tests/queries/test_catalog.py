# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_catalog.py
#   file_relpath : tests/queries/test_catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""The bundled lint catalog and plugin-provided lints."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from semver_checks.core.errors import UnknownQueryError
from semver_checks.queries import catalog as catalog_mod
from semver_checks.queries.catalog import (
    LintLevel,
    QueryCatalog,
    RequiredUpdate,
    SemverQuery,
    get_query_catalog,
)
from tests.fakes import PLUGIN_QUERY


def _query(query_id: str, **overrides: Any) -> SemverQuery:
    fields: dict[str, Any] = {
        "id": query_id,
        "human_readable_name": query_id.replace("_", " "),
        "description": f"{query_id} description",
        "required_update": RequiredUpdate.MAJOR,
    }
    fields.update(overrides)
    return SemverQuery(**fields)


def test_bundled_catalog_is_sorted_and_unique() -> None:
    """Bundled lints are ordered by id without duplicates."""
    ids = get_query_catalog().ids()

    assert ids
    assert ids == sorted(ids)
    assert len(ids) == len(set(ids))


def test_bundled_catalog_fields() -> None:
    """Every bundled lint has a name, a description and a valid update kind."""
    for query in get_query_catalog():
        assert query.human_readable_name
        assert query.description
        assert isinstance(query.required_update, RequiredUpdate)
        assert isinstance(query.lint_level, LintLevel)


def test_warn_level_lint() -> None:
    """Deprecation lints only require a minor bump and warn by default."""
    query = get_query_catalog().lookup("function_marked_deprecated")

    assert query.required_update is RequiredUpdate.MINOR
    assert query.lint_level is LintLevel.WARN


def test_lookup_unknown_id_lists_known_ids() -> None:
    """Unknown ids raise with the id and every known id in the message."""
    catalog = QueryCatalog([_query("b_lint"), _query("a_lint")])

    with pytest.raises(UnknownQueryError) as excinfo:
        catalog.lookup("missing")

    assert str(excinfo.value) == "Unknown id `missing`, available id's:\n  a_lint\n  b_lint"
    assert excinfo.value.known_ids == ("a_lint", "b_lint")


def test_duplicate_ids_keep_first() -> None:
    """The first definition of an id wins."""
    first = _query("dup", description="first")
    catalog = QueryCatalog([first, _query("dup", description="second")])

    assert len(catalog) == 1
    assert catalog.get("dup") is first
    assert "dup" in catalog


def test_from_toml_table_requires_keys() -> None:
    """A table without the required keys is rejected."""
    with pytest.raises(ValueError, match="missing key"):
        SemverQuery.from_toml_table({"id": "x"})


def test_from_toml_table_defaults() -> None:
    """Optional keys default to deny level and no reference."""
    query = SemverQuery.from_toml_table(
        {
            "id": "x",
            "human_readable_name": "x",
            "description": "  text\n",
            "required_update": "minor",
            "reference": "   ",
        }
    )

    assert query.description == "text"
    assert query.lint_level is LintLevel.DENY
    assert query.reference is None
    assert query.reference_link is None


@pytest.mark.usefixtures("fresh_catalog")
def test_plugin_queries_are_merged(monkeypatch: pytest.MonkeyPatch) -> None:
    """Lints from entry points are added; bundled ids keep their definition."""
    bundled_id = "enum_missing"
    plugin_queries = [_query("zz_plugin_lint"), _query(bundled_id, description="override")]
    monkeypatch.setattr(catalog_mod, "_iter_plugin_queries", lambda: iter(plugin_queries))

    catalog = get_query_catalog()

    assert "zz_plugin_lint" in catalog
    assert catalog.ids()[-1] == "zz_plugin_lint"
    assert catalog.lookup(bundled_id).description != "override"


@pytest.mark.usefixtures("query_plugins")
def test_failing_plugins_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """A plugin that cannot be imported or raises is logged; the others still load."""
    with caplog.at_level(logging.ERROR):
        catalog = get_query_catalog()

    assert catalog.lookup(PLUGIN_QUERY.id) == PLUGIN_QUERY
    assert "enum_missing" in catalog
    failed = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert any(message.endswith("missing") for message in failed)
    assert any(message.endswith("raising") for message in failed)
