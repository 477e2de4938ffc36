# semver-checks:header:start
#
#   project      : semver-checks
#   file         : catalog.py
#   file_relpath : src/semver_checks/queries/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Lint catalog model and loader.

Builds the runtime catalog of [`SemverQuery`][semver_checks.queries.catalog.SemverQuery]
objects from the bundled TOML resource and optionally from plugin entry points.
The catalog is constructed lazily on first access and cached thereafter.

Notes:
    * The bundled resource is read with ``importlib.resources`` and parsed with tomlkit.
    * Catalog order is lexicographic by query id; ``--list`` and the unknown-id
      error of ``--explain`` both enumerate in that order.
    * Entry point providers return an iterable of `SemverQuery` objects. Ids
      already present in the catalog are kept from the first source.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib.metadata import entry_points
from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from semver_checks.config.logging import get_logger
from semver_checks.constants import (
    QUERY_CATALOG_NAME,
    QUERY_CATALOG_PACKAGE,
    QUERY_ENTRYPOINT_GROUP,
)
from semver_checks.core.errors import UnknownQueryError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from semver_checks.config.logging import SemverChecksLogger

logger: SemverChecksLogger = get_logger(__name__)


class RequiredUpdate(str, Enum):
    """The smallest version bump that makes a lint's finding acceptable."""

    MAJOR = "major"
    MINOR = "minor"


class LintLevel(str, Enum):
    """How a finding is reported by default."""

    DENY = "deny"
    WARN = "warn"
    ALLOW = "allow"


@dataclass(frozen=True, slots=True)
class SemverQuery:
    """One semver lint.

    Attributes:
        id (str): Stable lint identifier (used by ``--explain``).
        human_readable_name (str): Short title.
        description (str): One-paragraph description.
        required_update (RequiredUpdate): Version bump required by a finding.
        lint_level (LintLevel): Default reporting level.
        reference (str | None): Detailed explanation, preferred by ``--explain``.
        reference_link (str | None): Link to further reading.
    """

    id: str
    human_readable_name: str
    description: str
    required_update: RequiredUpdate
    lint_level: LintLevel = LintLevel.DENY
    reference: str | None = None
    reference_link: str | None = None

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any]) -> SemverQuery:
        """Create a query from one ``[[query]]`` table.

        Args:
            tbl (Mapping[str, Any]): Table with keys matching the attributes.

        Returns:
            SemverQuery: The parsed query.

        Raises:
            ValueError: If a required key is missing or an enum value is unknown.
        """
        try:
            return cls(
                id=str(tbl["id"]),
                human_readable_name=str(tbl["human_readable_name"]),
                description=str(tbl["description"]).strip(),
                required_update=RequiredUpdate(tbl["required_update"]),
                lint_level=LintLevel(tbl.get("lint_level", LintLevel.DENY.value)),
                reference=_optional_text(tbl.get("reference")),
                reference_link=_optional_text(tbl.get("reference_link")),
            )
        except KeyError as exc:
            raise ValueError(f"query table is missing key {exc}: {dict(tbl)!r}") from exc


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _load_bundled_tables() -> list[Mapping[str, Any]]:
    """Read the bundled lint definitions.

    Raises:
        RuntimeError: If the resource cannot be read or is not valid TOML.
    """
    resource = files(QUERY_CATALOG_PACKAGE).joinpath(QUERY_CATALOG_NAME)
    logger.debug("Loading lint catalog from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled lint catalog {QUERY_CATALOG_PACKAGE!r}/"
            f"{QUERY_CATALOG_NAME!r}: {exc}"
        ) from exc

    try:
        data: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise RuntimeError(
            f"Bundled lint catalog {QUERY_CATALOG_PACKAGE!r}/"
            f"{QUERY_CATALOG_NAME!r} is invalid TOML: {exc}"
        ) from exc

    tables: Any = data.get("query", [])
    if not isinstance(tables, list):
        raise RuntimeError("Bundled lint catalog: 'query' must be an array of tables")
    return cast("list[Mapping[str, Any]]", tables)


def _iter_bundled_queries() -> Iterable[SemverQuery]:
    for tbl in _load_bundled_tables():
        yield SemverQuery.from_toml_table(tbl)


def _iter_plugin_queries() -> Iterable[SemverQuery]:
    """Yield queries provided by external plugins (entry points).

    A provider that fails to load or to run is logged and skipped.
    """
    for ep in entry_points().select(group=QUERY_ENTRYPOINT_GROUP):
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
            if not isinstance(provided, IterABC):
                logger.warning(
                    "Entry point %s did not return an iterable of SemverQuery objects: %r",
                    ep.name,
                    provided,
                )
                continue
            for obj in cast("IterABC[object]", provided):
                if isinstance(obj, SemverQuery):
                    yield obj
                else:
                    logger.warning("Entry point %s provided non-SemverQuery: %r", ep.name, obj)
        except Exception:
            logger.exception("Failed loading semver queries from entry point %s", ep.name)


class QueryCatalog:
    """Read-only view of the lint catalog, ordered by query id."""

    def __init__(self, queries: Iterable[SemverQuery]) -> None:
        by_id: dict[str, SemverQuery] = {}
        for query in queries:
            if query.id in by_id:
                logger.warning("Duplicate query id detected: %s (keeping first)", query.id)
                continue
            by_id[query.id] = query
        self._queries: Mapping[str, SemverQuery] = MappingProxyType(dict(sorted(by_id.items())))

    def __len__(self) -> int:
        return len(self._queries)

    def __iter__(self) -> Iterator[SemverQuery]:
        return iter(self._queries.values())

    def __contains__(self, query_id: object) -> bool:
        return query_id in self._queries

    def ids(self) -> list[str]:
        """Return every query id, in catalog order."""
        return list(self._queries)

    def as_mapping(self) -> Mapping[str, SemverQuery]:
        """Return a read-only mapping of query id to query."""
        return self._queries

    def get(self, query_id: str) -> SemverQuery | None:
        """Return the query with this id, or None."""
        return self._queries.get(query_id)

    def lookup(self, query_id: str) -> SemverQuery:
        """Return the query with this id.

        Raises:
            UnknownQueryError: If the id is not in the catalog.
        """
        query = self._queries.get(query_id)
        if query is None:
            raise UnknownQueryError(query_id, self.ids())
        return query


@lru_cache(maxsize=1)
def get_query_catalog() -> QueryCatalog:
    """Return (and cache) the lint catalog: bundled lints plus plugin-provided ones."""
    ordered: list[SemverQuery] = list(_iter_bundled_queries())
    ordered.extend(_iter_plugin_queries())
    catalog = QueryCatalog(ordered)
    logger.debug("Loaded %d semver queries", len(catalog))
    return catalog
