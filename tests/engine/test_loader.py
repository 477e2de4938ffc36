# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_loader.py
#   file_relpath : tests/engine/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Comparison engine discovery through entry points."""

from __future__ import annotations

from importlib.metadata import EntryPoint, EntryPoints
from typing import Any

import pytest

from semver_checks.constants import ENGINE_ENTRYPOINT_GROUP, ENV_ENGINE
from semver_checks.core.errors import EngineNotFoundError
from semver_checks.engine import loader
from semver_checks.engine.api import CheckEngine
from tests.fakes import ENGINE_INSTANCE, FakeEngine


def _entry_point(name: str, target: str) -> EntryPoint:
    return EntryPoint(
        name=name, value=f"tests.fakes:{target}", group=ENGINE_ENTRYPOINT_GROUP
    )


def _install(monkeypatch: pytest.MonkeyPatch, *eps: EntryPoint) -> None:
    installed = EntryPoints(eps)

    def _entry_points(**_kwargs: Any) -> EntryPoints:
        return installed

    monkeypatch.setattr(loader, "entry_points", _entry_points)


def test_fake_engine_satisfies_protocol() -> None:
    """The test double is recognised as a `CheckEngine`."""
    assert isinstance(FakeEngine(), CheckEngine)


def test_no_engine_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without entry points, loading fails with a clear error."""
    _install(monkeypatch)

    with pytest.raises(EngineNotFoundError, match="no comparison engine is installed"):
        loader.load_engine()


def test_first_engine_by_name_is_used(monkeypatch: pytest.MonkeyPatch) -> None:
    """With several engines and no selection, the first by name wins."""
    _install(
        monkeypatch,
        _entry_point("zeta", "NOT_AN_ENGINE"),
        _entry_point("alpha", "FakeEngine"),
    )

    engine = loader.load_engine()

    assert isinstance(engine, FakeEngine)


def test_engine_selected_by_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """``SEMVER_CHECKS_ENGINE`` selects an entry point by name."""
    _install(
        monkeypatch,
        _entry_point("alpha", "NOT_AN_ENGINE"),
        _entry_point("beta", "ENGINE_INSTANCE"),
    )
    monkeypatch.setenv(ENV_ENGINE, "beta")

    assert loader.load_engine() is ENGINE_INSTANCE


def test_unknown_engine_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Selecting a missing engine lists the available ones."""
    _install(monkeypatch, _entry_point("alpha", "FakeEngine"))

    with pytest.raises(EngineNotFoundError, match="available: alpha"):
        loader.load_engine("missing")


def test_entry_point_must_provide_an_engine(monkeypatch: pytest.MonkeyPatch) -> None:
    """An entry point that yields something else is rejected."""
    _install(monkeypatch, _entry_point("alpha", "NOT_AN_ENGINE"))

    with pytest.raises(EngineNotFoundError, match="did not provide a comparison engine"):
        loader.load_engine()


def test_broken_entry_point(monkeypatch: pytest.MonkeyPatch) -> None:
    """Import failures are wrapped with the entry point name."""
    _install(monkeypatch, _entry_point("alpha", "does_not_exist"))

    with pytest.raises(EngineNotFoundError, match="failed to load comparison engine 'alpha'"):
        loader.load_engine()
