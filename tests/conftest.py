# semver-checks:header:start
#
#   project      : semver-checks
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Pytest configuration for the semver-checks test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests never depend on a real comparison engine or a Rust toolchain. CLI tests inject
    a fake engine through Click's context object (see ``tests/cli/conftest.py``), and
    resolution tests construct `CheckReleaseArgs` directly.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib.metadata import EntryPoint, EntryPoints
from typing import TYPE_CHECKING, Any, Iterator, TypeVar, cast

import pytest
from hypothesis import settings

from semver_checks.config import logging
from semver_checks.constants import (
    ENV_ENGINE,
    ENV_LOG_LEVEL,
    ENV_TERM_COLOR,
    QUERY_ENTRYPOINT_GROUP,
)
from semver_checks.queries import catalog as catalog_mod

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_resolver: DecoratorType[Any] = as_typed_mark(pytest.mark.resolver)

# Larger example budget for `nox -s property_test`
settings.register_profile("thorough", max_examples=1000, deadline=None)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Removes the variables that change color, diagnostics and engine selection.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_TERM_COLOR, ENV_ENGINE, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fresh_catalog() -> Iterator[None]:
    """Clear the cached lint catalog before and after the test."""
    catalog_mod.get_query_catalog.cache_clear()
    yield
    catalog_mod.get_query_catalog.cache_clear()


@pytest.fixture
def query_plugins(monkeypatch: pytest.MonkeyPatch, fresh_catalog: None) -> None:
    """Install lint plugins: one missing module, one raising provider, one working.

    Only ``tests.fakes:plugin_queries`` contributes a lint (``zz_plugin_lint``).
    """
    installed = EntryPoints(
        EntryPoint(name=name, value=value, group=QUERY_ENTRYPOINT_GROUP)
        for name, value in (
            ("missing", "no_such_lint_module:LINTS"),
            ("raising", "tests.fakes:failing_queries"),
            ("working", "tests.fakes:plugin_queries"),
        )
    )

    def _entry_points(**_kwargs: Any) -> EntryPoints:
        return installed

    monkeypatch.setattr(catalog_mod, "entry_points", _entry_points)


@pytest.fixture
def cargo_project(tmp_path: Path) -> Path:
    """Create a minimal crate directory and return its root.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.

    Returns:
        Path: Directory containing ``Cargo.toml`` and ``src/lib.rs``.
    """
    root: Path = tmp_path / "crate"
    (root / "src").mkdir(parents=True)
    (root / "Cargo.toml").write_text(
        '[package]\nname = "example"\nversion = "0.1.0"\nedition = "2021"\n',
        encoding="utf-8",
    )
    (root / "src" / "lib.rs").write_text("pub fn example() {}\n", encoding="utf-8")
    return root


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL, color=False)
