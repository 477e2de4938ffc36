# semver-checks:header:start
#
#   project      : semver-checks
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""semver-checks project automation via Nox (using uv-backed virtualenvs).

This file defines the developer and CI automation sessions used in this repository.

Sessions:
  - `lint`: Ruff + pydoclint on the sources and tests.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting (ruff, taplo).
  - `format`: Apply formatting (ruff, taplo).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Hypothesis property tests with a larger example budget (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).
  - `release_check`: Deterministic pre-release gate (single Python, offline-friendly).

Notes:
  - The default venv backend is `uv` for faster environment sync.
  - Development tools are declared in the `dev` extra of `pyproject.toml`.

Common invocations:
  - `nox -s lint`
  - `nox -s format_check`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import tomllib
import warnings
from typing import Any, cast

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

# --- Dynamic Python Version Resolution ---


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` using stdlib TOML parsing.

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table).
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}

    data: str = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(data)
    except tomllib.TOMLDecodeError as exc:
        warnings.warn(f"Cannot parse pyproject.toml: {exc}", RuntimeWarning, stacklevel=2)
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.11", "3.12", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    if not isinstance(project_any, dict):
        warnings.warn(
            "Could not find 'project' table in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    project: dict[str, Any] = cast("dict[str, Any]", project_any)
    classifiers: list[str] = cast("list[str]", project.get("classifiers") or [])

    prefix = "Programming Language :: Python :: "
    versions: list[str] = []
    for c in classifiers:
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            continue
        versions.append(f"{int(parts[0])}.{int(parts[1])}")

    def _key(s: str) -> tuple[int, int]:
        major_s, minor_s = s.split(".")
        return int(major_s), int(minor_s)

    out: list[str] = sorted(set(versions), key=_key)
    if out:
        return out

    warnings.warn(
        "No Python versions found in classifiers. "
        f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
        RuntimeWarning,
        stacklevel=2,
    )
    return [CURRENT_PYTHON_VERSION]


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"

DEV_INSTALL: tuple[str, ...] = ("-e", ".[dev]")
FAST_TEST_MARKERS: str = "not hypothesis_slow"


def _run_pyright(session: nox.Session) -> None:
    # Within a running session `session.python` is a concrete interpreter version string.
    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")
    session.run("pyright", "--pythonversion", py_ver)


def _build_dist(session: nox.Session) -> None:
    # Clean dist/ first to avoid stale artifacts influencing checks.
    session.run("python", "-c", "import shutil; shutil.rmtree('dist', ignore_errors=True)")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install(*DEV_INSTALL)
    _build_dist(session)


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install(*DEV_INSTALL)

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", FAST_TEST_MARKERS, *session.posargs)
    _run_pyright(session)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "check", ".")
    session.run("pydoclint", "-q", "src/semver_checks", "tests")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix (auto-fix lint issues)."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting for code and TOML."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "format", "--check", ".")
    session.run("taplo", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code and TOML (auto-fix)."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "format", ".")
    session.run("taplo", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the hypothesis property tests with a larger example budget (developer only)."""
    session.install(*DEV_INSTALL)

    session.run(
        "pytest",
        "-vv",
        "tests/core/test_features.py",
        "--hypothesis-profile",
        "thorough",
        *session.posargs,
    )


@nox.session(python=CURRENT_PYTHON_VERSION)
def release_check(session: nox.Session) -> None:
    """Release gate: quality + packaging checks (single Python, offline-friendly).

    It runs:
      - Formatting checks (ruff, taplo)
      - Lint checks (ruff, pydoclint)
      - Tests + pyright for the session Python
      - Packaging build + metadata checks (build, twine)
    """
    session.install(*DEV_INSTALL)

    session.run("ruff", "format", "--check", ".")
    session.run("ruff", "check", ".")
    session.run("pydoclint", "-q", "src/semver_checks", "tests")
    session.run("taplo", "format", "--check", ".")

    session.run("pytest", "-q", "tests", "-m", FAST_TEST_MARKERS, *session.posargs)
    _run_pyright(session)

    _build_dist(session)
