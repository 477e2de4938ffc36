# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Option helpers: verbosity resolution, enum parameters, and params conversion."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import pytest

from semver_checks.cli.cli_types import EnumChoiceParam, check_release_args_from_params
from semver_checks.cli.errors import SemverChecksUsageError
from semver_checks.cli.options import resolve_log_level
from semver_checks.config.logging import TRACE_LEVEL
from semver_checks.core.args import CheckReleaseArgs
from semver_checks.core.keys import ArgKey
from semver_checks.core.request import ReleaseType
from tests.conftest import parametrize


@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.INFO),
        (1, 0, logging.DEBUG),
        (2, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.WARNING),
        (0, 2, logging.ERROR),
        (0, 3, None),
        (0, 7, None),
    ],
)
def test_resolve_log_level(verbose: int, quiet: int, expected: int | None) -> None:
    """Each ``-v``/``-q`` count maps to one level."""
    assert resolve_log_level(verbose, quiet) == expected


def test_verbose_and_quiet_are_exclusive() -> None:
    """Mixing ``-v`` and ``-q`` is a usage error."""
    with pytest.raises(SemverChecksUsageError):
        resolve_log_level(1, 1)


def test_enum_param_is_case_insensitive() -> None:
    """Enum values convert regardless of case."""
    param = EnumChoiceParam(ReleaseType)

    assert param.convert("Minor", None, None) is ReleaseType.MINOR
    assert param.convert(ReleaseType.PATCH, None, None) is ReleaseType.PATCH


def test_enum_param_rejects_unknown_values() -> None:
    """Unknown values raise `click.BadParameter` listing the choices."""
    with pytest.raises(click.BadParameter, match="major, minor, patch"):
        EnumChoiceParam(ReleaseType).convert("huge", None, None)


def test_params_conversion_defaults() -> None:
    """An empty params mapping yields the default arguments."""
    assert check_release_args_from_params({}) == CheckReleaseArgs()


def test_params_conversion_tuples_and_paths() -> None:
    """Multi-valued options become tuples and path options become `Path`."""
    args = check_release_args_from_params(
        {
            ArgKey.PACKAGE: ["a", "b"],
            ArgKey.MANIFEST_PATH: "crate/Cargo.toml",
            ArgKey.QUIET: 2,
        }
    )

    assert args.package == ("a", "b")
    assert args.manifest_path == Path("crate/Cargo.toml")
    assert args.quiet == 2
