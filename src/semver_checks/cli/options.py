# semver-checks:header:start
#
#   project      : semver-checks
#   file         : options.py
#   file_relpath : src/semver_checks/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Common CLI option decorators and their resolution logic.

This module centralizes the reusable option groups (operating modes, color,
check-release selection, features, verbosity) so the group and the
`check-release` subcommand can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Final, ParamSpec, TypeVar

import click

from semver_checks.cli.cli_types import EnumChoiceParam
from semver_checks.cli.errors import SemverChecksUsageError
from semver_checks.cli.keys import CliOpt
from semver_checks.cli_shared.color import ColorChoice
from semver_checks.config.logging import TRACE_LEVEL
from semver_checks.core.keys import ArgKey
from semver_checks.core.request import ReleaseType

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS: Final[dict[str, object]] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def resolve_log_level(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the user-facing log level from the verbose and quiet counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int | None: The logging level, or ``None`` when all output is silenced.

    Raises:
        SemverChecksUsageError: If both verbose and quiet flags are used.

    Behavior:
        Default level is INFO.
        ``-q`` sets WARNING, ``-qq`` sets ERROR, ``-qqq`` silences everything.
        ``-v`` sets DEBUG, ``-vv`` (or more) sets TRACE.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SemverChecksUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )

    if verbose_count >= 2:  # -vv
        return TRACE_LEVEL
    if verbose_count == 1:  # -v
        return logging.DEBUG

    if quiet_count >= 3:  # -qqq
        return None
    if quiet_count == 2:  # -qq
        return logging.ERROR
    if quiet_count == 1:  # -q
        return logging.WARNING

    return logging.INFO


def mode_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the mutually exclusive operating-mode flags.

    Adds ``--bugreport``, ``--list`` and ``--explain <ID>``.
    """
    f = click.option(
        CliOpt.EXPLAIN,
        ArgKey.EXPLAIN,
        metavar="ID",
        default=None,
        help="Explain the given lint.",
    )(f)
    f = click.option(
        CliOpt.LIST,
        ArgKey.LIST,
        is_flag=True,
        help="List all available lints.",
    )(f)
    f = click.option(
        CliOpt.BUGREPORT,
        ArgKey.BUGREPORT,
        is_flag=True,
        help="Print system information for bug reports.",
    )(f)
    return f


def color_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color <WHEN>`` option."""
    return click.option(
        CliOpt.COLOR_CHOICE,
        ArgKey.COLOR_CHOICE,
        type=EnumChoiceParam(ColorChoice),
        metavar="WHEN",
        default=None,
        help=(
            "Choose whether to colorize output: always, never, or auto. "
            "Overrides the CARGO_TERM_COLOR environment variable."
        ),
    )(f)


def verbosity_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``--verbose`` and ``--quiet`` counting options."""
    f = click.option(
        "-q",
        CliOpt.QUIET,
        ArgKey.QUIET,
        count=True,
        help="Decrease logging verbosity (-q warnings, -qq errors, -qqq silent).",
    )(f)
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        ArgKey.VERBOSE,
        count=True,
        help="Increase logging verbosity (-v debug, -vv trace).",
    )(f)
    return f


def current_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options selecting the current version and its packages."""
    f = click.option(
        CliOpt.CURRENT_RUSTDOC,
        "--current",
        "-c",
        ArgKey.CURRENT_RUSTDOC,
        type=click.Path(path_type=Path),
        metavar="JSON_PATH",
        default=None,
        help=(
            "Current rustdoc JSON output to test for semver violations. "
            f"Requires {CliOpt.BASELINE_RUSTDOC}."
        ),
    )(f)
    f = click.option(
        CliOpt.EXCLUDE,
        ArgKey.EXCLUDE,
        multiple=True,
        metavar="SPEC",
        help=f"Exclude packages from the check (only with {CliOpt.WORKSPACE}).",
    )(f)
    f = click.option(
        CliOpt.ALL,
        ArgKey.ALL,
        is_flag=True,
        hidden=True,
        help=f"Deprecated alias for {CliOpt.WORKSPACE}.",
    )(f)
    f = click.option(
        CliOpt.WORKSPACE,
        ArgKey.WORKSPACE,
        is_flag=True,
        help="Process all packages in the workspace.",
    )(f)
    f = click.option(
        "-p",
        CliOpt.PACKAGE,
        ArgKey.PACKAGE,
        multiple=True,
        metavar="SPEC",
        help="Package(s) to process.",
    )(f)
    f = click.option(
        CliOpt.MANIFEST_PATH,
        ArgKey.MANIFEST_PATH,
        type=click.Path(path_type=Path),
        metavar="PATH",
        default=None,
        help="Path to Cargo.toml (or the directory containing it).",
    )(f)
    return f


def baseline_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the mutually exclusive baseline source options."""
    f = click.option(
        CliOpt.BASELINE_RUSTDOC,
        "--baseline",
        "-b",
        ArgKey.BASELINE_RUSTDOC,
        type=click.Path(path_type=Path),
        metavar="JSON_PATH",
        default=None,
        help="Rustdoc JSON of the baseline version to compare against.",
    )(f)
    f = click.option(
        CliOpt.BASELINE_ROOT,
        ArgKey.BASELINE_ROOT,
        type=click.Path(path_type=Path),
        metavar="MANIFEST_ROOT",
        default=None,
        help="Directory containing the baseline crate's Cargo.toml.",
    )(f)
    f = click.option(
        CliOpt.BASELINE_REV,
        ArgKey.BASELINE_REV,
        metavar="REV",
        default=None,
        help="Git revision of the baseline version.",
    )(f)
    f = click.option(
        CliOpt.BASELINE_VERSION,
        ArgKey.BASELINE_VERSION,
        metavar="X.Y.Z",
        default=None,
        help="Registry version of the baseline crate.",
    )(f)
    return f


def feature_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the feature-selection options."""
    f = click.option(
        CliOpt.CURRENT_FEATURES,
        ArgKey.CURRENT_FEATURES,
        multiple=True,
        metavar="FEATURES",
        help="Extra feature(s) to enable on the current version only.",
    )(f)
    f = click.option(
        CliOpt.BASELINE_FEATURES,
        ArgKey.BASELINE_FEATURES,
        multiple=True,
        metavar="FEATURES",
        help="Extra feature(s) to enable on the baseline version only.",
    )(f)
    f = click.option(
        CliOpt.FEATURES,
        ArgKey.FEATURES,
        multiple=True,
        metavar="FEATURES",
        help="Extra feature(s) to enable on both versions.",
    )(f)
    f = click.option(
        CliOpt.ALL_FEATURES,
        ArgKey.ALL_FEATURES,
        is_flag=True,
        help="Enable all features of both versions.",
    )(f)
    f = click.option(
        CliOpt.ONLY_EXPLICIT_FEATURES,
        ArgKey.ONLY_EXPLICIT_FEATURES,
        is_flag=True,
        help="Enable only the features given with the extra-feature options.",
    )(f)
    f = click.option(
        CliOpt.DEFAULT_FEATURES,
        ArgKey.DEFAULT_FEATURES,
        is_flag=True,
        help="Enable the default feature set plus any extra features.",
    )(f)
    return f


def check_release_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the full `check-release` option group.

    Used both by the `semver-checks` group (options given without a subcommand)
    and by the `check-release` subcommand.
    """
    f = verbosity_options(f)
    f = click.option(
        CliOpt.BUILD_TARGET,
        ArgKey.BUILD_TARGET,
        metavar="TRIPLE",
        default=None,
        help="Build for the given target triple.",
    )(f)
    f = feature_options(f)
    f = click.option(
        CliOpt.RELEASE_TYPE,
        ArgKey.RELEASE_TYPE,
        type=EnumChoiceParam(ReleaseType),
        default=None,
        help="Assume the given release type instead of inferring it from the versions.",
    )(f)
    f = baseline_options(f)
    f = current_options(f)
    return f


#: Parameter names contributed by `check_release_options`.
CHECK_RELEASE_PARAM_KEYS: Final[tuple[str, ...]] = (
    ArgKey.MANIFEST_PATH,
    ArgKey.WORKSPACE,
    ArgKey.ALL,
    ArgKey.PACKAGE,
    ArgKey.EXCLUDE,
    ArgKey.CURRENT_RUSTDOC,
    ArgKey.BASELINE_VERSION,
    ArgKey.BASELINE_REV,
    ArgKey.BASELINE_ROOT,
    ArgKey.BASELINE_RUSTDOC,
    ArgKey.RELEASE_TYPE,
    ArgKey.DEFAULT_FEATURES,
    ArgKey.ONLY_EXPLICIT_FEATURES,
    ArgKey.ALL_FEATURES,
    ArgKey.FEATURES,
    ArgKey.BASELINE_FEATURES,
    ArgKey.CURRENT_FEATURES,
    ArgKey.BUILD_TARGET,
    ArgKey.VERBOSE,
    ArgKey.QUIET,
)

#: Parameter names of the operating-mode flags.
MODE_PARAM_KEYS: Final[tuple[str, ...]] = (
    ArgKey.BUGREPORT,
    ArgKey.LIST,
    ArgKey.EXPLAIN,
)
