# semver-checks:header:start
#
#   project      : semver-checks
#   file         : validators.py
#   file_relpath : src/semver_checks/cli/validators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Command-line option conflict rules.

Click has no declarative "conflicts with" / "requires" relations between options, so
the rules are enforced here, after parsing and before any resolution work starts.
All checks consider only options given on the command line
(`ParameterSource.COMMANDLINE`), so defaults never trigger a conflict.

Every failed check raises
[`SemverChecksUsageError`][semver_checks.cli.errors.SemverChecksUsageError]
(exit code 64). Messages use Click's computed `ctx.command_path`
(for example, ``cargo semver-checks check-release``).
"""

from __future__ import annotations

from typing import Final, Iterable

import click
from click.core import ParameterSource

from semver_checks.cli.errors import SemverChecksUsageError
from semver_checks.cli.keys import CliOpt
from semver_checks.cli.options import CHECK_RELEASE_PARAM_KEYS, MODE_PARAM_KEYS
from semver_checks.config.logging import get_logger
from semver_checks.core.keys import ArgKey

logger = get_logger(__name__)

#: User-facing spelling of each parameter, for error messages.
OPTION_SPELLINGS: Final[dict[str, str]] = {
    ArgKey.BUGREPORT: CliOpt.BUGREPORT,
    ArgKey.LIST: CliOpt.LIST,
    ArgKey.EXPLAIN: CliOpt.EXPLAIN,
    ArgKey.MANIFEST_PATH: CliOpt.MANIFEST_PATH,
    ArgKey.WORKSPACE: CliOpt.WORKSPACE,
    ArgKey.ALL: CliOpt.ALL,
    ArgKey.PACKAGE: CliOpt.PACKAGE,
    ArgKey.EXCLUDE: CliOpt.EXCLUDE,
    ArgKey.CURRENT_RUSTDOC: CliOpt.CURRENT_RUSTDOC,
    ArgKey.BASELINE_VERSION: CliOpt.BASELINE_VERSION,
    ArgKey.BASELINE_REV: CliOpt.BASELINE_REV,
    ArgKey.BASELINE_ROOT: CliOpt.BASELINE_ROOT,
    ArgKey.BASELINE_RUSTDOC: CliOpt.BASELINE_RUSTDOC,
    ArgKey.RELEASE_TYPE: CliOpt.RELEASE_TYPE,
    ArgKey.DEFAULT_FEATURES: CliOpt.DEFAULT_FEATURES,
    ArgKey.ONLY_EXPLICIT_FEATURES: CliOpt.ONLY_EXPLICIT_FEATURES,
    ArgKey.ALL_FEATURES: CliOpt.ALL_FEATURES,
    ArgKey.FEATURES: CliOpt.FEATURES,
    ArgKey.BASELINE_FEATURES: CliOpt.BASELINE_FEATURES,
    ArgKey.CURRENT_FEATURES: CliOpt.CURRENT_FEATURES,
    ArgKey.BUILD_TARGET: CliOpt.BUILD_TARGET,
    ArgKey.VERBOSE: CliOpt.VERBOSE,
    ArgKey.QUIET: CliOpt.QUIET,
    ArgKey.COLOR_CHOICE: CliOpt.COLOR_CHOICE,
}

BASELINE_KEYS: Final[tuple[str, ...]] = (
    ArgKey.BASELINE_VERSION,
    ArgKey.BASELINE_REV,
    ArgKey.BASELINE_ROOT,
    ArgKey.BASELINE_RUSTDOC,
)
FEATURE_MODE_KEYS: Final[tuple[str, ...]] = (
    ArgKey.DEFAULT_FEATURES,
    ArgKey.ONLY_EXPLICIT_FEATURES,
    ArgKey.ALL_FEATURES,
)
FEATURE_LIST_KEYS: Final[tuple[str, ...]] = (
    ArgKey.FEATURES,
    ArgKey.BASELINE_FEATURES,
    ArgKey.CURRENT_FEATURES,
)
WORKSPACE_KEYS: Final[tuple[str, ...]] = (
    ArgKey.WORKSPACE,
    ArgKey.ALL,
    ArgKey.PACKAGE,
    ArgKey.EXCLUDE,
)


def spelling(key: str) -> str:
    """Return the user-facing option spelling for a parameter name."""
    return OPTION_SPELLINGS.get(key, f"--{key.replace('_', '-')}")


def given_on_command_line(ctx: click.Context, key: str) -> bool:
    """Return True if the parameter `key` was given explicitly on the command line."""
    return ctx.get_parameter_source(key) is ParameterSource.COMMANDLINE


def given_keys(ctx: click.Context, keys: Iterable[str]) -> list[str]:
    """Return the subset of `keys` given explicitly on the command line, in order."""
    return [key for key in keys if given_on_command_line(ctx, key)]


def _conflict(ctx: click.Context, first: str, second: str) -> SemverChecksUsageError:
    return SemverChecksUsageError(
        f"{ctx.command_path}: {spelling(first)} cannot be used with {spelling(second)}."
    )


def _reject_pairs(ctx: click.Context, left: Iterable[str], right: Iterable[str]) -> None:
    right_given: list[str] = given_keys(ctx, right)
    if not right_given:
        return
    for key in given_keys(ctx, left):
        raise _conflict(ctx, key, right_given[0])


def _reject_more_than_one(ctx: click.Context, keys: Iterable[str]) -> None:
    given: list[str] = given_keys(ctx, keys)
    if len(given) > 1:
        raise _conflict(ctx, given[0], given[1])


def validate_exclusive_mode_flags(ctx: click.Context) -> None:
    """Reject an operating-mode flag combined with anything else.

    ``--bugreport``, ``--list`` and ``--explain`` each exclude every other argument of
    the invocation, including each other and any subcommand.

    Args:
        ctx (click.Context): Context of the `semver-checks` group.

    Raises:
        SemverChecksUsageError: If a mode flag is combined with another argument.
    """
    modes: list[str] = given_keys(ctx, MODE_PARAM_KEYS)
    if not modes:
        return
    _reject_more_than_one(ctx, modes)

    mode: str = modes[0]
    others: list[str] = [
        param.name
        for param in ctx.command.params
        if param.name is not None
        and param.name != mode
        and given_on_command_line(ctx, param.name)
    ]
    if others:
        raise _conflict(ctx, mode, others[0])
    if ctx.invoked_subcommand is not None:
        raise SemverChecksUsageError(
            f"{ctx.command_path}: {spelling(mode)} cannot be used with "
            f"the '{ctx.invoked_subcommand}' subcommand."
        )


def validate_no_options_with_subcommand(ctx: click.Context) -> None:
    """Reject top-level check-release options when a subcommand is also given.

    Args:
        ctx (click.Context): Context of the `semver-checks` group.

    Raises:
        SemverChecksUsageError: If a check-release option precedes the subcommand.
    """
    if ctx.invoked_subcommand is None:
        return
    given: list[str] = given_keys(ctx, CHECK_RELEASE_PARAM_KEYS)
    if given:
        raise SemverChecksUsageError(
            f"{ctx.command_path}: {spelling(given[0])} cannot be used with "
            f"the '{ctx.invoked_subcommand}' subcommand; "
            "pass check-release options after the subcommand."
        )


def validate_check_release_options(ctx: click.Context) -> None:
    """Enforce the conflict and requirement relations of the check-release options.

    Rules:
        - At most one baseline source option.
        - ``--current-rustdoc`` requires ``--baseline-rustdoc``, and conflicts with the
          feature options and with the workspace/package selection options.
        - ``--baseline-rustdoc`` conflicts with the feature options.
        - ``--default-features``, ``--only-explicit-features`` and ``--all-features`` are
          mutually exclusive.
        - ``--all-features`` conflicts with the extra-feature lists.
        - ``--verbose`` conflicts with ``--quiet``.

    Args:
        ctx (click.Context): Context holding the check-release parameters.

    Raises:
        SemverChecksUsageError: On the first violated rule.
    """
    _reject_more_than_one(ctx, BASELINE_KEYS)

    feature_keys: tuple[str, ...] = FEATURE_MODE_KEYS + FEATURE_LIST_KEYS
    if given_on_command_line(ctx, ArgKey.CURRENT_RUSTDOC):
        if not given_on_command_line(ctx, ArgKey.BASELINE_RUSTDOC):
            raise SemverChecksUsageError(
                f"{ctx.command_path}: {CliOpt.CURRENT_RUSTDOC} requires "
                f"{CliOpt.BASELINE_RUSTDOC}."
            )
        _reject_pairs(ctx, (ArgKey.CURRENT_RUSTDOC,), feature_keys)
        _reject_pairs(ctx, (ArgKey.CURRENT_RUSTDOC,), WORKSPACE_KEYS)
    _reject_pairs(ctx, (ArgKey.BASELINE_RUSTDOC,), feature_keys)

    _reject_more_than_one(ctx, FEATURE_MODE_KEYS)
    _reject_pairs(ctx, (ArgKey.ALL_FEATURES,), FEATURE_LIST_KEYS)

    _reject_pairs(ctx, (ArgKey.VERBOSE,), (ArgKey.QUIET,))
    logger.trace("%s: check-release options passed conflict validation", ctx.command_path)
