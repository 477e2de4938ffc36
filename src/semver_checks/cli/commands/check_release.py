# semver-checks:header:start
#
#   project      : semver-checks
#   file         : check_release.py
#   file_relpath : src/semver_checks/cli/commands/check_release.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""`check-release` subcommand (alias `diff-files`) and the check-release mode.

Input:
    The check-release options (current, baseline, features, build target, verbosity)
    and ``--color``, which takes precedence over a ``--color`` given before the subcommand.

Behavior:
    Resolves a [`CheckRequest`][semver_checks.core.request.CheckRequest], hands it to the
    installed comparison engine, and exits with 0 when the report succeeds and 1 when
    it does not or when the engine fails.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import click

from semver_checks.cli.cli_types import check_release_args_from_params
from semver_checks.cli.cmd_common import (
    build_global_config,
    exit_on_error,
    get_cwd,
    init_common_state,
)
from semver_checks.cli.errors import SemverChecksError
from semver_checks.cli.keys import CliCmd
from semver_checks.cli.options import CONTEXT_SETTINGS, check_release_options, color_option
from semver_checks.cli.validators import validate_check_release_options
from semver_checks.config.logging import get_logger
from semver_checks.core.args import SemverChecksArgs
from semver_checks.core.errors import ResolutionError
from semver_checks.core.exit_codes import ExitCode
from semver_checks.core.keys import ArgKey
from semver_checks.core.resolver import resolve_check_request
from semver_checks.engine.loader import load_engine

if TYPE_CHECKING:
    from semver_checks.cli_shared.color import ColorChoice
    from semver_checks.core.request import CheckRequest
    from semver_checks.engine.api import CheckEngine
    from semver_checks.engine.config import GlobalConfig

logger = get_logger(__name__)


def get_engine(ctx: click.Context) -> CheckEngine:
    """Return the engine injected into ``ctx.obj``, or load the installed one."""
    engine: CheckEngine | None = ctx.obj.get(ArgKey.ENGINE)
    if engine is None:
        engine = load_engine()
        ctx.obj[ArgKey.ENGINE] = engine
    return engine


def run_check_release(ctx: click.Context, request: CheckRequest, config: GlobalConfig) -> None:
    """Run the comparison engine and exit with the report outcome.

    Engine failures (including a missing engine) are reported as ``error: <message>``
    unless errors are silenced, and exit with code 1.
    """

    def _check() -> bool:
        engine: CheckEngine = get_engine(ctx)
        logger.debug("Running check-release with engine %r", engine)
        report = engine.check_release(request, config)
        return report.success()

    success: bool = exit_on_error(ctx, log_errors=config.is_error(), inner=_check)
    logger.debug("check-release finished: success=%s", success)
    ctx.exit(ExitCode.SUCCESS if success else ExitCode.FAILURE)


def resolve_request_or_fail(args: SemverChecksArgs, *, ctx: click.Context) -> CheckRequest:
    """Resolve the check request, turning resolution failures into CLI errors."""
    try:
        return resolve_check_request(args.check_release, cwd=get_cwd(ctx))
    except ResolutionError as err:
        raise SemverChecksError(str(err)) from err


@click.command(
    name=CliCmd.CHECK_RELEASE,
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Check your crate for semver violations.\n\n"
        f"Also available as '{CliCmd.CHECK_RELEASE_ALIAS}'."
    ),
)
@color_option
@check_release_options
@click.pass_context
def check_release_command(ctx: click.Context, **params: Any) -> None:
    """Run the check-release mode with the options given after the subcommand."""
    color_choice: ColorChoice | None = params.get(ArgKey.COLOR_CHOICE)
    if color_choice is not None:
        init_common_state(ctx, color_choice=color_choice)

    validate_check_release_options(ctx)

    group_args: SemverChecksArgs = ctx.obj.get(ArgKey.MODE_ARGS) or SemverChecksArgs()
    args: SemverChecksArgs = replace(
        group_args,
        check_release=check_release_args_from_params(params),
        color_choice=color_choice or group_args.color_choice,
    )
    ctx.obj[ArgKey.MODE_ARGS] = args

    config: GlobalConfig = build_global_config(ctx, args.check_release)
    request: CheckRequest = resolve_request_or_fail(args, ctx=ctx)
    run_check_release(ctx, request, config)
