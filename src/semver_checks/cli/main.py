# semver-checks:header:start
#
#   project      : semver-checks
#   file         : main.py
#   file_relpath : src/semver_checks/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click entry point for ``cargo-semver-checks``.

Cargo runs external subcommands as ``cargo-semver-checks semver-checks [ARGS]``, so the
command tree mirrors that shape:

    cargo
    └── semver-checks [--bugreport | --list | --explain ID] [--color WHEN] [OPTIONS]
        └── check-release (alias: diff-files) [--color WHEN] [OPTIONS]

Key ideas:
- Color and logging state is initialized by the `semver-checks` group and placed
  into ``ctx.obj``; a ``--color`` given after `check-release` re-initializes it.
- Without a subcommand the group itself selects and runs an operating mode; check-release
  options given at the group level are used when no subcommand is present.
- Option conflicts are validated before any mode runs (usage errors exit with 64).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

import click

from semver_checks.cli.cli_types import check_release_args_from_params
from semver_checks.cli.cmd_common import (
    build_global_config,
    exit_on_error,
    get_console,
    get_cwd,
    init_common_state,
)
from semver_checks.cli.commands.bugreport import run_bugreport
from semver_checks.cli.commands.check_release import check_release_command, run_check_release
from semver_checks.cli.commands.explain import run_explain
from semver_checks.cli.commands.list_queries import run_list_queries
from semver_checks.cli.errors import SemverChecksError
from semver_checks.cli.keys import CliCmd
from semver_checks.cli.options import (
    CONTEXT_SETTINGS,
    check_release_options,
    color_option,
    mode_options,
)
from semver_checks.cli.validators import (
    validate_check_release_options,
    validate_exclusive_mode_flags,
    validate_no_options_with_subcommand,
)
from semver_checks.config.logging import get_logger
from semver_checks.constants import BINARY_NAME, SEMVER_CHECKS_VERSION
from semver_checks.core.args import SemverChecksArgs
from semver_checks.core.errors import ResolutionError
from semver_checks.core.exit_codes import ExitCode
from semver_checks.core.keys import ArgKey
from semver_checks.core.modes import BugReport, CheckRelease, ExplainQuery, ListQueries, select_mode

if TYPE_CHECKING:
    from semver_checks.core.modes import OperatingMode
    from semver_checks.engine.config import GlobalConfig

logger = get_logger(__name__)


class AliasedGroup(click.Group):
    """A Click group that resolves hidden command aliases to their canonical command."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}

    def add_alias(self, alias: str, name: str) -> None:
        """Register `alias` as another spelling of the command `name`."""
        self.aliases[alias] = name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Return the command for `cmd_name`, resolving aliases."""
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Report the canonical command name, also when invoked through an alias."""
        _, cmd, remaining = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else None), cmd, remaining


def run_mode(ctx: click.Context, args: SemverChecksArgs) -> None:
    """Select the operating mode for `args` and run it; always exits."""
    config: GlobalConfig = build_global_config(ctx, args.check_release)
    try:
        mode: OperatingMode = select_mode(args, cwd=get_cwd(ctx))
    except ResolutionError as err:
        raise SemverChecksError(str(err)) from err
    logger.debug("Selected operating mode: %s", type(mode).__name__)

    match mode:
        case BugReport():
            run_bugreport(get_console(ctx))
            ctx.exit(ExitCode.SUCCESS)
        case ListQueries():
            exit_on_error(ctx, log_errors=True, inner=lambda: run_list_queries(config))
            ctx.exit(ExitCode.SUCCESS)
        case ExplainQuery(query_id=query_id):
            exit_on_error(
                ctx,
                log_errors=True,
                inner=lambda: run_explain(get_console(ctx), query_id),
            )
            ctx.exit(ExitCode.SUCCESS)
        case CheckRelease(request=request):
            run_check_release(ctx, request, config)
        case _:
            assert_never(mode)


@click.group(
    name=CliCmd.CARGO,
    context_settings=CONTEXT_SETTINGS,
    help=f"Cargo subcommand wrapper; run as '{CliCmd.CARGO} {CliCmd.SEMVER_CHECKS}'.",
)
@click.version_option(SEMVER_CHECKS_VERSION, prog_name=BINARY_NAME)
def cli() -> None:
    """Entry point invoked by cargo."""


@click.group(
    name=CliCmd.SEMVER_CHECKS,
    cls=AliasedGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,  # Without a subcommand, run the selected mode
    help=(
        "Scan your Rust crate for semver violations.\n\n"
        "Without a subcommand, check-release options may be given directly."
    ),
    epilog=(
        "Exit codes: 0 success, 1 semver violations or errors, "
        "64 conflicting options, 2 unknown options or invalid values."
    ),
)
@click.version_option(SEMVER_CHECKS_VERSION, prog_name=BINARY_NAME)
@mode_options
@color_option
@check_release_options
@click.pass_context
def semver_checks_group(ctx: click.Context, **params: Any) -> None:
    """Validate the invocation, then run a mode or defer to the subcommand."""
    init_common_state(ctx, color_choice=params.get(ArgKey.COLOR_CHOICE))

    validate_exclusive_mode_flags(ctx)
    validate_no_options_with_subcommand(ctx)

    args = SemverChecksArgs(
        bugreport=bool(params.get(ArgKey.BUGREPORT)),
        list_queries=bool(params.get(ArgKey.LIST)),
        explain=params.get(ArgKey.EXPLAIN),
        check_release=check_release_args_from_params(params),
        color_choice=params.get(ArgKey.COLOR_CHOICE),
    )
    ctx.obj[ArgKey.MODE_ARGS] = args

    if ctx.invoked_subcommand is not None:
        return

    validate_check_release_options(ctx)
    run_mode(ctx, args)


semver_checks_group.add_command(check_release_command)
semver_checks_group.add_alias(CliCmd.CHECK_RELEASE_ALIAS, CliCmd.CHECK_RELEASE)

cli.add_command(semver_checks_group)


def main() -> None:
    """Console-script entry point."""
    cli(prog_name=CliCmd.CARGO)


if __name__ == "__main__":
    main()
