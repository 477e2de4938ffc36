# semver-checks:header:start
#
#   project      : semver-checks
#   file         : cmd_common.py
#   file_relpath : src/semver_checks/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by the operating modes.
They intentionally avoid policy (which mode runs, what it prints) and only
encapsulate plumbing such as building the output configuration and
turning failures into exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, TypeVar

import click

from semver_checks.cli.console import ClickConsole
from semver_checks.cli.options import resolve_log_level
from semver_checks.cli_shared.color import color_enabled, resolve_color_choice_from_env
from semver_checks.config.logging import get_logger, resolve_env_log_level, setup_logging
from semver_checks.core.exit_codes import ExitCode
from semver_checks.core.keys import ArgKey
from semver_checks.engine.config import GlobalConfig

if TYPE_CHECKING:
    from semver_checks.cli_shared.color import ColorChoice
    from semver_checks.cli_shared.console_api import ConsoleLike
    from semver_checks.core.args import CheckReleaseArgs

T = TypeVar("T")

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, color_choice: ColorChoice | None) -> None:
    """Initialize shared state (color, logging, console) on the Click context.

    The `semver-checks` group calls this first; the `check-release` subcommand calls it
    again when its own ``--color`` is given, so the later flag wins.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_choice (ColorChoice | None): Explicit choice from ``--color`` (or ``None``).
    """
    ctx.ensure_object(dict)

    choice: ColorChoice = resolve_color_choice_from_env(color_choice)
    enable_color: bool = color_enabled(choice)
    ctx.obj[ArgKey.COLOR_CHOICE] = choice
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    # Internal diagnostics are configured via env, independent of -v/-q
    setup_logging(level=resolve_env_log_level(), color=enable_color)

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console initialized by the `semver-checks` group."""
    return ctx.obj[ArgKey.CONSOLE]


def get_cwd(ctx: click.Context) -> Path:
    """Return the working directory used to resolve relative defaults.

    Tests may inject ``ctx.obj[ArgKey.CWD]``; otherwise the process working directory.
    """
    cwd: Path | None = ctx.obj.get(ArgKey.CWD)
    return Path(cwd) if cwd is not None else Path.cwd()


def build_global_config(ctx: click.Context, args: CheckReleaseArgs) -> GlobalConfig:
    """Build the output configuration from the verbosity flags of `args`.

    The resolved level is also stored in ``ctx.obj[ArgKey.LOG_LEVEL]``.
    """
    level: int | None = resolve_log_level(args.verbose, args.quiet)
    ctx.obj[ArgKey.LOG_LEVEL] = level
    return GlobalConfig(console=get_console(ctx), log_level=level)


def format_error_chain(err: BaseException) -> str:
    """Render an exception and its explicit causes, outermost first."""
    text: str = str(err) or type(err).__name__
    causes: list[str] = []
    cause: BaseException | None = err.__cause__
    while cause is not None:
        causes.append(str(cause) or type(cause).__name__)
        cause = cause.__cause__
    if not causes:
        return text
    lines: list[str] = [text, "", "Caused by:"]
    lines.extend(f"    {line}" for line in causes)
    return "\n".join(lines)


def exit_on_error(
    ctx: click.Context,
    *,
    log_errors: bool,
    inner: Callable[[], T],
) -> T:
    """Run `inner`, converting any raised exception into exit code 1.

    Args:
        ctx (click.Context): Current Click context.
        log_errors (bool): Whether to print ``error: <message>`` to stderr on failure.
        inner (Callable[[], T]): The operation to run.

    Returns:
        T: The value returned by `inner`.
    """
    try:
        return inner()
    except Exception as err:
        logger.debug("operation failed: %r", err, exc_info=True)
        if log_errors:
            get_console(ctx).error(f"error: {format_error_chain(err)}")
        ctx.exit(ExitCode.FAILURE)

