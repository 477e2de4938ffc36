# semver-checks:header:start
#
#   project      : semver-checks
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""CLI test helpers for running ``cargo semver-checks`` under `click.testing.CliRunner`.

The helpers prepend the ``semver-checks`` subcommand (cargo passes it as the first
argument) and inject test overrides into Click's context object:

- ``ArgKey.ENGINE``: a fake comparison engine, so no real engine is loaded.
- ``ArgKey.CWD``: the working directory used for relative defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from semver_checks.cli.keys import CliCmd
from semver_checks.cli.main import cli
from semver_checks.core.exit_codes import ExitCode
from semver_checks.core.keys import ArgKey

if TYPE_CHECKING:
    from pathlib import Path

    from tests.fakes import FakeEngine


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with a raw argument vector (no ``semver-checks`` prefix).

    Use this helper for ``--help`` / ``--version`` style checks on the outer group.

    Args:
        argv (Sequence[str]): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), prog_name=CliCmd.CARGO)


def run_semver_checks(
    argv: Sequence[str],
    *,
    engine: FakeEngine | None = None,
    cwd: Path | None = None,
) -> Result:
    """Invoke ``cargo semver-checks ARGV`` with optional context overrides.

    Args:
        argv (Sequence[str]): Arguments following ``semver-checks``.
        engine (FakeEngine | None): Engine injected into ``ctx.obj``.
        cwd (Path | None): Working directory injected into ``ctx.obj``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_semver_checks(["--list"])
        assert_SUCCESS(result)
        ```
    """
    obj: dict[str, Any] = {}
    if engine is not None:
        obj[ArgKey.ENGINE] = engine
    if cwd is not None:
        obj[ArgKey.CWD] = cwd
    runner = CliRunner()
    return runner.invoke(
        cli,
        [CliCmd.SEMVER_CHECKS, *argv],
        obj=obj,  # inject test overrides into Click's context object
        prog_name=CliCmd.CARGO,
    )


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
