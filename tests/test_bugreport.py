# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_bugreport.py
#   file_relpath : tests/test_bugreport.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Bug report sections and rendering."""

from __future__ import annotations

import subprocess
from typing import Any

from semver_checks.bugreport import (
    CARGO_VERSION_COMMAND,
    ReportSection,
    collect_bugreport,
    command_line,
    command_output,
    render_bugreport,
)
from semver_checks.constants import BINARY_NAME


def _fake_run(stdout: str) -> Any:
    def _run(command: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    return _run


def _failing_run(command: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
    raise FileNotFoundError(2, "No such file or directory", command[0])


def test_section_rendering() -> None:
    """Sections render as level-4 headings; code blocks are fenced."""
    assert ReportSection("Title", "body").render() == "#### Title\n\nbody\n"
    assert ReportSection("Title", "x", code_block=True).render() == "#### Title\n\n```\nx\n```\n"


def test_command_line_is_shell_quoted() -> None:
    """Arguments with spaces are quoted."""
    section = command_line(["cargo-semver-checks", "semver-checks", "--features", "a b"])

    assert section.body == "cargo-semver-checks semver-checks --features 'a b'"
    assert section.code_block


def test_command_output_is_captured() -> None:
    """The command's output becomes the section body."""
    section = command_output(CARGO_VERSION_COMMAND, run=_fake_run("cargo 1.80.0\n"))

    assert section.title == "Command output (cargo -V)"
    assert section.body == "cargo 1.80.0"


def test_missing_command_is_reported_not_raised() -> None:
    """A command that cannot be started is described in the report."""
    section = command_output(CARGO_VERSION_COMMAND, run=_failing_run)

    assert section.body.startswith("failed to run:")


def test_full_report() -> None:
    """The report contains every section in order."""
    text = render_bugreport(collect_bugreport(["prog", "--bugreport"], run=_fake_run("cargo 1")))

    titles = [line for line in text.splitlines() if line.startswith("#### ")]
    assert titles == [
        "#### Software version",
        "#### Operating system",
        "#### Command-line",
        "#### Command output (cargo -V)",
        "#### Compile time information",
    ]
    assert BINARY_NAME in text
    assert "prog --bugreport" in text
