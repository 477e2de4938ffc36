# semver-checks:header:start
#
#   project      : semver-checks
#   file         : bugreport.py
#   file_relpath : src/semver_checks/bugreport.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Environment report for bug reports (``--bugreport``).

The report is Markdown with a fixed set of sections, in this order:

1. Software version
2. Operating system
3. Command-line
4. Command output (``cargo -V``)
5. Compile time information (the Python runtime executing the tool)

Collection never fails: a missing ``cargo`` binary is reported inside the
*Command output* section.
"""

from __future__ import annotations

import platform
import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from semver_checks.config.logging import get_logger
from semver_checks.constants import BINARY_NAME, SEMVER_CHECKS_VERSION

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from semver_checks.config.logging import SemverChecksLogger

logger: SemverChecksLogger = get_logger(__name__)

CARGO_VERSION_COMMAND: Final[tuple[str, ...]] = ("cargo", "-V")


@dataclass(frozen=True, slots=True)
class ReportSection:
    """One titled section of the report."""

    title: str
    body: str
    code_block: bool = False

    def render(self) -> str:
        """Render the section as Markdown."""
        body = f"```\n{self.body}\n```" if self.code_block else self.body
        return f"#### {self.title}\n\n{body}\n"


def software_version() -> ReportSection:
    """Name and version of this tool."""
    return ReportSection("Software version", f"{BINARY_NAME} {SEMVER_CHECKS_VERSION}")


def operating_system() -> ReportSection:
    """Operating system name, release and machine."""
    uname = platform.uname()
    text = f"{uname.system} {uname.release} ({uname.version}) {uname.machine}".strip()
    return ReportSection("Operating system", text)


def command_line(argv: Sequence[str]) -> ReportSection:
    """The invocation, shell-quoted."""
    return ReportSection("Command-line", shlex.join(argv), code_block=True)


def command_output(
    command: Sequence[str],
    *,
    run: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
) -> ReportSection:
    """Output of an external command, or the reason it could not be run."""
    title = f"Command output ({shlex.join(command)})"
    try:
        proc = run(list(command), capture_output=True, text=True, check=False)
    except OSError as exc:
        logger.debug("Could not run %s: %s", command, exc)
        return ReportSection(title, f"failed to run: {exc}", code_block=True)
    text = (proc.stdout or "") + (proc.stderr or "")
    return ReportSection(title, text.strip(), code_block=True)


def compile_time_information() -> ReportSection:
    """Details of the Python runtime executing the tool."""
    lines = [
        f"- Implementation: {platform.python_implementation()}",
        f"- Python version: {platform.python_version()}",
        f"- Build: {' '.join(platform.python_build())}",
        f"- Compiler: {platform.python_compiler()}",
        f"- Executable: {sys.executable}",
    ]
    return ReportSection("Compile time information", "\n".join(lines))


def collect_bugreport(
    argv: Sequence[str],
    *,
    run: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
) -> list[ReportSection]:
    """Collect every report section, in report order.

    Args:
        argv (Sequence[str]): The command line of the current invocation.
        run (Callable[..., subprocess.CompletedProcess[str]]): Subprocess runner.

    Returns:
        list[ReportSection]: The sections.
    """
    return [
        software_version(),
        operating_system(),
        command_line(argv),
        command_output(CARGO_VERSION_COMMAND, run=run),
        compile_time_information(),
    ]


def render_bugreport(sections: Sequence[ReportSection]) -> str:
    """Render the sections as one Markdown document."""
    return "\n".join(section.render() for section in sections)
