# semver-checks:header:start
#
#   project      : semver-checks
#   file         : baseline.py
#   file_relpath : src/semver_checks/core/baseline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Baseline source resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_checks.config.logging import get_logger
from semver_checks.core.request import (
    BaselineSource,
    GitRevision,
    ProjectRoot,
    RegistryVersion,
    RustdocPath,
)

if TYPE_CHECKING:
    from pathlib import Path

    from semver_checks.config.logging import SemverChecksLogger
    from semver_checks.core.args import CheckReleaseArgs

logger: SemverChecksLogger = get_logger(__name__)


def resolve_git_root(
    args: CheckReleaseArgs,
    *,
    current_root: Path | None,
    cwd: Path,
) -> Path:
    """Return the directory used to locate the git repository of a ``--baseline-rev``.

    Order: ``--baseline-root``, then the current project root, then ``cwd``.
    """
    if args.baseline_root is not None:
        return args.baseline_root
    if current_root is not None:
        return current_root
    return cwd


def resolve_baseline_source(
    args: CheckReleaseArgs,
    *,
    current_root: Path | None,
    cwd: Path,
) -> BaselineSource | None:
    """Resolve the custom baseline, if any.

    Decision precedence:
        1. ``--baseline-version`` → `RegistryVersion`
        2. ``--baseline-rev`` → `GitRevision` (see `resolve_git_root`)
        3. ``--baseline-rustdoc`` → `RustdocPath`
        4. ``--baseline-root`` → `ProjectRoot`
        5. none of the above → ``None``: the engine uses its own default baseline.

    Args:
        args (CheckReleaseArgs): Raw check-release arguments.
        current_root (Path | None): Project root resolved for the current source,
            or ``None`` when the current source is an explicit rustdoc path.
        cwd (Path): The process working directory.

    Returns:
        BaselineSource | None: The baseline override, or ``None`` for the engine default.
    """
    if args.baseline_version is not None:
        source: BaselineSource | None = RegistryVersion(args.baseline_version)
    elif args.baseline_rev is not None:
        root = resolve_git_root(args, current_root=current_root, cwd=cwd)
        source = GitRevision(root=root, rev=args.baseline_rev)
    elif args.baseline_rustdoc is not None:
        source = RustdocPath(args.baseline_rustdoc)
    elif args.baseline_root is not None:
        source = ProjectRoot(args.baseline_root)
    else:
        source = None

    logger.debug("Baseline source: %s", source if source is not None else "<engine default>")
    return source
