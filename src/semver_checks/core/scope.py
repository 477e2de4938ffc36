# semver-checks:header:start
#
#   project      : semver-checks
#   file         : scope.py
#   file_relpath : src/semver_checks/core/scope.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Current source and package scope resolution.

The current source is either an explicit rustdoc JSON document or a project
root derived from ``--manifest-path`` (or the working directory). The derived
root is returned alongside the source so that the baseline resolver can reuse
it for git-revision baselines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_checks.config.logging import get_logger
from semver_checks.core.errors import ResolutionError
from semver_checks.core.request import (
    CurrentSource,
    DefaultMembers,
    ExplicitPackages,
    PackageSelection,
    ProjectRoot,
    RustdocPath,
    Unspecified,
    Workspace,
)

if TYPE_CHECKING:
    from pathlib import Path

    from semver_checks.config.logging import SemverChecksLogger
    from semver_checks.core.args import CheckReleaseArgs

logger: SemverChecksLogger = get_logger(__name__)


def project_root_from_manifest(manifest_path: Path) -> Path:
    """Return the project root for a ``--manifest-path`` value.

    A directory is its own root; for a file (normally ``Cargo.toml``) the root is
    its parent directory.

    Args:
        manifest_path (Path): The manifest path as given by the user.

    Returns:
        Path: The project root.

    Raises:
        ResolutionError: If a file path has no parent directory.
    """
    if manifest_path.is_dir():
        return manifest_path
    parent = manifest_path.parent
    # Path("Cargo.toml").parent is Path("."); only anchors like "/" have no parent.
    if parent == manifest_path:
        raise ResolutionError(f"manifest path doesn't have a parent: {manifest_path}")
    return parent


def resolve_current_source(
    args: CheckReleaseArgs,
    *,
    cwd: Path,
) -> tuple[CurrentSource, Path | None]:
    """Resolve where the current crate description comes from.

    Resolution order:
        1. ``--current-rustdoc`` → `RustdocPath`; no project root is known.
        2. ``--manifest-path`` → `ProjectRoot` of the manifest's directory.
        3. otherwise → `ProjectRoot` of ``cwd``.

    Args:
        args (CheckReleaseArgs): Raw check-release arguments.
        cwd (Path): The process working directory.

    Returns:
        tuple[CurrentSource, Path | None]: The current source and the resolved
            project root (``None`` when the source is an explicit rustdoc path).
    """
    if args.current_rustdoc is not None:
        logger.debug("Current source: rustdoc %s", args.current_rustdoc)
        return RustdocPath(args.current_rustdoc), None

    if args.manifest_path is not None:
        root = project_root_from_manifest(args.manifest_path)
    else:
        root = cwd
    logger.debug("Current source: project root %s", root)
    return ProjectRoot(root), root


def resolve_package_selection(args: CheckReleaseArgs) -> PackageSelection:
    """Resolve which workspace packages are in scope.

    Resolution order:
        1. ``--workspace``/``--all`` → `Workspace` minus ``--exclude``.
        2. ``--package`` → `ExplicitPackages` (``--exclude`` is ignored).
        3. ``--exclude`` alone → `DefaultMembers` minus ``--exclude``.
        4. otherwise → `Unspecified` (the engine decides).

    Args:
        args (CheckReleaseArgs): Raw check-release arguments.

    Returns:
        PackageSelection: The selected scope.
    """
    if args.workspace or args.all_packages:
        return Workspace(excluded=frozenset(args.exclude))
    if args.package:
        return ExplicitPackages(packages=frozenset(args.package))
    if args.exclude:
        return DefaultMembers(excluded=frozenset(args.exclude))
    return Unspecified()
