# semver-checks:header:start
#
#   project      : semver-checks
#   file         : resolver.py
#   file_relpath : src/semver_checks/core/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Assemble a [`CheckRequest`][semver_checks.core.request.CheckRequest] from raw arguments.

The resolvers are independent of each other except for the project root
derived for the current source, which the baseline resolver reuses:

    CheckReleaseArgs ─┬─ resolve_current_source ──(root)──┐
                      ├─ resolve_package_selection        │
                      ├─ resolve_baseline_source ◄────────┘
                      └─ resolve_feature_policy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_checks.config.logging import get_logger
from semver_checks.core.baseline import resolve_baseline_source
from semver_checks.core.features import resolve_feature_policy
from semver_checks.core.request import CheckRequest
from semver_checks.core.scope import resolve_current_source, resolve_package_selection

if TYPE_CHECKING:
    from pathlib import Path

    from semver_checks.config.logging import SemverChecksLogger
    from semver_checks.core.args import CheckReleaseArgs

logger: SemverChecksLogger = get_logger(__name__)


def resolve_check_request(args: CheckReleaseArgs, *, cwd: Path) -> CheckRequest:
    """Resolve raw check-release arguments into a check request.

    The function only reads the filesystem to tell whether ``--manifest-path``
    names a directory; it never consults the environment, so ``cwd`` must be
    supplied by the caller.

    Args:
        args (CheckReleaseArgs): Raw check-release arguments (already validated).
        cwd (Path): The process working directory.

    Returns:
        CheckRequest: The fully resolved request.
    """
    current, current_root = resolve_current_source(args, cwd=cwd)
    request = CheckRequest(
        current=current,
        baseline=resolve_baseline_source(args, current_root=current_root, cwd=cwd),
        packages=resolve_package_selection(args),
        features=resolve_feature_policy(args),
        release_type=args.release_type,
        build_target=args.build_target,
    )
    logger.trace("Resolved check request: %s", request.to_dict())
    return request
