# semver-checks:header:start
#
#   project      : semver-checks
#   file         : features.py
#   file_relpath : src/semver_checks/core/features.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Feature set resolution for the current and baseline crate builds.

Decision precedence (first match wins; the flags are mutually exclusive at the
Click layer):
    1. ``--all-features`` → `AllFeatures`
    2. ``--default-features`` → `DefaultPlusExtra`
    3. ``--only-explicit-features`` → `OnlyExplicit`
    4. otherwise → `Heuristic`

Extra feature lists:
    The mutual list (``--features``) is appended to a copy of each side-specific
    list (``--current-features``, ``--baseline-features``). Only the two merged
    lists are then cleaned of empty names (``""`` and the quoted ``'""'``), the
    way cargo treats ``--features=""`` as a no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from semver_checks.config.logging import get_logger
from semver_checks.core.request import (
    AllFeatures,
    DefaultPlusExtra,
    FeaturePolicy,
    Heuristic,
    OnlyExplicit,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from semver_checks.config.logging import SemverChecksLogger
    from semver_checks.core.args import CheckReleaseArgs

logger: SemverChecksLogger = get_logger(__name__)

#: Feature arguments cargo treats as "no feature at all".
EMPTY_FEATURE_TOKENS: Final[frozenset[str]] = frozenset({"", '""'})

#: Names the heuristic policy leaves out.
HEURISTIC_EXCLUDED_NAMES: Final[frozenset[str]] = frozenset(
    {"unstable", "nightly", "bench", "no_std"}
)
#: Name prefixes the heuristic policy leaves out.
HEURISTIC_EXCLUDED_PREFIXES: Final[tuple[str, ...]] = ("_", "unstable_", "unstable-")


def is_heuristically_excluded(name: str) -> bool:
    """Return True if a feature name looks experimental to the heuristic policy.

    Args:
        name (str): Feature name.

    Returns:
        bool: True for ``unstable``, ``nightly``, ``bench``, ``no_std`` and names
            starting with ``_``, ``unstable_`` or ``unstable-``.
    """
    return name in HEURISTIC_EXCLUDED_NAMES or name.startswith(HEURISTIC_EXCLUDED_PREFIXES)


def heuristic_feature_set(available: Iterable[str]) -> list[str]:
    """Filter a crate's declared features the way the heuristic policy does.

    Args:
        available (Iterable[str]): Feature names declared by the crate.

    Returns:
        list[str]: The features that stay enabled, in input order.
    """
    return [name for name in available if not is_heuristically_excluded(name)]


def strip_empty_features(features: Iterable[str]) -> tuple[str, ...]:
    """Drop ``""`` and ``'""'`` entries, keeping the order of the others."""
    return tuple(f for f in features if f not in EMPTY_FEATURE_TOKENS)


def merge_extra_features(args: CheckReleaseArgs) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Merge the mutual feature list into the current and baseline lists.

    Args:
        args (CheckReleaseArgs): Raw check-release arguments.

    Returns:
        tuple[tuple[str, ...], tuple[str, ...]]: ``(current, baseline)`` extra
            features: side-specific entries first, then the mutual ones, with empty
            names removed.
    """
    current = strip_empty_features((*args.current_features, *args.features))
    baseline = strip_empty_features((*args.baseline_features, *args.features))
    return current, baseline


def resolve_feature_policy(args: CheckReleaseArgs) -> FeaturePolicy:
    """Resolve the feature inclusion policy and extra features.

    Args:
        args (CheckReleaseArgs): Raw check-release arguments.

    Returns:
        FeaturePolicy: The single applicable policy.
    """
    if args.all_features:
        logger.debug("Feature policy: all features")
        return AllFeatures()

    current, baseline = merge_extra_features(args)
    if args.default_features:
        logger.debug("Feature policy: default features + %s / %s", current, baseline)
        return DefaultPlusExtra(current=current, baseline=baseline)
    if args.only_explicit_features:
        logger.debug("Feature policy: only explicit features %s / %s", current, baseline)
        return OnlyExplicit(current=current, baseline=baseline)

    logger.debug("Feature policy: heuristic + %s / %s", current, baseline)
    return Heuristic(current=current, baseline=baseline)
