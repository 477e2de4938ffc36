# semver-checks:header:start
#
#   project      : semver-checks
#   file         : keys.py
#   file_relpath : src/semver_checks/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Canonical CLI command names and option spellings.

Centralizing these values avoids string duplication between the option
declarations and the usage-error messages of
[`semver_checks.cli.validators`][semver_checks.cli.validators].

Design notes:
    - CLI option spellings (``CliOpt``) are user-facing and should be changed with care.
    - Destination keys live in [`semver_checks.core.keys.ArgKey`][semver_checks.core.keys.ArgKey].
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the CLI."""

    CARGO: Final[str] = "cargo"
    SEMVER_CHECKS: Final[str] = "semver-checks"
    CHECK_RELEASE: Final[str] = "check-release"
    CHECK_RELEASE_ALIAS: Final[str] = "diff-files"


class CliOpt:
    """User-facing long option spellings (including the leading ``--``)."""

    # Operating modes
    BUGREPORT: Final[str] = "--bugreport"
    LIST: Final[str] = "--list"
    EXPLAIN: Final[str] = "--explain"

    # Current
    MANIFEST_PATH: Final[str] = "--manifest-path"
    WORKSPACE: Final[str] = "--workspace"
    ALL: Final[str] = "--all"
    PACKAGE: Final[str] = "--package"
    EXCLUDE: Final[str] = "--exclude"
    CURRENT_RUSTDOC: Final[str] = "--current-rustdoc"

    # Baseline
    BASELINE_VERSION: Final[str] = "--baseline-version"
    BASELINE_REV: Final[str] = "--baseline-rev"
    BASELINE_ROOT: Final[str] = "--baseline-root"
    BASELINE_RUSTDOC: Final[str] = "--baseline-rustdoc"

    # Overrides
    RELEASE_TYPE: Final[str] = "--release-type"

    # Features
    DEFAULT_FEATURES: Final[str] = "--default-features"
    ONLY_EXPLICIT_FEATURES: Final[str] = "--only-explicit-features"
    ALL_FEATURES: Final[str] = "--all-features"
    FEATURES: Final[str] = "--features"
    BASELINE_FEATURES: Final[str] = "--baseline-features"
    CURRENT_FEATURES: Final[str] = "--current-features"

    # Build
    BUILD_TARGET: Final[str] = "--target"

    # Logging / UX
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_CHOICE: Final[str] = "--color"
