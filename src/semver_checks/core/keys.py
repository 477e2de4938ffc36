# semver-checks:header:start
#
#   project      : semver-checks
#   file         : keys.py
#   file_relpath : src/semver_checks/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Shared canonical argument keys.

This module defines the *stable destination keys* used to represent parsed
arguments and options. These keys are the internal contract between Click
parsing and downstream consumers (argument validation, raw argument
construction, and the Click context object).

Notes:
    - Values are Python identifiers (snake_case), not CLI spellings.
    - The CLI spellings (e.g. ``--baseline-rev``) live in
      [`semver_checks.cli.keys`][semver_checks.cli.keys].
    - Keep this module behavior-free.
"""

from __future__ import annotations

from typing import Final


class ArgKey:
    """Canonical argument keys used by the semver-checks CLI."""

    # Operating modes
    BUGREPORT: Final[str] = "bugreport"
    LIST: Final[str] = "list_queries"
    EXPLAIN: Final[str] = "explain"

    # Current
    MANIFEST_PATH: Final[str] = "manifest_path"
    WORKSPACE: Final[str] = "workspace"
    ALL: Final[str] = "all_packages"
    PACKAGE: Final[str] = "package"
    EXCLUDE: Final[str] = "exclude"
    CURRENT_RUSTDOC: Final[str] = "current_rustdoc"

    # Baseline
    BASELINE_VERSION: Final[str] = "baseline_version"
    BASELINE_REV: Final[str] = "baseline_rev"
    BASELINE_ROOT: Final[str] = "baseline_root"
    BASELINE_RUSTDOC: Final[str] = "baseline_rustdoc"

    # Overrides
    RELEASE_TYPE: Final[str] = "release_type"

    # Features
    DEFAULT_FEATURES: Final[str] = "default_features"
    ONLY_EXPLICIT_FEATURES: Final[str] = "only_explicit_features"
    ALL_FEATURES: Final[str] = "all_features"
    FEATURES: Final[str] = "features"
    BASELINE_FEATURES: Final[str] = "baseline_features"
    CURRENT_FEATURES: Final[str] = "current_features"

    # Build
    BUILD_TARGET: Final[str] = "build_target"

    # Logging / UX
    VERBOSE: Final[str] = "verbose"
    QUIET: Final[str] = "quiet"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_CHOICE: Final[str] = "color_choice"
    COLOR_ENABLED: Final[str] = "color_enabled"
    CONSOLE: Final[str] = "console"

    # Click context object payload
    MODE_ARGS: Final[str] = "mode_args"
    ENGINE: Final[str] = "engine"
    CWD: Final[str] = "cwd"
