# semver-checks:header:start
#
#   project      : semver-checks
#   file         : constants.py
#   file_relpath : src/semver_checks/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""semver-checks constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

DISTRIBUTION_NAME: Final[str] = "semver-checks-cli"

try:
    SEMVER_CHECKS_VERSION: str = get_version(DISTRIBUTION_NAME)
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    SEMVER_CHECKS_VERSION = "0.0.0"

# Name under which cargo dispatches to this plugin (`cargo semver-checks`).
CARGO_SUBCOMMAND: Final[str] = "semver-checks"
BINARY_NAME: Final[str] = "cargo-semver-checks"

# Environment variables
ENV_TERM_COLOR: Final[str] = "CARGO_TERM_COLOR"
ENV_LOG_LEVEL: Final[str] = "SEMVER_CHECKS_LOG_LEVEL"
ENV_ENGINE: Final[str] = "SEMVER_CHECKS_ENGINE"

# Entry point groups for pluggable collaborators
ENGINE_ENTRYPOINT_GROUP: Final[str] = "semver_checks.engines"
QUERY_ENTRYPOINT_GROUP: Final[str] = "semver_checks.queries"

# Bundled lint catalog inside the package `semver_checks.queries`
QUERY_CATALOG_PACKAGE: Final[str] = "semver_checks.queries"
QUERY_CATALOG_NAME: Final[str] = "lints.toml"
