# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""semver-checks: resolve `cargo semver-checks` invocations into check requests."""

from semver_checks.constants import SEMVER_CHECKS_VERSION

__version__: str = SEMVER_CHECKS_VERSION

__all__ = ["__version__"]
