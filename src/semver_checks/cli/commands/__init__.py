# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Implementations of the operating modes and the `check-release` subcommand."""
