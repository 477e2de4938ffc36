# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click-based command-line interface for semver-checks.

The console script ``cargo-semver-checks`` is invoked by cargo as
``cargo-semver-checks semver-checks [ARGS]``. See
[`semver_checks.cli.main`][semver_checks.cli.main] for the command tree.
"""
