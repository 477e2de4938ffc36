# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click-independent core: raw arguments, resolvers, and the resolved check request.

Nothing in this package imports Click; the CLI layer builds the raw argument
dataclasses and hands them to the pure resolvers defined here.
"""
