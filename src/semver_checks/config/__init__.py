# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Runtime configuration helpers (internal logging)."""
