# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click-independent helpers shared by CLI front ends (color policy, console protocol)."""
