# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __main__.py
#   file_relpath : src/semver_checks/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Allow running the CLI with ``python -m semver_checks``."""

from semver_checks.cli.main import main

if __name__ == "__main__":
    main()
