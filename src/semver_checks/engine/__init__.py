# semver-checks:header:start
#
#   project      : semver-checks
#   file         : __init__.py
#   file_relpath : src/semver_checks/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Boundary to the external comparison engine.

The engine itself (rustdoc generation, baseline fetching, lint execution) is
not part of this package. This subpackage defines the surface the CLI relies on
and how an implementation is located:

- [`CheckEngine`][semver_checks.engine.api.CheckEngine] and
  [`Report`][semver_checks.engine.api.Report]:
  the ``check_release`` / ``success`` protocol.
- [`GlobalConfig`][semver_checks.engine.config.GlobalConfig]: output settings shared
  with the engine (log level, console).
- [`load_engine`][semver_checks.engine.loader.load_engine]: entry-point discovery.
"""

from __future__ import annotations

from semver_checks.engine.api import CheckEngine, Report
from semver_checks.engine.config import GlobalConfig
from semver_checks.engine.loader import load_engine

__all__ = ["CheckEngine", "GlobalConfig", "Report", "load_engine"]
