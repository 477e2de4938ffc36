# semver-checks:header:start
#
#   project      : semver-checks
#   file         : args.py
#   file_relpath : src/semver_checks/core/args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Raw (parsed but unresolved) command-line arguments.

The Click layer builds these immutable snapshots once per invocation after it has
validated flag syntax and option conflicts. The resolvers in
[`semver_checks.core`][semver_checks.core] never see Click objects, only these
dataclasses.

Design:
    * Every field mirrors exactly one command-line option; no defaults are derived here.
    * Multi-valued options are stored as tuples, preserving the order given by the user.
    * Use `dataclasses.replace()` to derive variants in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from semver_checks.cli_shared.color import ColorChoice
    from semver_checks.core.request import ReleaseType


@dataclass(frozen=True, slots=True)
class CheckReleaseArgs:
    """Options of the `check-release` option group.

    Attributes:
        manifest_path (Path | None): ``--manifest-path``; a ``Cargo.toml`` file or its directory.
        workspace (bool): ``--workspace``.
        all_packages (bool): ``--all`` (deprecated spelling of ``--workspace``).
        package (tuple[str, ...]): ``--package`` names.
        exclude (tuple[str, ...]): ``--exclude`` names.
        current_rustdoc (Path | None): ``--current-rustdoc``.
        baseline_version (str | None): ``--baseline-version``.
        baseline_rev (str | None): ``--baseline-rev``.
        baseline_root (Path | None): ``--baseline-root``.
        baseline_rustdoc (Path | None): ``--baseline-rustdoc``.
        release_type (ReleaseType | None): ``--release-type``.
        default_features (bool): ``--default-features``.
        only_explicit_features (bool): ``--only-explicit-features``.
        all_features (bool): ``--all-features``.
        features (tuple[str, ...]): ``--features`` (both current and baseline).
        baseline_features (tuple[str, ...]): ``--baseline-features``.
        current_features (tuple[str, ...]): ``--current-features``.
        build_target (str | None): ``--target``.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """

    manifest_path: Path | None = None
    workspace: bool = False
    all_packages: bool = False
    package: tuple[str, ...] = field(default_factory=tuple)
    exclude: tuple[str, ...] = field(default_factory=tuple)
    current_rustdoc: Path | None = None

    baseline_version: str | None = None
    baseline_rev: str | None = None
    baseline_root: Path | None = None
    baseline_rustdoc: Path | None = None

    release_type: ReleaseType | None = None

    default_features: bool = False
    only_explicit_features: bool = False
    all_features: bool = False
    features: tuple[str, ...] = field(default_factory=tuple)
    baseline_features: tuple[str, ...] = field(default_factory=tuple)
    current_features: tuple[str, ...] = field(default_factory=tuple)

    build_target: str | None = None

    verbose: int = 0
    quiet: int = 0


@dataclass(frozen=True, slots=True)
class SemverChecksArgs:
    """All arguments of one `cargo semver-checks` invocation.

    Attributes:
        bugreport (bool): ``--bugreport``.
        list_queries (bool): ``--list``.
        explain (str | None): ``--explain <ID>``.
        check_release (CheckReleaseArgs): Check-release options, taken from the
            subcommand when one was given, else from the top level.
        color_choice (ColorChoice | None): ``--color``; ``None`` when not given.
    """

    bugreport: bool = False
    list_queries: bool = False
    explain: str | None = None
    check_release: CheckReleaseArgs = field(default_factory=CheckReleaseArgs)
    color_choice: ColorChoice | None = None
