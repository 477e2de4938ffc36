# semver-checks:header:start
#
#   project      : semver-checks
#   file         : request.py
#   file_relpath : src/semver_checks/core/request.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""The fully resolved check request handed to the comparison engine.

Every mutually exclusive option group resolves into a tagged union of small,
frozen dataclasses. Consumers dispatch on them with ``match`` statements and
``assert_never`` so that adding a variant is caught by the type checker at every
dispatch site.

Variants:
    * Rustdoc sources: `RustdocPath`, `ProjectRoot`, `RegistryVersion`, `GitRevision`.
    * Package selection: `Workspace`, `ExplicitPackages`, `DefaultMembers`, `Unspecified`.
    * Feature policy: `AllFeatures`, `DefaultPlusExtra`, `OnlyExplicit`, `Heuristic`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias, assert_never

if TYPE_CHECKING:
    from pathlib import Path


class ReleaseType(str, Enum):
    """Release type override (``--release-type``)."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


# --- Rustdoc sources -------------------------------------------------------
@dataclass(frozen=True, slots=True)
class RustdocPath:
    """A pre-generated rustdoc JSON document."""

    path: Path


@dataclass(frozen=True, slots=True)
class ProjectRoot:
    """A crate or workspace directory; rustdoc is generated from its sources."""

    root: Path


@dataclass(frozen=True, slots=True)
class RegistryVersion:
    """A published version looked up in the crate registry."""

    version: str


@dataclass(frozen=True, slots=True)
class GitRevision:
    """A git revision of the repository located at ``root``."""

    root: Path
    rev: str


CurrentSource: TypeAlias = RustdocPath | ProjectRoot
BaselineSource: TypeAlias = RegistryVersion | GitRevision | RustdocPath | ProjectRoot


# --- Package selection ----------------------------------------------------
@dataclass(frozen=True, slots=True)
class Workspace:
    """All workspace members (``--workspace``/``--all``), minus ``excluded``."""

    excluded: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class ExplicitPackages:
    """Exactly the packages named with ``--package``."""

    packages: frozenset[str]


@dataclass(frozen=True, slots=True)
class DefaultMembers:
    """The default workspace members minus ``excluded`` (``--exclude`` alone)."""

    excluded: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class Unspecified:
    """No selection given: the engine picks the workspace or the single default package."""


PackageSelection: TypeAlias = Workspace | ExplicitPackages | DefaultMembers | Unspecified


# --- Feature policy -------------------------------------------------------
@dataclass(frozen=True, slots=True)
class AllFeatures:
    """Every feature, including ones the heuristic would leave out."""


@dataclass(frozen=True, slots=True)
class DefaultPlusExtra:
    """The crate's default features plus the extra ones."""

    current: tuple[str, ...] = ()
    baseline: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class OnlyExplicit:
    """Only the extra features; nothing else is enabled."""

    current: tuple[str, ...] = ()
    baseline: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Heuristic:
    """All features except experimental-looking ones, plus the extra ones."""

    current: tuple[str, ...] = ()
    baseline: tuple[str, ...] = ()


FeaturePolicy: TypeAlias = AllFeatures | DefaultPlusExtra | OnlyExplicit | Heuristic


# --- The request ----------------------------------------------------------
@dataclass(frozen=True, slots=True)
class CheckRequest:
    """Everything the comparison engine needs to know about one check.

    Attributes:
        current (CurrentSource): Where the current crate description comes from.
        baseline (BaselineSource | None): Custom baseline; ``None`` means the
            engine's own default (the latest registry release).
        packages (PackageSelection): Which workspace packages are checked.
        features (FeaturePolicy): Which features are enabled on each side.
        release_type (ReleaseType | None): Release type override.
        build_target (str | None): Target triple to build for.
    """

    current: CurrentSource
    baseline: BaselineSource | None = None
    packages: PackageSelection = field(default_factory=Unspecified)
    features: FeaturePolicy = field(default_factory=Heuristic)
    release_type: ReleaseType | None = None
    build_target: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON/TOML-friendly description of the request.

        ``None`` values are omitted; paths are rendered as strings and sets are sorted.
        """
        out: dict[str, Any] = {
            "current": _source_to_dict(self.current),
            "packages": _packages_to_dict(self.packages),
            "features": _features_to_dict(self.features),
        }
        if self.baseline is not None:
            out["baseline"] = _source_to_dict(self.baseline)
        if self.release_type is not None:
            out["release_type"] = self.release_type.value
        if self.build_target is not None:
            out["build_target"] = self.build_target
        return out


def _source_to_dict(source: BaselineSource) -> dict[str, str]:
    match source:
        case RustdocPath(path=path):
            return {"kind": "rustdoc", "path": str(path)}
        case ProjectRoot(root=root):
            return {"kind": "root", "root": str(root)}
        case RegistryVersion(version=version):
            return {"kind": "registry", "version": version}
        case GitRevision(root=root, rev=rev):
            return {"kind": "git-revision", "root": str(root), "rev": rev}
        case _:
            assert_never(source)


def _packages_to_dict(selection: PackageSelection) -> dict[str, Any]:
    match selection:
        case Workspace(excluded=excluded):
            return {"scope": "workspace", "excluded": sorted(excluded)}
        case ExplicitPackages(packages=packages):
            return {"scope": "packages", "packages": sorted(packages)}
        case DefaultMembers(excluded=excluded):
            return {"scope": "default-members", "excluded": sorted(excluded)}
        case Unspecified():
            return {"scope": "unspecified"}
        case _:
            assert_never(selection)


def _features_to_dict(policy: FeaturePolicy) -> dict[str, Any]:
    match policy:
        case AllFeatures():
            return {"policy": "all"}
        case DefaultPlusExtra(current=current, baseline=baseline):
            name = "default"
        case OnlyExplicit(current=current, baseline=baseline):
            name = "only-explicit"
        case Heuristic(current=current, baseline=baseline):
            name = "heuristic"
        case _:
            assert_never(policy)
    return {"policy": name, "current": list(current), "baseline": list(baseline)}
