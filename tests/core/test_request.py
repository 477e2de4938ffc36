# semver-checks:header:start
#
#   project      : semver-checks
#   file         : test_request.py
#   file_relpath : tests/core/test_request.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""`CheckRequest.to_dict()` and operating-mode selection."""

from __future__ import annotations

from pathlib import Path

from semver_checks.core.args import CheckReleaseArgs, SemverChecksArgs
from semver_checks.core.modes import (
    BugReport,
    CheckRelease,
    ExplainQuery,
    ListQueries,
    select_mode,
)
from semver_checks.core.request import (
    CheckRequest,
    DefaultMembers,
    GitRevision,
    OnlyExplicit,
    ProjectRoot,
    ReleaseType,
    RustdocPath,
)
from tests.conftest import mark_resolver, parametrize

CWD = Path("/work/project")


@mark_resolver
def test_to_dict_minimal() -> None:
    """Optional fields are omitted."""
    request = CheckRequest(current=ProjectRoot(Path("/crate")))

    assert request.to_dict() == {
        "current": {"kind": "root", "root": str(Path("/crate"))},
        "packages": {"scope": "unspecified"},
        "features": {"policy": "heuristic", "current": [], "baseline": []},
    }


@mark_resolver
def test_to_dict_full() -> None:
    """Every field is rendered with sorted sets and string paths."""
    request = CheckRequest(
        current=RustdocPath(Path("new.json")),
        baseline=GitRevision(root=Path("/repo"), rev="v1"),
        packages=DefaultMembers(frozenset({"b", "a"})),
        features=OnlyExplicit(current=("x",), baseline=()),
        release_type=ReleaseType.PATCH,
        build_target="wasm32-unknown-unknown",
    )

    assert request.to_dict() == {
        "current": {"kind": "rustdoc", "path": "new.json"},
        "baseline": {"kind": "git-revision", "root": str(Path("/repo")), "rev": "v1"},
        "packages": {"scope": "default-members", "excluded": ["a", "b"]},
        "features": {"policy": "only-explicit", "current": ["x"], "baseline": []},
        "release_type": "patch",
        "build_target": "wasm32-unknown-unknown",
    }


@mark_resolver
@parametrize(
    "args, expected",
    [
        (SemverChecksArgs(bugreport=True), BugReport()),
        (SemverChecksArgs(list_queries=True), ListQueries()),
        (SemverChecksArgs(explain="enum_missing"), ExplainQuery("enum_missing")),
        (SemverChecksArgs(bugreport=True, list_queries=True), BugReport()),
        (SemverChecksArgs(list_queries=True, explain="x"), ListQueries()),
    ],
)
def test_select_mode_priority(args: SemverChecksArgs, expected: object) -> None:
    """Bug report beats list, which beats explain."""
    assert select_mode(args, cwd=CWD) == expected


@mark_resolver
def test_select_mode_defaults_to_check_release() -> None:
    """Without a mode flag the check request is resolved."""
    args = SemverChecksArgs(check_release=CheckReleaseArgs(baseline_version="2.0.0"))

    mode = select_mode(args, cwd=CWD)

    assert isinstance(mode, CheckRelease)
    assert mode.request.current == ProjectRoot(CWD)
    assert mode.request.to_dict()["baseline"] == {"kind": "registry", "version": "2.0.0"}
