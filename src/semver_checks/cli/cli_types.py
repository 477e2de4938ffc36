# semver-checks:header:start
#
#   project      : semver-checks
#   file         : cli_types.py
#   file_relpath : src/semver_checks/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Shared CLI parameter types and argument conversion helpers.

This module holds the custom Click parameter types used by the option
decorators, and the conversion of Click's ``**params`` mapping into the
immutable [`CheckReleaseArgs`][semver_checks.core.args.CheckReleaseArgs]
snapshot consumed by the resolvers.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterable,
    Mapping,
    NoReturn,
    Protocol,
    TypeVar,
    cast,
)

import click

from semver_checks.core.args import CheckReleaseArgs
from semver_checks.core.keys import ArgKey

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices in help output, e.g. ``[major|minor|patch]``."""
        return "[" + "|".join(self.choices) + "]"

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list["ClickCompletionItem"]:
        """Tab completion for Click.

        Bash: `eval "$(_CARGO_SEMVER_CHECKS_COMPLETE=bash_source cargo-semver-checks)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import (
            CompletionItem as RuntimeCompletionItem,
        )  # Click 8.x

        prefix = (incomplete or "").lower()
        items: list["ClickCompletionItem"] = []
        for e in cast("Iterable[E]", self.enum_cls):
            val = str(getattr(e, "value", e))
            if val.lower().startswith(prefix):
                items.append(RuntimeCompletionItem(val))
        return items

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


def _optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    return Path(value)


def check_release_args_from_params(params: Mapping[str, Any]) -> CheckReleaseArgs:
    """Build a `CheckReleaseArgs` snapshot from Click's parsed parameters.

    Missing keys fall back to the dataclass defaults, so the same helper serves the
    top-level group and the `check-release` subcommand.

    Args:
        params (Mapping[str, Any]): Click's ``**params`` keyed by
            [`ArgKey`][semver_checks.core.keys.ArgKey] destinations.

    Returns:
        CheckReleaseArgs: The immutable argument snapshot.
    """
    return CheckReleaseArgs(
        manifest_path=_optional_path(params.get(ArgKey.MANIFEST_PATH)),
        workspace=bool(params.get(ArgKey.WORKSPACE, False)),
        all_packages=bool(params.get(ArgKey.ALL, False)),
        package=tuple(params.get(ArgKey.PACKAGE) or ()),
        exclude=tuple(params.get(ArgKey.EXCLUDE) or ()),
        current_rustdoc=_optional_path(params.get(ArgKey.CURRENT_RUSTDOC)),
        baseline_version=params.get(ArgKey.BASELINE_VERSION),
        baseline_rev=params.get(ArgKey.BASELINE_REV),
        baseline_root=_optional_path(params.get(ArgKey.BASELINE_ROOT)),
        baseline_rustdoc=_optional_path(params.get(ArgKey.BASELINE_RUSTDOC)),
        release_type=params.get(ArgKey.RELEASE_TYPE),
        default_features=bool(params.get(ArgKey.DEFAULT_FEATURES, False)),
        only_explicit_features=bool(params.get(ArgKey.ONLY_EXPLICIT_FEATURES, False)),
        all_features=bool(params.get(ArgKey.ALL_FEATURES, False)),
        features=tuple(params.get(ArgKey.FEATURES) or ()),
        baseline_features=tuple(params.get(ArgKey.BASELINE_FEATURES) or ()),
        current_features=tuple(params.get(ArgKey.CURRENT_FEATURES) or ()),
        build_target=params.get(ArgKey.BUILD_TARGET),
        verbose=int(params.get(ArgKey.VERBOSE) or 0),
        quiet=int(params.get(ArgKey.QUIET) or 0),
    )
