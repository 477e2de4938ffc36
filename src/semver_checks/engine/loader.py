# semver-checks:header:start
#
#   project      : semver-checks
#   file         : loader.py
#   file_relpath : src/semver_checks/engine/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Comparison engine discovery.

Engines register a zero-argument factory (or a ready instance) under the
``semver_checks.engines`` entry point group::

    [project.entry-points."semver_checks.engines"]
    rustdoc = "my_engine:RustdocEngine"

When several engines are installed, ``SEMVER_CHECKS_ENGINE`` selects one by
entry point name; otherwise the first one (by name) is used.
"""

from __future__ import annotations

import os
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any

from semver_checks.config.logging import get_logger
from semver_checks.constants import ENGINE_ENTRYPOINT_GROUP, ENV_ENGINE
from semver_checks.core.errors import EngineNotFoundError
from semver_checks.engine.api import CheckEngine

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint, EntryPoints

    from semver_checks.config.logging import SemverChecksLogger

logger: SemverChecksLogger = get_logger(__name__)


def _select_entry_point(candidates: list[EntryPoint], name: str | None) -> EntryPoint:
    if not candidates:
        raise EngineNotFoundError(
            "no comparison engine is installed "
            f"(expected an entry point in the {ENGINE_ENTRYPOINT_GROUP!r} group)"
        )
    if name is None:
        return candidates[0]
    for ep in candidates:
        if ep.name == name:
            return ep
    available = ", ".join(ep.name for ep in candidates)
    raise EngineNotFoundError(
        f"comparison engine {name!r} (from {ENV_ENGINE}) is not installed; available: {available}"
    )


def load_engine(name: str | None = None) -> CheckEngine:
    """Locate and instantiate the comparison engine.

    Args:
        name (str | None): Entry point name to use; defaults to ``SEMVER_CHECKS_ENGINE``
            and then to the first installed engine.

    Returns:
        CheckEngine: The engine instance.

    Raises:
        EngineNotFoundError: If no (matching) engine is installed, or the entry point
            cannot be loaded or does not provide a `CheckEngine`.
    """
    wanted = name or os.environ.get(ENV_ENGINE) or None
    eps: EntryPoints = entry_points().select(group=ENGINE_ENTRYPOINT_GROUP)
    candidates = sorted(eps, key=lambda ep: ep.name)
    ep = _select_entry_point(candidates, wanted)

    logger.debug("Loading comparison engine %s (%s)", ep.name, ep.value)
    try:
        provider: Any = ep.load()
    except Exception as exc:
        raise EngineNotFoundError(f"failed to load comparison engine {ep.name!r}: {exc}") from exc

    engine: Any = provider() if callable(provider) else provider
    if not isinstance(engine, CheckEngine):
        raise EngineNotFoundError(
            f"entry point {ep.name!r} did not provide a comparison engine: {engine!r}"
        )
    return engine
