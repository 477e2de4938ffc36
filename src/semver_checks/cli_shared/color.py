# semver-checks:header:start
#
#   project      : semver-checks
#   file         : color.py
#   file_relpath : src/semver_checks/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# semver-checks:header:end

"""Click-independent color helpers.

This module provides:

- The `ColorChoice` enum (``--color=always|auto|never``).
- `resolve_color_choice()`: the effective choice from the ``--color`` flag and
  the ``CARGO_TERM_COLOR`` environment variable, matching cargo's behavior.
- `color_enabled()`: whether ANSI styles are emitted for a given choice.

The choice is resolved once at startup and passed explicitly to the output layer
(the Click context object and the console); it is never stored as module state.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from semver_checks.config.logging import get_logger
from semver_checks.constants import ENV_TERM_COLOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from semver_checks.config.logging import SemverChecksLogger


logger: SemverChecksLogger = get_logger(__name__)


class ColorChoice(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        ALWAYS: Force-enable color regardless of TTY status.
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        NEVER: Disable color entirely.
    """

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def resolve_color_choice(
    flag: ColorChoice | None,
    env_value: str | None,
) -> ColorChoice:
    """Resolve the effective color choice.

    Decision precedence:
        1. **CLI flag**: an explicit ``--color`` value wins outright.
        2. **Environment**: ``CARGO_TERM_COLOR`` set to exactly ``always`` or
           ``never``.
        3. **Auto**: anything else, including ``auto``, an unset variable or an
           unrecognized value.

    Args:
        flag (ColorChoice | None): Parsed ``--color`` value; ``None`` when not given.
        env_value (str | None): Raw value of ``CARGO_TERM_COLOR``; ``None`` when unset.

    Returns:
        ColorChoice: The effective choice.

    Examples:
        >>> resolve_color_choice(ColorChoice.NEVER, "always")
        <ColorChoice.NEVER: 'never'>
        >>> resolve_color_choice(None, "never")
        <ColorChoice.NEVER: 'never'>
        >>> resolve_color_choice(None, "garbage")
        <ColorChoice.AUTO: 'auto'>
    """
    if flag is not None:
        return flag
    if env_value == "always":
        return ColorChoice.ALWAYS
    if env_value == "never":
        return ColorChoice.NEVER
    if env_value not in (None, "auto"):
        logger.debug("Ignoring unrecognized %s=%r", ENV_TERM_COLOR, env_value)
    return ColorChoice.AUTO


def resolve_color_choice_from_env(
    flag: ColorChoice | None,
    environ: Mapping[str, str] | None = None,
) -> ColorChoice:
    """Resolve the color choice, reading ``CARGO_TERM_COLOR`` from ``environ``.

    Args:
        flag (ColorChoice | None): Parsed ``--color`` value.
        environ (Mapping[str, str] | None): Environment mapping; defaults to ``os.environ``.

    Returns:
        ColorChoice: The effective choice.
    """
    env = os.environ if environ is None else environ
    return resolve_color_choice(flag, env.get(ENV_TERM_COLOR))


def color_enabled(
    choice: ColorChoice,
    *,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether ANSI color output should be emitted.

    Decision precedence:
        1. ``ALWAYS`` → True; ``NEVER`` → False.
        2. ``AUTO``: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. ``AUTO`` otherwise: whether stdout is a TTY.

    Args:
        choice (ColorChoice): Effective color choice.
        stdout_isatty (bool | None): Optional override for TTY detection. When
            ``None``, ``sys.stdout.isatty()`` is used (``False`` on error).

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if choice == ColorChoice.ALWAYS:
        return True
    if choice == ColorChoice.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
