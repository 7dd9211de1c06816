"""ANSI highlighting for the signature line of a rendered error."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from plugin_error.core.style_mode import StyleMode

# SGR escape sequences
_RESET = "\x1b[39m"
_RED = "\x1b[31m"
_CYAN = "\x1b[36m"

_default_style: StyleMode | None = None


def red(text: object, enabled: bool = True) -> str:
    """Wrap text in the red foreground color."""
    return _paint(_RED, text, enabled)


def cyan(text: object, enabled: bool = True) -> str:
    """Wrap text in the cyan foreground color."""
    return _paint(_CYAN, text, enabled)


def _paint(code: str, text: object, enabled: bool) -> str:
    text = str(text)
    if not enabled or not text:
        return text
    return f"{code}{text}{_RESET}"


def get_default_style() -> StyleMode:
    """
    Return the process-wide style mode.

    The first call reads PLUGIN_ERROR_STYLE unless set_default_style() ran before.

    Raises:
        ValueError: If PLUGIN_ERROR_STYLE holds an unrecognized value.
    """
    global _default_style
    if _default_style is None:
        _default_style = StyleMode.from_env()
    return _default_style


def set_default_style(mode: StyleMode | str | int | None) -> None:
    """
    Override the process-wide style mode.

    Args:
        mode: A StyleMode, its name or code, or None to re-read the environment
            on next use.

    Raises:
        ValueError: If mode is not a recognized name or code.
    """
    global _default_style
    _default_style = None if mode is None else _coerce(mode)


def _coerce(mode: StyleMode | str | int) -> StyleMode:
    if isinstance(mode, StyleMode):
        return mode
    if isinstance(mode, str):
        return StyleMode.from_string(mode)
    return StyleMode.from_code(mode)


def should_style(mode: StyleMode | str | int | None = None, stream: TextIO | None = None) -> bool:
    """
    Decide whether rendered output carries ANSI styling.

    Args:
        mode: Explicit mode, name or code; the process default is used when None.
        stream: Stream checked for a TTY in AUTO mode (default: sys.stderr).

    Returns:
        True if escape sequences should be emitted.
    """
    mode = get_default_style() if mode is None else _coerce(mode)

    if mode == StyleMode.ALWAYS:
        return True
    if mode == StyleMode.NEVER:
        return False

    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True

    stream = stream if stream is not None else sys.stderr
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty()) if isatty is not None else False
    except ValueError:
        # closed stream
        return False
