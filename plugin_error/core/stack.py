"""Stack text capture and sanitization."""

from __future__ import annotations

import logging
import os
import traceback

logger = logging.getLogger(__name__)

# Lines naming frames that belong to the interpreter's own machinery
INTERNAL_FRAME_MARKERS: tuple[str, ...] = ("<frozen ", "importlib._bootstrap")

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def capture_stack() -> str:
    """
    Capture the current call stack as text.

    Frames inside the plugin_error package are left out so the innermost
    frame is the code that constructed the error.

    Returns:
        The formatted stack, most recent call last.
    """
    frames = [
        frame
        for frame in traceback.extract_stack()
        if not os.path.abspath(frame.filename).startswith(_PACKAGE_DIR + os.sep)
    ]
    return "".join(traceback.format_list(frames)).rstrip("\n")


def exception_stack(error: BaseException) -> str | None:
    """
    Format the traceback of a raised exception.

    Args:
        error: The exception.

    Returns:
        The formatted traceback, or None if the exception was never raised.
    """
    if error.__traceback__ is None:
        return None
    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return "".join(lines).rstrip("\n")


def sanitize_stack(stack: str) -> str:
    """
    Remove lines naming internal interpreter frames.

    Running it again on its own output returns the same text.

    Args:
        stack: The stack text.

    Returns:
        The stack without internal frame lines.
    """
    lines = stack.split("\n")
    kept = [line for line in lines if not any(marker in line for marker in INTERNAL_FRAME_MARKERS)]
    if len(kept) != len(lines):
        logger.debug("Dropped %d internal frame lines from stack", len(lines) - len(kept))
    return "\n".join(kept)
