"""Styling mode for rendered plugin errors."""

import os
from enum import IntEnum

STYLE_ENV_VAR = "PLUGIN_ERROR_STYLE"


class StyleMode(IntEnum):
    """
    Whether the signature line of a rendered error carries ANSI styling.

    - AUTO = 0: Style only when the output looks like a color terminal
    - ALWAYS = 1: Always emit ANSI escape sequences
    - NEVER = 2: Plain text, safe for log files and other non-terminal sinks
    """

    AUTO = 0
    ALWAYS = 1
    NEVER = 2

    @classmethod
    def from_code(cls, code: int) -> "StyleMode":
        """
        Create a StyleMode from its numeric code.

        Args:
            code: The numeric code (0-2).

        Returns:
            The corresponding StyleMode.

        Raises:
            ValueError: If code is not in range 0-2.
        """
        if 0 <= code <= 2:
            return cls(code)
        raise ValueError(f"Invalid style mode code: {code}")

    @classmethod
    def from_string(cls, mode: str) -> "StyleMode":
        """
        Create a StyleMode from a string name.

        Args:
            mode: The mode name (case-insensitive).

        Returns:
            The corresponding StyleMode.

        Raises:
            ValueError: If mode string is not recognized.
        """
        mode_upper = mode.strip().upper()
        try:
            return cls[mode_upper]
        except KeyError:
            valid = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Invalid style mode: {mode}. Valid values: {valid}") from None

    @classmethod
    def from_env(cls) -> "StyleMode":
        """
        Read the style mode from the PLUGIN_ERROR_STYLE environment variable.

        Returns:
            The configured StyleMode, or AUTO when the variable is unset or empty.

        Raises:
            ValueError: If the variable holds an unrecognized value.
        """
        value = os.environ.get(STYLE_ENV_VAR, "")
        if not value.strip():
            return cls.AUTO
        return cls.from_string(value)

    def to_string(self) -> str:
        """Return the lowercase string representation."""
        return self.name.lower()
