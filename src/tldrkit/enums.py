"""Enumerations for tldrkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ColorChoice(StrEnum):
    """When to emit ANSI colors on the terminal.

    StrEnum provides automatic string conversion: str(ColorChoice.AUTO) == "auto"
    """

    AUTO = "auto"
    """Color only when writing to a terminal and NO_COLOR is not set."""

    ALWAYS = "always"
    """Always color, even when output is redirected."""

    NEVER = "never"
    """Never color."""


__all__ = [
    "ColorChoice",
]
