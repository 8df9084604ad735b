"""Terminal output: color initialization and status messages.

Reporter replaces process-wide quiet/color state with an explicit object
built from OutputSettings and handed to whoever prints status messages.
Write errors on the stream (OSError) propagate to the caller.

Python 3.13+.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from tldrkit.constants import NO_COLOR_ENV_VAR
from tldrkit.enums import ColorChoice

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tldrkit.config import OutputSettings

__all__ = ["Color", "Reporter", "init_color", "paint"]


class Color:
    """ANSI SGR codes."""

    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def init_color(
    choice: ColorChoice,
    *,
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Decide whether colored output is enabled.

    ``AUTO`` disables colors when NO_COLOR is set to a non-empty value or
    when the stream (default: sys.stdout) is not a terminal.

    Args:
        choice: Requested color mode
        environ: Environment mapping (default: os.environ)
        stream: Stream whose terminal status is checked (default: sys.stdout)

    Returns:
        True if colors should be emitted.
    """
    match choice:
        case ColorChoice.ALWAYS:
            return True
        case ColorChoice.NEVER:
            return False
        case _:
            env = os.environ if environ is None else environ
            if env.get(NO_COLOR_ENV_VAR):
                return False
            out = sys.stdout if stream is None else stream
            return out.isatty()


def paint(text: str, color: str = "", *, bold: bool = False, enabled: bool = True) -> str:
    """Wrap text in ANSI codes, or return it unchanged when colors are disabled.

    Example:
        >>> paint("warning:", Color.YELLOW, bold=True, enabled=False)
        'warning:'
    """
    if not enabled or (not color and not bold):
        return text
    prefix = color + (Color.BOLD if bold else "")
    return f"{prefix}{text}{Color.RESET}"


@dataclass(slots=True)
class Reporter:
    """Prints ``warning:`` and ``info:`` messages unless quiet.

    Attributes:
        quiet: Suppress all messages
        color: Colorize the message prefixes
        stream: Destination (default: sys.stderr at construction time)

    Example:
        >>> import io
        >>> buf = io.StringIO()
        >>> Reporter(stream=buf).info("cache updated")
        >>> buf.getvalue()
        'info: cache updated\\n'
    """

    quiet: bool = False
    color: bool = False
    stream: TextIO = field(default_factory=lambda: sys.stderr)

    @classmethod
    def from_settings(
        cls,
        settings: OutputSettings,
        *,
        environ: Mapping[str, str] | None = None,
        stream: TextIO | None = None,
    ) -> Reporter:
        """Create a Reporter from output settings.

        Color support is decided by init_color() against sys.stdout, the
        stream page content goes to, as status messages accompany it.
        """
        return cls(
            quiet=settings.quiet,
            color=init_color(settings.color, environ=environ),
            stream=sys.stderr if stream is None else stream,
        )

    def _prefix(self, label: str, color: str) -> str:
        return paint(f"{label}:", color, bold=True, enabled=self.color) + " "

    def warn(self, message: str) -> None:
        """Print a warning with a trailing newline."""
        if not self.quiet:
            self.stream.write(f"{self._prefix('warning', Color.YELLOW)}{message}\n")

    def info(self, message: str) -> None:
        """Print a status message with a trailing newline."""
        if not self.quiet:
            self.stream.write(f"{self._prefix('info', Color.CYAN)}{message}\n")

    def info_start(self, message: str) -> None:
        """Print a status message without a trailing newline."""
        if not self.quiet:
            self.stream.write(f"{self._prefix('info', Color.CYAN)}{message}")
            self.stream.flush()

    def info_end(self, message: str = "") -> None:
        """End a status message started with info_start()."""
        if not self.quiet:
            self.stream.write(f"{message}\n")
