"""Client configuration consumed by tldrkit.

Only the parts of the client configuration that this package reads are
modelled here: the cache language list and terminal output settings.
Loading and saving the configuration file belongs to the client.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tldrkit.enums import ColorChoice
from tldrkit.types import LanguageCode

__all__ = ["CacheSettings", "Config", "OutputSettings"]


@dataclass(slots=True)
class CacheSettings:
    """Cache section of the client configuration.

    Attributes:
        languages: Languages to download and search, in priority order.
            Empty means "derive from LANG/LANGUAGE". Mutable: language
            resolution appends the English fallback in place.
    """

    languages: list[LanguageCode] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate language entries.

        Raises:
            TypeError: If any language is not a string.
        """
        for lang in self.languages:
            if not isinstance(lang, str):
                msg = f"cache languages must be strings, got {type(lang).__name__}"
                raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class OutputSettings:
    """Immutable terminal output settings.

    Replaces a process-wide quiet flag: whoever emits status messages
    receives these settings explicitly.

    Attributes:
        quiet: Suppress info and warning messages (default: False).
        color: When to colorize output (default: ColorChoice.AUTO).
            Plain strings ("auto", "always", "never") are accepted.

    Example:
        >>> OutputSettings(color="never").color
        <ColorChoice.NEVER: 'never'>
    """

    quiet: bool = False
    color: ColorChoice = ColorChoice.AUTO

    def __post_init__(self) -> None:
        """Coerce and validate the color choice.

        Raises:
            ValueError: If color is not a known ColorChoice value.
        """
        if not isinstance(self.color, ColorChoice):
            try:
                choice = ColorChoice(self.color)
            except ValueError:
                valid = ", ".join(c.value for c in ColorChoice)
                msg = f"color must be one of {valid}, got {self.color!r}"
                raise ValueError(msg) from None
            object.__setattr__(self, "color", choice)


@dataclass(slots=True)
class Config:
    """Client configuration object.

    Attributes:
        cache: Cache settings, owner of the configured language list.
        output: Terminal output settings.
    """

    cache: CacheSettings = field(default_factory=CacheSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
