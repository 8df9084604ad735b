"""Locale utilities backed by Babel.

Turns candidate language codes ("de", "pt_BR") into display names for
status messages. Resolution itself never consults Babel: unknown codes are
still searched, they are only shown verbatim.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale

    from tldrkit.types import LanguageCode

__all__ = [
    "clear_locale_cache",
    "describe_languages",
    "get_babel_locale",
    "language_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def language_display_name(code: LanguageCode, *, display_locale: str = "en") -> str:
    """Return the human-readable name of a language code.

    Args:
        code: Language code or tag, e.g. "de" or "pt_BR"
        display_locale: Locale the name is rendered in (default: "en")

    Returns:
        Display name such as "German" or "Portuguese (Brazil)", or the code
        itself when Babel does not know it.

    Example:
        >>> language_display_name("de")
        'German'
        >>> language_display_name("de", display_locale="de")
        'Deutsch'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(code)
        name = locale.get_display_name(get_babel_locale(display_locale))
    except UnknownLocaleError as e:
        logger.warning("Unknown language '%s': %s", code, e)
        return code
    except ValueError as e:
        logger.warning("Invalid language code '%s': %s", code, e)
        return code
    return name or code


def describe_languages(languages: Iterable[LanguageCode], *, display_locale: str = "en") -> str:
    """Render languages for a status line, e.g. ``German (de), English (en)``."""
    return ", ".join(
        f"{language_display_name(lang, display_locale=display_locale)} ({lang})"
        for lang in languages
    )
