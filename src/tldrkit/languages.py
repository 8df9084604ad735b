"""Language preference resolution.

Derives the ordered list of languages the client searches for pages,
following the tldr client specification:
https://github.com/tldr-pages/tldr/blob/main/CLIENT-SPECIFICATION.md#language

Pipeline:
    read_locale_env -> languages_from_values -> get_languages

The resulting list is a priority order, not a set. Duplicates are kept:
the cache update pass wants a sorted set (dedup_sorted) while page
search wants priority order (dedup_nosort), so deduplication is left to
each consumer.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from tldrkit.constants import (
    FALLBACK_LANGUAGE,
    LANG_ENV_VAR,
    LANGUAGE_CODE_LENGTH,
    LANGUAGE_ENV_VAR,
    LANGUAGE_LIST_SEPARATOR,
    LANGUAGE_TAG_LENGTH,
    LANGUAGE_TAG_SEPARATOR,
    PAGES_DIR_PREFIX,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tldrkit.config import Config
    from tldrkit.types import CandidateList, LanguageCode, RawLocaleValue

__all__ = [
    "get_languages",
    "get_languages_from_env",
    "languages_from_values",
    "languages_to_langdirs",
    "read_locale_env",
]

logger = logging.getLogger(__name__)


def read_locale_env(
    environ: Mapping[str, str] | None = None,
) -> tuple[RawLocaleValue, RawLocaleValue]:
    """Read the primary locale and the language override list.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        (LANG, LANGUAGE) values, each None when unset.
    """
    env = os.environ if environ is None else environ
    return env.get(LANG_ENV_VAR), env.get(LANGUAGE_ENV_VAR)


def languages_from_values(lang: RawLocaleValue, language: RawLocaleValue) -> CandidateList:
    """Extract candidate languages from raw LANG and LANGUAGE values.

    Without LANG, only English is returned: LANGUAGE is ignored entirely.
    Otherwise every LANGUAGE entry is examined in order, followed by LANG:

    - ``ll_CC...`` (5+ characters, underscore at index 2): ``ll_CC`` then ``ll``
    - ``ll`` (exactly 2 characters): unchanged
    - anything else (including empty entries): dropped

    English is always appended last. Duplicates are preserved.

    Args:
        lang: Value of LANG, or None if unset
        language: Value of LANGUAGE, or None if unset

    Returns:
        Candidate languages in priority order, never empty.

    Example:
        >>> languages_from_values("en_US.UTF-8", "de_DE.UTF-8:pl:en")
        ['de_DE', 'de', 'pl', 'en', 'en_US', 'en', 'en']
        >>> languages_from_values(None, "it:cz")
        ['en']
    """
    if lang is None:
        return [FALLBACK_LANGUAGE]

    tokens = (language or "").split(LANGUAGE_LIST_SEPARATOR)
    tokens.append(lang)

    result: CandidateList = []
    for token in tokens:
        if len(token) >= LANGUAGE_TAG_LENGTH and token[2] == LANGUAGE_TAG_SEPARATOR:
            result.append(token[:LANGUAGE_TAG_LENGTH])
            result.append(token[:LANGUAGE_CODE_LENGTH])
        elif len(token) == LANGUAGE_CODE_LENGTH:
            result.append(token)

    result.append(FALLBACK_LANGUAGE)
    return result


def get_languages_from_env(environ: Mapping[str, str] | None = None) -> CandidateList:
    """Get languages from LANG and LANGUAGE.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Candidate languages in priority order, ending with "en".
    """
    lang, language = read_locale_env(environ)
    languages = languages_from_values(lang, language)
    logger.debug("Languages from environment (LANG=%r, LANGUAGE=%r): %s", lang, language, languages)
    return languages


def get_languages(config: Config, environ: Mapping[str, str] | None = None) -> CandidateList:
    """Return the configured languages plus English, or derive them from the environment.

    When ``config.cache.languages`` is non-empty, "en" is appended to it in
    place (English pages should always be downloaded and searched) and a
    copy of the extended list is returned. The configuration is left
    untouched when it has no languages.

    Args:
        config: Client configuration
        environ: Environment mapping used when no languages are configured
            (default: os.environ)

    Returns:
        Candidate languages in priority order. Not deduplicated.
    """
    configured = config.cache.languages
    if not configured:
        return get_languages_from_env(environ)

    configured.append(FALLBACK_LANGUAGE)
    logger.debug("Languages from config: %s", configured)
    return list(configured)


def languages_to_langdirs(languages: Iterable[LanguageCode]) -> list[str]:
    """Prepend ``pages.`` to each language.

    Example:
        >>> languages_to_langdirs(["de", "en"])
        ['pages.de', 'pages.en']
    """
    return [f"{PAGES_DIR_PREFIX}{lang}" for lang in languages]
