"""Type aliases for the language-resolution domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "CandidateList",
    "LanguageCode",
    "RawLocaleValue",
]

LanguageCode: TypeAlias = str
"""Language code ("it") or language tag ("en_US") as searched by the client."""

CandidateList: TypeAlias = list[LanguageCode]
"""Languages in search priority order. Duplicates are meaningful; ends with "en"."""

RawLocaleValue: TypeAlias = str | None
"""Verbatim value of a locale environment variable, None when unset."""
