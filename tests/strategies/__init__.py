"""Hypothesis strategies for tldrkit property-based testing.

- languages: LANG/LANGUAGE values, language codes, tags and malformed entries

Usage:
    from tests.strategies.languages import language_lists, language_tokens
"""

from .languages import (
    language_codes,
    language_lists,
    language_tags,
    language_tokens,
    malformed_tokens,
)

__all__ = [
    "language_codes",
    "language_lists",
    "language_tags",
    "language_tokens",
    "malformed_tokens",
]
