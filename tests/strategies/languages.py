"""Hypothesis strategies for language resolution property-based testing.

Provides strategies for raw LANG/LANGUAGE values:
- language_codes: two-letter codes ("de")
- language_tags: POSIX locale strings ("de_DE", "de_DE.UTF-8", "sr_RS@latin")
- malformed_tokens: entries the extractor must drop
- language_tokens: any of the above
- language_lists: colon-joined LANGUAGE values

Event-Emitting Strategies (HypoFuzz-Optimized):
- language_tokens: Emits lang_token_kind=code|tag|malformed
- language_lists: Emits lang_list_size=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_CODE_POOL = ["en", "de", "fr", "it", "pl", "cz", "pt", "es", "ja", "zh", "sv", "nl"]
_TERRITORY_POOL = ["US", "GB", "DE", "AT", "FR", "BR", "PT", "CN", "TW", "SE"]
_SUFFIX_POOL = ["", ".UTF-8", ".utf8", ".ISO-8859-1", "@euro", "@latin"]


def language_codes() -> st.SearchStrategy[str]:
    """Two-letter language codes."""
    return st.sampled_from(_CODE_POOL)


@st.composite
def language_tags(draw: DrawFn) -> str:
    """POSIX locale strings with an ``ll_CC`` head and an optional suffix."""
    code = draw(language_codes())
    territory = draw(st.sampled_from(_TERRITORY_POOL))
    suffix = draw(st.sampled_from(_SUFFIX_POOL))
    return f"{code}_{territory}{suffix}"


@st.composite
def malformed_tokens(draw: DrawFn) -> str:
    """Entries that are neither a 2-letter code nor an ``ll_CC`` tag.

    Never contains ":" so it survives splitting as a single token.
    """
    alphabet = string.ascii_letters + string.digits + ".-@"
    token = draw(
        st.one_of(
            st.just(""),
            st.text(alphabet=alphabet, min_size=1, max_size=1),
            st.text(alphabet=alphabet, min_size=3, max_size=12),
        )
    )
    # Underscore-free alphabet rules out the tag shape; only length 2 is left to exclude.
    if len(token) == 2:
        token += "x"
    return token


@st.composite
def language_tokens(draw: DrawFn) -> str:
    """Any LANGUAGE entry.

    Events emitted:
    - lang_token_kind=code|tag|malformed
    """
    kind = draw(st.sampled_from(["code", "tag", "malformed"]))
    event(f"lang_token_kind={kind}")
    match kind:
        case "code":
            return draw(language_codes())
        case "tag":
            return draw(language_tags())
        case _:
            return draw(malformed_tokens())


@st.composite
def language_lists(draw: DrawFn, max_size: int = 6) -> str:
    """Colon-separated LANGUAGE values.

    Events emitted:
    - lang_list_size=N
    """
    tokens = draw(st.lists(language_tokens(), min_size=0, max_size=max_size))
    event(f"lang_list_size={len(tokens)}")
    return ":".join(tokens)
