"""Deduplication helpers for language lists.

Two distinct operations, because consumers need different orders:

- dedup_nosort: keep first occurrences in priority order (page search)
- dedup_sorted: sorted unique values (cache update)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from _typeshed import SupportsRichComparison

__all__ = ["dedup_nosort", "dedup_sorted"]

T = TypeVar("T")
T_cmp = TypeVar("T_cmp", bound="SupportsRichComparison")


def dedup_nosort(items: Iterable[T]) -> list[T]:
    """Deduplicate preserving the order of first occurrences.

    Only equality is required, so unhashable and unorderable elements work.
    Quadratic, which is fine for language lists.

    Example:
        >>> dedup_nosort(["it", "cz", "de", "cz", "en"])
        ['it', 'cz', 'de', 'en']
    """
    result: list[T] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def dedup_sorted(items: Iterable[T_cmp]) -> list[T_cmp]:
    """Sort and deduplicate.

    Example:
        >>> dedup_sorted(["it", "cz", "de", "cz", "en"])
        ['cz', 'de', 'en', 'it']
    """
    result: list[T_cmp] = []
    for item in sorted(items):
        if not result or result[-1] != item:
            result.append(item)
    return result
