"""Content fingerprints for cached pages.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import hashlib

__all__ = ["sha256_hexdigest"]


def sha256_hexdigest(data: bytes) -> str:
    """Calculate the SHA-256 hash of data as a lowercase hexadecimal string.

    Example:
        >>> sha256_hexdigest(b"This is a test.")[:16]
        'a8a2f6ebe286697c'
    """
    return hashlib.sha256(data).hexdigest()
