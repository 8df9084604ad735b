"""Page path decomposition.

Pages live at ``<cache>/pages.<lang>/<platform>/<name>.md``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import PurePath

__all__ = ["page_name", "page_platform"]


def page_name(path: str | PurePath) -> str | None:
    """Extract the page name (file stem) from a page path.

    Returns:
        The stem, or None if the path has no final component or ends in "..".

    Example:
        >>> page_name("pages/linux/ls.md")
        'ls'
    """
    p = PurePath(path)
    if p.name in ("", ".."):
        return None
    return p.stem or None


def page_platform(path: str | PurePath) -> str | None:
    """Extract the platform (parent directory name) from a page path.

    Returns:
        The parent directory name, or None if there is no named parent.

    Example:
        >>> page_platform("pages/linux/ls.md")
        'linux'
    """
    p = PurePath(path)
    if not p.name:
        return None
    return p.parent.name or None
