"""Human-readable durations, e.g. for "cache is 3d, 4h old".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from tldrkit.constants import DAY, HOUR, MINUTE

__all__ = ["duration_fmt"]


def duration_fmt(secs: int) -> str:
    """Convert time in seconds to a human-readable string.

    At most the two largest units are shown. A second unit is only shown
    when it directly follows the first (no seconds next to hours).

    Args:
        secs: Non-negative number of seconds

    Returns:
        Formatted duration, e.g. "1min, 1s", "2h", "1d, 1h"

    Raises:
        ValueError: If secs is negative

    Example:
        >>> duration_fmt(3660)
        '1h, 1min'
        >>> duration_fmt(3601)
        '1h'
    """
    if secs < 0:
        msg = f"duration must be non-negative, got {secs}"
        raise ValueError(msg)

    days, rest = divmod(secs, DAY)
    hours, rest = divmod(rest, HOUR)
    minutes, seconds = divmod(rest, MINUTE)

    if days:
        return f"{days}d, {hours}h" if hours else f"{days}d"
    if hours:
        return f"{hours}h, {minutes}min" if minutes else f"{hours}h"
    if minutes:
        return f"{minutes}min, {seconds}s" if seconds else f"{minutes}min"
    return f"{seconds}s"
