"""Offset encoding helpers for fixed UTC offsets."""

import math
import re

SECONDS_PER_HALF_DAY = 12 * 60 * 60

_OFFSET_RE = re.compile(r"([+-])(\d{2}):?(\d{2})(?::?(\d{2}))?")


def offset_as_string(seconds: int) -> str:
    """Encode a whole number of seconds as a ``±HH:MM:SS`` offset string.

    Args:
        seconds: Signed offset from UTC in seconds

    Returns:
        Offset string, e.g. "-11:36:56" or "+00:00:00"
    """
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def offset_as_seconds(offset: str) -> int:
    """Decode an offset string into signed seconds.

    Accepts ``±HH:MM:SS``, ``±HH:MM``, ``±HHMMSS``, ``±HHMM`` and the literal "0".

    Args:
        offset: Offset string

    Returns:
        Signed offset from UTC in seconds

    Raises:
        ValueError: If the string is not a recognised offset
    """
    if offset == "0":
        return 0

    match = _OFFSET_RE.fullmatch(offset)
    if match is None:
        raise ValueError(f"Invalid offset string: {offset!r}")

    sign, hours, minutes, secs = match.groups()
    if int(minutes) > 59 or (secs is not None and int(secs) > 59):
        raise ValueError(f"Invalid offset string: {offset!r}")

    total = int(hours) * 3600 + int(minutes) * 60 + int(secs or 0)
    return -total if sign == "-" else total


def offset_at_longitude(longitude: float) -> str:
    """Get the Local Mean Time offset string for a longitude.

    180 degrees of longitude is twelve hours, so each second of offset
    covers 1/240 of a degree. The result is rounded to the nearest second.

    Args:
        longitude: Longitude in degrees, east positive

    Returns:
        Offset string in ``±HH:MM:SS`` form
    """
    offset_seconds = (longitude / 180) * SECONDS_PER_HALF_DAY
    if math.isnan(offset_seconds):
        raise ValueError("Longitude must be a number")
    return offset_as_string(round(offset_seconds))
