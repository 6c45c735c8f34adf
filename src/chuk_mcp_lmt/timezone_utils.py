"""Timezone utilities for Local Mean Time, aliases and IANA tzdata."""

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chuk_mcp_lmt.lmt import LmtZone
from chuk_mcp_lmt.registry import LINKS, AliasRegistry


def get_timezone(name: str, registry: AliasRegistry = LINKS) -> tzinfo:
    """Resolve a timezone name.

    Registered aliases win over IANA names, so an alias such as "Office"
    created with LmtZone.make_alias can be used wherever a zone name is taken.

    Args:
        name: Alias, "UTC", or IANA timezone identifier
        registry: Alias registry to consult first

    Returns:
        A tzinfo for the name

    Raises:
        ValueError: If the name is neither an alias nor a known IANA zone
    """
    alias = registry.resolve(name)
    if alias is not None:
        return alias

    if name.upper() == "UTC":
        return UTC

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name!r}") from e


def get_lmt_info_at_datetime(longitude: float, dt: datetime) -> dict[str, str | int | bool | float]:
    """Get Local Mean Time information at a specific datetime.

    Args:
        longitude: Longitude in degrees, east positive
        dt: Datetime to query (should be timezone-aware)

    Returns:
        Dictionary with longitude, offset, utc_offset_seconds, abbreviation,
        is_dst and local_mean_time
    """
    zone = LmtZone(longitude)
    local_dt = dt.astimezone(zone)

    return {
        "longitude": zone.longitude(),
        "offset": zone.offset(),
        "utc_offset_seconds": zone.offset_for_datetime(local_dt),
        "abbreviation": zone.short_name_for_datetime(local_dt),
        "is_dst": zone.is_dst_for_datetime(local_dt),
        "local_mean_time": local_dt.isoformat(),
    }


def _describe_offset(seconds: int) -> str:
    return f"UTC{seconds / 3600:+.2f}"


def convert_datetime_to_lmt(
    dt_str: str, from_tz: str, longitude: float, registry: AliasRegistry = LINKS
) -> dict[str, str | int | float]:
    """Convert a datetime from a named timezone to Local Mean Time.

    Args:
        dt_str: ISO 8601 datetime string (naive, will be interpreted in from_tz)
        from_tz: Source alias or IANA timezone
        longitude: Target longitude in degrees, east positive
        registry: Alias registry used to resolve from_tz

    Returns:
        Dictionary with conversion details
    """
    naive_dt = datetime.fromisoformat(dt_str).replace(tzinfo=None)

    from_dt = naive_dt.replace(tzinfo=get_timezone(from_tz, registry))

    zone = LmtZone(longitude)
    to_dt = from_dt.astimezone(zone)

    from_offset = from_dt.utcoffset()
    from_offset_seconds = int(from_offset.total_seconds()) if from_offset else 0
    to_offset_seconds = zone.offset_for_local_datetime(to_dt)

    offset_diff = to_offset_seconds - from_offset_seconds
    if offset_diff == 0:
        explanation = (
            f"Local Mean Time at {longitude} has the same UTC offset as {from_tz} "
            f"({_describe_offset(from_offset_seconds)})"
        )
    else:
        direction = "ahead of" if offset_diff > 0 else "behind"
        explanation = (
            f"Local Mean Time at {longitude} is {abs(offset_diff)} seconds {direction} {from_tz} "
            f"({_describe_offset(from_offset_seconds)} → {_describe_offset(to_offset_seconds)})"
        )

    return {
        "from_timezone": from_tz,
        "from_datetime": from_dt.isoformat(),
        "from_utc_offset_seconds": from_offset_seconds,
        "longitude": zone.longitude(),
        "to_datetime": to_dt.isoformat(),
        "to_utc_offset_seconds": to_offset_seconds,
        "offset_difference_seconds": offset_diff,
        "explanation": explanation,
    }
