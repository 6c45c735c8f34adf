"""MCP server for Local Mean Time queries."""

import logging
import sys
from datetime import UTC, datetime

from chuk_mcp_server import run, tool

from chuk_mcp_lmt.config import get_config
from chuk_mcp_lmt.lmt import LmtZone
from chuk_mcp_lmt.models import (
    AliasResponse,
    ConversionResponse,
    LmtOffsetResponse,
    LmtTimeResponse,
)
from chuk_mcp_lmt.registry import LINKS
from chuk_mcp_lmt.timezone_utils import convert_datetime_to_lmt

logger = logging.getLogger(__name__)

_config = get_config()


def _offset_response(zone: LmtZone) -> LmtOffsetResponse:
    return LmtOffsetResponse(
        longitude=zone.longitude(),
        offset=zone.offset(),
        utc_offset_seconds=zone.offset_for_datetime(None),
        abbreviation=zone.short_name_for_datetime(None),
        category=zone.category(),
    )


@tool  # type: ignore[arg-type]
async def get_lmt_offset(longitude: float) -> LmtOffsetResponse:
    """Get the fixed Local Mean Time UTC offset for a longitude.

    The offset is 12 hours per 180 degrees, rounded to the nearest second.
    It has no daylight saving and does not change with the date.

    Args:
        longitude: Longitude in degrees, -180 to +180, east positive

    Returns:
        LmtOffsetResponse with the offset string and seconds
    """
    return _offset_response(LmtZone(longitude))


@tool  # type: ignore[arg-type]
async def get_local_mean_time(longitude: float) -> LmtTimeResponse:
    """Get the current Local Mean Time at a longitude.

    Uses the system clock for the current UTC time.

    Args:
        longitude: Longitude in degrees, -180 to +180, east positive

    Returns:
        LmtTimeResponse with UTC and Local Mean Time
    """
    zone = LmtZone(longitude)
    utc_dt = datetime.now(UTC)
    local_dt = utc_dt.astimezone(zone)

    return LmtTimeResponse(
        **_offset_response(zone).model_dump(),
        utc_time=utc_dt.isoformat(),
        local_mean_time=local_dt.isoformat(),
    )


@tool  # type: ignore[arg-type]
async def register_lmt_alias(longitude: float, alias_name: str | None = None) -> AliasResponse:
    """Register a timezone alias for the Local Mean Time at a longitude.

    The alias can then be used as from_timezone in convert_to_local_mean_time.
    It stores the offset at registration time; registering the same name again
    replaces it.

    Args:
        longitude: Longitude in degrees, -180 to +180, east positive
        alias_name: Name to register (defaults to the configured alias, "LMT")

    Returns:
        AliasResponse with the registered offset
    """
    alias_name = alias_name or _config.default_alias
    zone = LmtZone(longitude, registry=LINKS)
    replaced = LINKS.lookup(alias_name)
    zone.make_alias(alias_name)
    logger.info("Registered LMT alias %s at longitude %s", alias_name, longitude)

    return AliasResponse(
        alias_name=alias_name,
        longitude=zone.longitude(),
        offset=zone.offset(),
        replaced=replaced,
    )


@tool  # type: ignore[arg-type]
async def convert_to_local_mean_time(
    datetime_str: str, from_timezone: str, longitude: float
) -> ConversionResponse:
    """Convert a datetime from a timezone to Local Mean Time at a longitude.

    Args:
        datetime_str: ISO 8601 datetime, interpreted in from_timezone
        from_timezone: Registered alias or IANA timezone name (e.g. "Europe/London")
        longitude: Target longitude in degrees, -180 to +180, east positive

    Returns:
        ConversionResponse with both datetimes and their offsets
    """
    return ConversionResponse(**convert_datetime_to_lmt(datetime_str, from_timezone, longitude))


def main() -> None:
    """Main entry point for the server."""
    # Default to stdio for MCP compatibility
    transport = "stdio"

    if len(sys.argv) > 1 and sys.argv[1] in ["http", "--http"]:
        transport = "http"
        logging.basicConfig(
            level=_config.log_level,
            format="%(levelname)s:%(name)s:%(message)s",
            stream=sys.stderr,
        )
        logger.info("Starting Chuk MCP LMT Server in HTTP mode")

    # Keep the JSON-RPC stream on stdout clean
    if transport == "stdio":
        logging.basicConfig(
            level=logging.WARNING,
            format="%(levelname)s:%(name)s:%(message)s",
            stream=sys.stderr,
        )
        logging.getLogger("chuk_mcp_server").setLevel(logging.ERROR)
        logging.getLogger("chuk_mcp_server.core").setLevel(logging.ERROR)
        logging.getLogger("chuk_mcp_server.stdio_transport").setLevel(logging.ERROR)

    run(transport=transport)


if __name__ == "__main__":
    main()
