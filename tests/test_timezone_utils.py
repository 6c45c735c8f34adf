"""Tests for timezone utilities."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from chuk_mcp_lmt import InvalidLongitude, LmtZone
from chuk_mcp_lmt.registry import AliasRegistry
from chuk_mcp_lmt.timezone_utils import (
    convert_datetime_to_lmt,
    get_lmt_info_at_datetime,
    get_timezone,
)


def test_get_timezone_iana(registry: AliasRegistry) -> None:
    """Test resolving an IANA name."""
    assert get_timezone("America/New_York", registry) == ZoneInfo("America/New_York")


def test_get_timezone_utc(registry: AliasRegistry) -> None:
    """Test resolving UTC."""
    assert get_timezone("UTC", registry) is UTC


def test_get_timezone_alias_wins(registry: AliasRegistry) -> None:
    """Test that a registered alias shadows an IANA name."""
    LmtZone(90, registry=registry).make_alias("Europe/London")
    tz = get_timezone("Europe/London", registry)

    assert tz.utcoffset(None) == timedelta(hours=6)


def test_get_timezone_alias_from_lmt_zone(registry: AliasRegistry) -> None:
    """Test the make_alias then use-by-name flow."""
    zone = LmtZone(-174.2343, name="Office", registry=registry)
    zone.make_alias("Office")

    now = datetime.now(get_timezone("Office", registry))
    assert now.utcoffset() == timedelta(seconds=zone.offset_for_datetime(None))


def test_get_timezone_default_registry() -> None:
    """Test that LINKS is consulted by default."""
    LmtZone(-90).make_alias()
    assert get_timezone("LMT").utcoffset(None) == timedelta(hours=-6)


@pytest.mark.parametrize("name", ["Not/AZone", "../etc/passwd"])
def test_get_timezone_unknown(name: str, registry: AliasRegistry) -> None:
    """Test that unknown names raise ValueError."""
    with pytest.raises(ValueError):
        get_timezone(name, registry)


def test_get_lmt_info_at_datetime() -> None:
    """Test LMT information at a specific datetime."""
    dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)
    info = get_lmt_info_at_datetime(90, dt)

    assert info["longitude"] == 90
    assert info["offset"] == "+06:00:00"
    assert info["utc_offset_seconds"] == 21600
    assert info["abbreviation"] == "LMT"
    assert info["is_dst"] is False
    assert info["local_mean_time"] == "2025-01-15T18:00:00+06:00"


def test_get_lmt_info_same_in_summer_and_winter() -> None:
    """Test that the offset does not change with the season."""
    winter = get_lmt_info_at_datetime(-73.9857, datetime(2025, 1, 15, 12, tzinfo=UTC))
    summer = get_lmt_info_at_datetime(-73.9857, datetime(2025, 7, 15, 12, tzinfo=UTC))

    assert winter["utc_offset_seconds"] == summer["utc_offset_seconds"] == -17757


def test_convert_datetime_to_lmt_from_utc() -> None:
    """Test converting from UTC."""
    result = convert_datetime_to_lmt("2025-06-15T12:00:00", "UTC", 90)

    assert result["from_timezone"] == "UTC"
    assert result["from_utc_offset_seconds"] == 0
    assert result["to_utc_offset_seconds"] == 21600
    assert result["offset_difference_seconds"] == 21600
    assert result["to_datetime"] == "2025-06-15T18:00:00+06:00"
    assert "ahead of" in result["explanation"]


def test_convert_datetime_to_lmt_same_offset() -> None:
    """Test converting where the offsets match (London in summer, 15 degrees east)."""
    result = convert_datetime_to_lmt("2025-06-15T14:00:00", "Europe/London", 15)

    assert result["from_utc_offset_seconds"] == 3600
    assert result["to_utc_offset_seconds"] == 3600
    assert result["offset_difference_seconds"] == 0
    assert "same UTC offset" in result["explanation"]


def test_convert_datetime_to_lmt_behind() -> None:
    """Test converting to a zone west of the source."""
    result = convert_datetime_to_lmt("2025-01-15T14:00:00", "America/New_York", -90)

    assert result["from_utc_offset_seconds"] == -18000
    assert result["to_utc_offset_seconds"] == -21600
    assert result["offset_difference_seconds"] == -3600
    assert result["to_datetime"] == "2025-01-15T13:00:00-06:00"
    assert "behind" in result["explanation"]


def test_convert_datetime_to_lmt_ignores_input_offset() -> None:
    """Test that an offset in the input string is replaced by from_tz."""
    result = convert_datetime_to_lmt("2025-06-15T12:00:00+05:00", "UTC", 0)
    assert result["to_datetime"] == "2025-06-15T12:00:00+00:00"


def test_convert_datetime_from_alias(registry: AliasRegistry) -> None:
    """Test converting from a registered alias."""
    LmtZone(-90, registry=registry).make_alias("Ranch")
    result = convert_datetime_to_lmt("2025-06-15T06:00:00", "Ranch", 90, registry)

    assert result["from_utc_offset_seconds"] == -21600
    assert result["to_datetime"] == "2025-06-15T18:00:00+06:00"


def test_convert_datetime_to_lmt_invalid_longitude() -> None:
    """Test that an out-of-range longitude is rejected."""
    with pytest.raises(InvalidLongitude):
        convert_datetime_to_lmt("2025-06-15T12:00:00", "UTC", 270)
