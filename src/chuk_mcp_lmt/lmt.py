"""Local Mean Time zone for a given longitude."""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, tzinfo
from typing import Any

from chuk_mcp_lmt.errors import check_longitude
from chuk_mcp_lmt.models import LmtZoneOptions
from chuk_mcp_lmt.offsets import offset_as_seconds, offset_at_longitude
from chuk_mcp_lmt.registry import LINKS, AliasRegistry

logger = logging.getLogger(__name__)

SHORT_NAME = "LMT"
CATEGORY = "Solar"
DEFAULT_ALIAS = "LMT"

ZERO = timedelta(0)


class LmtZone(tzinfo):
    """Fixed-offset zone whose offset is the mean solar time at a longitude.

    The offset never changes with the date: there is no history and no
    daylight saving. It can be passed anywhere a tzinfo is accepted:

        >>> zone = LmtZone(longitude=-174.2342)
        >>> datetime.now(zone)

    Mean time and apparent solar time differ from day to day by the equation
    of time; this zone only models mean time.
    """

    def __init__(
        self,
        longitude: float,
        name: str | None = None,
        *,
        registry: AliasRegistry | None = None,
    ) -> None:
        options = LmtZoneOptions(longitude=longitude, name=name)
        self._longitude = check_longitude(options.longitude)
        self._offset = offset_at_longitude(self._longitude)
        self._name = options.name
        self._registry = registry if registry is not None else LINKS

    @classmethod
    def create(
        cls, options: Mapping[str, Any], *, registry: AliasRegistry | None = None
    ) -> "LmtZone":
        """Build a zone from an options mapping.

        Args:
            options: Mapping with "longitude" and optionally "name"
            registry: Alias registry for make_alias (defaults to LINKS)

        Raises:
            ValidationError: Missing longitude, wrong type or unknown key
            InvalidLongitude: Longitude outside -180 to +180
        """
        validated = LmtZoneOptions.model_validate(options)
        return cls(validated.longitude, validated.name, registry=registry)

    # Host time zone interface

    def offset_for_datetime(self, dt: datetime | None) -> int:
        return offset_as_seconds(self._offset)

    def offset_for_local_datetime(self, dt: datetime | None) -> int:
        return offset_as_seconds(self._offset)

    def offset(self) -> str:
        return self._offset

    def short_name_for_datetime(self, dt: datetime | None) -> str:
        return SHORT_NAME

    def name(self, new_name: str | None = None) -> str | None:
        """Get the zone name, setting it first if a non-empty name is given."""
        if new_name:
            self._name = new_name
        return self._name

    def longitude(self, new_longitude: float | None = None) -> float:
        """Get the longitude, moving the zone first if a new one is given.

        A falsy value (None or 0) leaves the zone unchanged, so the prime
        meridian can only be set through the constructor.

        Raises:
            ValidationError: New longitude is not a number
            InvalidLongitude: New longitude outside -180 to +180
        """
        if new_longitude:
            new_longitude = check_longitude(LmtZoneOptions(longitude=new_longitude).longitude)
            # Compute before assigning so a failure leaves both fields as they were
            offset = offset_at_longitude(new_longitude)
            self._longitude, self._offset = new_longitude, offset
            logger.debug("LMT zone moved to longitude %s (offset %s)", new_longitude, offset)
        return self._longitude

    # Not floating: the offset is fixed unless the longitude is changed
    def is_floating(self) -> bool:
        return False

    # Never UTC, even at longitude 0 where the offset matches
    def is_utc(self) -> bool:
        return False

    def is_olson(self) -> bool:
        return False

    def is_dst_for_datetime(self, dt: datetime | None) -> bool:
        return False

    def category(self) -> str:
        return CATEGORY

    def make_alias(self, alias_name: str = DEFAULT_ALIAS) -> None:
        """Register the current offset under an alias name.

        The registry stores a copy of the offset, so moving this zone later
        does not change the alias. Call again to refresh it, or with other
        names to create more aliases.
        """
        alias_name = alias_name or DEFAULT_ALIAS
        self._registry.register(alias_name, self._offset)
        logger.debug("Registered alias %s -> %s", alias_name, self._offset)

    # datetime.tzinfo hooks

    def utcoffset(self, dt: datetime | None) -> timedelta:
        return timedelta(seconds=self.offset_for_datetime(dt))

    def dst(self, dt: datetime | None) -> timedelta:
        return ZERO

    def tzname(self, dt: datetime | None) -> str:
        return self.short_name_for_datetime(dt)

    def __reduce__(self) -> tuple[type["LmtZone"], tuple[float, str | None]]:
        # Copies and unpickled zones are bound to the process-wide LINKS registry
        return (type(self), (self._longitude, self._name))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(longitude={self._longitude!r}, "
            f"name={self._name!r}, offset={self._offset!r})"
        )
