"""Alias registry mapping names to fixed UTC offsets."""

import logging
from collections.abc import Iterator
from datetime import timedelta, timezone, tzinfo

from chuk_mcp_lmt.offsets import offset_as_seconds, offset_as_string

logger = logging.getLogger(__name__)

# datetime.timezone only accepts offsets strictly inside ±24 hours
MAX_OFFSET_SECONDS = 24 * 60 * 60


class AliasRegistry:
    """Table of alias name -> offset string.

    Entries are static snapshots: registering stores the offset value, not the
    zone it came from.
    """

    def __init__(self) -> None:
        self._links: dict[str, str] = {}

    def register(self, alias_name: str, offset: str) -> str | None:
        """Register an alias, replacing any existing entry.

        Args:
            alias_name: Name to register
            offset: Offset string in any form offset_as_seconds accepts

        Returns:
            The offset previously registered under this name, or None

        Raises:
            ValueError: Empty name, malformed offset, or offset of 24 hours or more
        """
        if not alias_name:
            raise ValueError("Alias name must not be empty")

        seconds = offset_as_seconds(offset)
        if abs(seconds) >= MAX_OFFSET_SECONDS:
            raise ValueError(f"Offset must be less than 24 hours from UTC: {offset!r}")

        canonical = offset_as_string(seconds)
        previous = self._links.get(alias_name)
        if previous is not None and previous != canonical:
            logger.info("Alias %s changed from %s to %s", alias_name, previous, canonical)
        self._links[alias_name] = canonical
        return previous

    def lookup(self, alias_name: str) -> str | None:
        return self._links.get(alias_name)

    def resolve(self, alias_name: str) -> tzinfo | None:
        """Get a fixed-offset tzinfo for a registered alias, or None."""
        offset = self._links.get(alias_name)
        if offset is None:
            return None
        return timezone(timedelta(seconds=offset_as_seconds(offset)), alias_name)

    def unregister(self, alias_name: str) -> None:
        self._links.pop(alias_name, None)

    def clear(self) -> None:
        self._links.clear()

    def __contains__(self, alias_name: object) -> bool:
        return alias_name in self._links

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._links))


# Process-wide registry used when no other is supplied
LINKS = AliasRegistry()
