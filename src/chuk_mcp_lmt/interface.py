"""Method set a time zone must provide to plug into the host framework."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeZoneLike(Protocol):
    """Capability interface shared by all zone kinds.

    Zones that vary over time use the datetime argument to pick a rule; fixed
    zones may ignore it.
    """

    def offset_for_datetime(self, dt: datetime | None) -> int: ...

    def offset_for_local_datetime(self, dt: datetime | None) -> int: ...

    def short_name_for_datetime(self, dt: datetime | None) -> str: ...

    def is_floating(self) -> bool: ...

    def is_utc(self) -> bool: ...

    def is_olson(self) -> bool: ...

    def is_dst_for_datetime(self, dt: datetime | None) -> bool: ...

    def category(self) -> str: ...
