"""Errors raised by the LMT time zone."""

from pydantic import ValidationError

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class InvalidLongitude(ValueError):
    """Raised when a longitude falls outside -180 to +180 degrees."""

    def __init__(self, longitude: float) -> None:
        self.longitude = longitude
        super().__init__(
            f"Your longitude must be between {MIN_LONGITUDE:+.0f} and {MAX_LONGITUDE:+.0f}, "
            f"got {longitude!r}"
        )


def check_longitude(longitude: float) -> float:
    """Return the longitude unchanged, or raise InvalidLongitude.

    NaN compares false against both bounds and is rejected.
    """
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise InvalidLongitude(longitude)
    return longitude


__all__ = ["InvalidLongitude", "ValidationError", "check_longitude"]
