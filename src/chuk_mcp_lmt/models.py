"""Pydantic models for the LMT MCP server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LmtZoneOptions(BaseModel):
    """Construction options accepted by LmtZone."""

    model_config = ConfigDict(extra="forbid")

    longitude: float = Field(description="Longitude in degrees, east positive")
    name: str | None = Field(None, description="Optional display name for the zone")

    @field_validator("longitude", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise coerce to 0.0 or 1.0
        if isinstance(value, bool):
            raise ValueError("Longitude must be a number, not a boolean")
        return value


class LmtOffsetResponse(BaseModel):
    """Response for get_lmt_offset tool."""

    longitude: float = Field(description="Longitude in degrees, east positive")
    offset: str = Field(description="Fixed UTC offset as ±HH:MM:SS")
    utc_offset_seconds: int = Field(description="Fixed UTC offset in seconds")
    abbreviation: str = Field(description="Short zone name, always LMT")
    category: str = Field(description="Zone category, always Solar")


class LmtTimeResponse(LmtOffsetResponse):
    """Response for get_local_mean_time tool."""

    utc_time: str = Field(description="Current UTC time (ISO 8601)")
    local_mean_time: str = Field(description="Current Local Mean Time (ISO 8601)")


class AliasResponse(BaseModel):
    """Response for register_lmt_alias tool."""

    alias_name: str = Field(description="Name the offset was registered under")
    longitude: float = Field(description="Longitude the offset was computed from")
    offset: str = Field(description="Registered UTC offset as ±HH:MM:SS")
    replaced: str | None = Field(
        None, description="Offset previously registered under this name, if any"
    )


class ConversionResponse(BaseModel):
    """Response for convert_to_local_mean_time tool."""

    from_timezone: str = Field(description="Source timezone (IANA name or alias)")
    from_datetime: str = Field(description="Source datetime (ISO 8601)")
    from_utc_offset_seconds: int = Field(description="Source UTC offset in seconds")
    longitude: float = Field(description="Target longitude in degrees")
    to_datetime: str = Field(description="Local Mean Time datetime (ISO 8601)")
    to_utc_offset_seconds: int = Field(description="Local Mean Time UTC offset in seconds")
    offset_difference_seconds: int = Field(description="Target offset minus source offset")
    explanation: str = Field(description="Human readable summary of the conversion")
