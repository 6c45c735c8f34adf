"""Local Mean Time zones for datetime, with an MCP server."""

__version__ = "1.0.0"

from chuk_mcp_lmt.errors import InvalidLongitude, ValidationError
from chuk_mcp_lmt.interface import TimeZoneLike
from chuk_mcp_lmt.lmt import LmtZone
from chuk_mcp_lmt.offsets import offset_as_seconds, offset_as_string, offset_at_longitude
from chuk_mcp_lmt.registry import LINKS, AliasRegistry

__all__ = [
    "LmtZone",
    "TimeZoneLike",
    "AliasRegistry",
    "LINKS",
    "InvalidLongitude",
    "ValidationError",
    "offset_at_longitude",
    "offset_as_string",
    "offset_as_seconds",
    "__version__",
]
