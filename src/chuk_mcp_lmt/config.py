"""Configuration for the LMT MCP server, read from the environment."""

import os
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CHUK_MCP_LMT_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LmtConfig(BaseModel):
    """Server configuration."""

    default_alias: str = Field("LMT", min_length=1, description="Alias used when none is given")
    log_level: LogLevel = Field("INFO", description="Log level for HTTP mode")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_config() -> LmtConfig:
    """Load configuration from CHUK_MCP_LMT_* environment variables."""
    values = {}
    for field_name in LmtConfig.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value:
            values[field_name] = value
    return LmtConfig(**values)
