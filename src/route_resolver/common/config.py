"""Pydantic configuration shared by matchers, resolvers and controllers."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Upper bound on memoized compiled patterns across all option combinations.
DEFAULT_CACHE_LIMIT = 10_000

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Configuration for the structlog pipeline"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    level: str = Field(default="INFO", description="Standard library log level name")
    json_format: bool = Field(default=False, description="Render events as JSON")
    log_file: str | None = Field(default=None, description="Optional file to mirror logs to")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level


class RouterConfig(BaseModel):
    """Runtime configuration for route resolution components."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    cache_limit: int = Field(
        default=DEFAULT_CACHE_LIMIT,
        ge=0,
        description="Maximum number of compiled patterns kept in a pattern cache",
    )
    diagnostics: bool = Field(
        default=True,
        description="Log advisory warnings about misused route declarations",
    )


DEFAULT_CONFIG = RouterConfig()
