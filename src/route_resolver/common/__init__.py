"""Common utilities and shared functionality."""

from .config import DEFAULT_CACHE_LIMIT, DEFAULT_CONFIG, LoggingConfig, RouterConfig
from .diagnostics import LocationDriftTracker, warn_if
from .exceptions import (
    ConfigurationError,
    ControllerStateError,
    MissingControllerError,
    PatternSyntaxError,
    RouteResolverError,
)
from .logging import get_logger, setup_logging

__all__ = [
    # Configuration
    "RouterConfig",
    "LoggingConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_CACHE_LIMIT",
    # Exceptions
    "RouteResolverError",
    "ConfigurationError",
    "PatternSyntaxError",
    "MissingControllerError",
    "ControllerStateError",
    # Diagnostics
    "warn_if",
    "LocationDriftTracker",
    # Logging
    "get_logger",
    "setup_logging",
]
