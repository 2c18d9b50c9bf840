"""Route Resolver - path pattern matching and route tree resolution."""

from . import matching, tree

# Common utilities
from .common.config import DEFAULT_CACHE_LIMIT, LoggingConfig, RouterConfig
from .common.exceptions import (
    ConfigurationError,
    ControllerStateError,
    MissingControllerError,
    PatternSyntaxError,
    RouteResolverError,
)
from .common.logging import get_logger, setup_logging

# Matching
from .matching import (
    CompiledMatcher,
    CompileOptions,
    MatchResult,
    MatchSpec,
    PathMatcher,
    PatternCache,
    compile_pattern,
    match_path,
)

# Route tree
from .tree import (
    ControllerState,
    Declaration,
    Location,
    NavigationController,
    ResolutionContext,
    RouteDeclaration,
    RouteResolution,
    RouteResolver,
    SwitchSelection,
    SwitchSelector,
)

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Matching
    "match_path",
    "compile_pattern",
    "PathMatcher",
    "PatternCache",
    "CompileOptions",
    "CompiledMatcher",
    "MatchSpec",
    "MatchResult",
    # Route tree
    "Location",
    "ResolutionContext",
    "Declaration",
    "RouteDeclaration",
    "RouteResolver",
    "RouteResolution",
    "SwitchSelector",
    "SwitchSelection",
    "NavigationController",
    "ControllerState",
    # Configuration
    "RouterConfig",
    "LoggingConfig",
    "DEFAULT_CACHE_LIMIT",
    # Exceptions
    "RouteResolverError",
    "ConfigurationError",
    "PatternSyntaxError",
    "MissingControllerError",
    "ControllerStateError",
    # Logging
    "get_logger",
    "setup_logging",
    "matching",
    "tree",
]
