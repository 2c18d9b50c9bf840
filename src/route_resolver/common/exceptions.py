"""Custom exceptions for route resolution."""


class RouteResolverError(Exception):
    """Base exception for all route resolver errors."""
    pass


class ConfigurationError(RouteResolverError):
    """Raised when a route table or resolution tree is misconfigured."""
    pass


class PatternSyntaxError(ConfigurationError):
    """Raised when a path pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid path pattern {pattern!r}: {reason}")


class MissingControllerError(ConfigurationError):
    """Raised when a route is resolved outside any navigation controller."""
    pass


class ControllerStateError(RouteResolverError):
    """Raised when a navigation controller is driven through an invalid transition."""
    pass
