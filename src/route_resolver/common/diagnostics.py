"""Advisory warnings for misused route declarations.

Warnings never change resolution results; turning diagnostics off only
silences them.
"""

from typing import Any


def warn_if(
    logger: Any,
    condition: bool,
    message: str,
    *,
    enabled: bool = True,
    **fields: Any,
) -> bool:
    """Log a warning when condition is true and diagnostics are enabled.

    Returns:
        True if the warning was emitted
    """
    if enabled and condition:
        logger.warning(message, **fields)
        return True
    return False


class LocationDriftTracker:
    """Notices a node switching between an explicit and an inherited location"""

    def __init__(self, kind: str, logger: Any, enabled: bool = True):
        self.kind = kind
        self._logger = logger
        self._enabled = enabled
        self._was_controlled: bool | None = None

    @property
    def observed(self) -> bool:
        return self._was_controlled is not None

    def observe(self, controlled: bool, **fields: Any) -> bool:
        """Record one resolution; returns True if a drift warning was logged"""
        previous = self._was_controlled
        self._was_controlled = controlled
        if previous is None or previous == controlled:
            return False

        if controlled:
            message = f"{self.kind} changed from uncontrolled to controlled location"
        else:
            message = f"{self.kind} changed from controlled to uncontrolled location"
        return warn_if(self._logger, True, message, enabled=self._enabled, **fields)
