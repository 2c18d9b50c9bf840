"""Protocol interfaces for the navigation collaborators this package consumes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class LocationLike(Protocol):
    """Anything with a pathname can be routed."""

    @property
    def pathname(self) -> str:
        ...


class HistoryProtocol(Protocol):
    """Navigation-history backend as seen by a NavigationController."""

    @property
    def location(self) -> Any:
        """Current location."""
        ...

    def listen(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        """Subscribe to location changes; returns an unsubscribe function."""
        ...
