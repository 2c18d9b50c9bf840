"""Navigation controller: owns the current location for a route tree."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from ..common.config import DEFAULT_CONFIG, RouterConfig
from ..common.diagnostics import warn_if
from ..common.exceptions import ControllerStateError
from ..common.logging import get_logger
from ..matching.models import MatchResult
from .context import ResolutionContext
from .interfaces import HistoryProtocol

logger = get_logger(__name__)

LocationListener = Callable[[Any], None]


class ControllerState(str, Enum):
    """Navigation controller lifecycle states."""

    UNINITIALIZED = "uninitialized"
    MOUNTED = "mounted"
    TORN_DOWN = "torn_down"


class NavigationController:
    """Publishes the current location and root match to a route tree.

    The controller subscribes to its history backend as soon as it is
    created, before ``activate()``. Descendants are set up before their
    ancestors finish, and one of them may navigate during its own setup
    (a redirect, for instance). Until the controller is activated such
    changes are held in a single pending slot, where a newer location
    replaces an older one; ``activate()`` applies whatever is pending.

    Usage::

        controller = NavigationController(history)
        ...  # set up descendants against controller.context
        controller.activate()
        ...
        controller.teardown()
    """

    def __init__(self, history: HistoryProtocol, config: RouterConfig | None = None):
        """Initialize navigation controller and subscribe to location changes.

        Args:
            history: Navigation-history backend supplying locations
            config: Router configuration
        """
        self.config = config or DEFAULT_CONFIG
        self._history = history
        self._location = history.location
        self._state = ControllerState.UNINITIALIZED
        self._pending_location: Any = None
        self._listeners: list[LocationListener] = []
        self._unlisten: Callable[[], None] | None = history.listen(self._on_location)

    @staticmethod
    def compute_root_match(pathname: str) -> MatchResult:
        """Match every location: the inherited match at the top of a tree"""
        return MatchResult(pattern="/", matched_url="/", params={}, is_exact=pathname == "/")

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def history(self) -> HistoryProtocol:
        return self._history

    @property
    def location(self) -> Any:
        return self._location

    @property
    def pending_location(self) -> Any:
        return self._pending_location

    @property
    def context(self) -> ResolutionContext:
        """Context handed to the top-level declarations of the tree"""
        return ResolutionContext(
            location=self._location,
            match=self.compute_root_match(self._location.pathname),
            navigation=self._history,
        )

    def _on_location(self, location: Any) -> None:
        if self._state is ControllerState.MOUNTED:
            self._apply(location)
        elif self._state is ControllerState.UNINITIALIZED:
            logger.debug("Buffering location change before activation", pathname=location.pathname)
            self._pending_location = location

    def _apply(self, location: Any) -> None:
        self._location = location
        for listener in list(self._listeners):
            listener(location)

    def activate(self) -> None:
        """Finish initialization and apply any location buffered meanwhile.

        Raises:
            ControllerStateError: If the controller was already activated or torn down
        """
        if self._state is not ControllerState.UNINITIALIZED:
            raise ControllerStateError(f"Cannot activate a controller that is {self._state.value}")

        self._state = ControllerState.MOUNTED
        pending, self._pending_location = self._pending_location, None
        logger.debug("Navigation controller activated", pending=pending is not None)

        if pending is not None:
            self._apply(pending)

    def teardown(self) -> None:
        """Unsubscribe from the history backend; safe to call repeatedly"""
        self._state = ControllerState.TORN_DOWN
        self._pending_location = None
        self._listeners.clear()

        unlisten, self._unlisten = self._unlisten, None
        if unlisten is not None:
            unlisten()
            logger.debug("Navigation controller torn down")

    def update_history(self, history: HistoryProtocol) -> None:
        """Accept a re-declared history backend.

        The backend cannot change over a controller's lifetime; a different
        one is reported and ignored.
        """
        warn_if(
            logger,
            history is not self._history,
            "Navigation history backend cannot be changed; keeping the original",
            enabled=self.config.diagnostics,
        )

    def subscribe(self, listener: LocationListener) -> Callable[[], None]:
        """Be told about every location the controller applies.

        Returns:
            Function removing the listener; safe to call repeatedly
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
