"""Route tree: declarations, resolution, switch selection and the navigation controller."""

from .context import Location, ResolutionContext
from .controller import ControllerState, NavigationController
from .declarations import (
    ChildrenFunction,
    Declaration,
    FixedChildren,
    NamedComponent,
    RenderFunction,
    RenderStrategy,
    RouteDeclaration,
    select_strategy,
)
from .interfaces import HistoryProtocol, LocationLike
from .route import RouteResolution, RouteResolver
from .switch import SwitchSelection, SwitchSelector

__all__ = [
    "Location",
    "ResolutionContext",
    "ControllerState",
    "NavigationController",
    "Declaration",
    "RouteDeclaration",
    "RenderStrategy",
    "FixedChildren",
    "ChildrenFunction",
    "NamedComponent",
    "RenderFunction",
    "select_strategy",
    "HistoryProtocol",
    "LocationLike",
    "RouteResolver",
    "RouteResolution",
    "SwitchSelector",
    "SwitchSelection",
]
