"""Resolution of a single route declaration against its inherited context."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..common.config import DEFAULT_CONFIG, RouterConfig
from ..common.diagnostics import LocationDriftTracker, warn_if
from ..common.exceptions import MissingControllerError
from ..common.logging import get_logger
from ..matching.matcher import PathMatcher, default_matcher
from ..matching.models import MatchResult
from .context import ResolutionContext
from .declarations import (
    ChildrenFunction,
    FixedChildren,
    NamedComponent,
    RenderFunction,
    RenderStrategy,
    RouteDeclaration,
    declares_path,
    select_strategy,
)
from .interfaces import LocationLike

logger = get_logger(__name__)


def _call_component(component: Callable[..., Any], context: ResolutionContext) -> Any:
    return component(context)


@dataclass(frozen=True)
class RouteResolution:
    """What a route resolved to"""

    context: ResolutionContext
    strategy: RenderStrategy | None
    output: Any = None

    @property
    def match(self) -> MatchResult | None:
        return self.context.match


class RouteResolver:
    """Resolves one declared route each time its tree is re-evaluated.

    A resolver belongs to one position in the tree and remembers what it
    saw on earlier resolutions, so usage warnings are reported once and a
    declaration switching between a controlled and an inherited location is
    noticed.
    """

    def __init__(
        self,
        matcher: PathMatcher | None = None,
        config: RouterConfig | None = None,
        create_element: Callable[[Callable[..., Any], ResolutionContext], Any] | None = None,
    ):
        """Initialize route resolver.

        Args:
            matcher: Path matcher; the process-wide default otherwise
            config: Router configuration
            create_element: Hands a named component to the rendering
                collaborator; calls the component with the context by default
        """
        self.matcher = matcher or default_matcher
        self.config = config or DEFAULT_CONFIG
        self._create_element = create_element or _call_component
        self._resolutions = 0
        self._drift = LocationDriftTracker("Route", logger, enabled=self.config.diagnostics)

    @property
    def resolutions(self) -> int:
        """Number of completed resolve() calls"""
        return self._resolutions

    def compute_match(
        self,
        context: ResolutionContext,
        declaration: RouteDeclaration,
        location: LocationLike,
    ) -> MatchResult | None:
        """Effective match: switch-supplied, else own pattern, else inherited"""
        if declaration.computed_match is not None:
            return declaration.computed_match
        if declares_path(declaration.path):
            return self.matcher.match(location.pathname, declaration)
        return context.match

    def resolve(
        self, context: ResolutionContext | None, declaration: RouteDeclaration
    ) -> RouteResolution:
        """Resolve a declaration and invoke its selected render strategy.

        Args:
            context: Context inherited from the nearest ancestor
            declaration: The route being resolved

        Returns:
            RouteResolution with the context for the route's descendants

        Raises:
            MissingControllerError: If there is no enclosing controller
            PatternSyntaxError: If the route pattern is malformed
        """
        if context is None:
            raise MissingControllerError(
                "A route cannot be resolved outside a navigation controller"
            )

        self._check_declaration(declaration)

        location = declaration.location if declaration.location is not None else context.location
        match = self.compute_match(context, declaration, location)
        child_context = context.derive(location=location, match=match)

        strategy = select_strategy(declaration, matched=match is not None)
        output = self._invoke(strategy, child_context)

        self._resolutions += 1
        return RouteResolution(context=child_context, strategy=strategy, output=output)

    def _invoke(self, strategy: RenderStrategy | None, context: ResolutionContext) -> Any:
        if isinstance(strategy, ChildrenFunction):
            return strategy.fn(context)
        if isinstance(strategy, FixedChildren):
            return strategy.value
        if isinstance(strategy, NamedComponent):
            return self._create_element(strategy.component, context)
        if isinstance(strategy, RenderFunction):
            return strategy.fn(context)
        return None

    def _check_declaration(self, declaration: RouteDeclaration) -> None:
        if not self._drift.observed:
            self._warn_conflicting_strategies(declaration)
        self._drift.observe(declaration.location is not None, path=declaration.path)

    def _warn_conflicting_strategies(self, declaration: RouteDeclaration) -> None:
        enabled = self.config.diagnostics
        has_children = declaration.children_strategy() is not None
        has_component = declaration.component is not None
        has_render = declaration.render is not None

        warn_if(
            logger,
            has_children and has_component,
            "Route declares both children and component; component will be ignored",
            enabled=enabled,
            path=declaration.path,
        )
        warn_if(
            logger,
            has_children and has_render,
            "Route declares both children and render; render will be ignored",
            enabled=enabled,
            path=declaration.path,
        )
        warn_if(
            logger,
            has_component and has_render,
            "Route declares both component and render; render will be ignored",
            enabled=enabled,
            path=declaration.path,
        )
