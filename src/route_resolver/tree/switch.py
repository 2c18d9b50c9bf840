"""First-match selection among sibling declarations."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..common.config import DEFAULT_CONFIG, RouterConfig
from ..common.diagnostics import LocationDriftTracker
from ..common.exceptions import MissingControllerError
from ..common.logging import get_logger
from ..matching.matcher import PathMatcher, default_matcher
from ..matching.models import MatchResult
from .context import ResolutionContext
from .declarations import Declaration, RouteDeclaration, declares_path
from .interfaces import LocationLike
from .route import RouteResolution, RouteResolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class SwitchSelection:
    """The declaration a switch picked, already carrying its match"""

    declaration: Declaration
    match: MatchResult
    index: int


class SwitchSelector:
    """Renders at most one of its sibling declarations.

    Declarations are tried in order and the first whose pattern matches the
    location wins; later siblings are never inspected. A declaration with no
    pattern takes the inherited match, which makes it an unconditional
    fallback when placed last. Items that are not declarations are skipped.
    """

    def __init__(
        self,
        matcher: PathMatcher | None = None,
        config: RouterConfig | None = None,
        resolver: RouteResolver | None = None,
    ):
        """Initialize switch selector.

        Args:
            matcher: Path matcher; the process-wide default otherwise
            config: Router configuration
            resolver: Resolver for whichever declaration is selected
        """
        self.matcher = matcher or default_matcher
        self.config = config or DEFAULT_CONFIG
        # One resolver for the selected slot, so moving between sibling
        # routes keeps the same resolver state.
        self.resolver = resolver or RouteResolver(matcher=self.matcher, config=self.config)
        self._drift = LocationDriftTracker("Switch", logger, enabled=self.config.diagnostics)

    def select(
        self,
        context: ResolutionContext | None,
        declarations: Iterable[Any],
        location: LocationLike | None = None,
    ) -> SwitchSelection | None:
        """Find the first declaration matching the location.

        Args:
            context: Context inherited from the nearest ancestor
            declarations: Sibling declarations in priority order
            location: Location overriding the inherited one

        Returns:
            SwitchSelection, or None if nothing matched

        Raises:
            MissingControllerError: If there is no enclosing controller
            PatternSyntaxError: If an inspected pattern is malformed
        """
        if context is None:
            raise MissingControllerError(
                "A switch cannot be resolved outside a navigation controller"
            )

        self._drift.observe(location is not None)
        if location is None:
            location = context.location

        for index, declaration in enumerate(declarations):
            if not isinstance(declaration, Declaration):
                continue

            path = declaration.effective_path
            if declares_path(path):
                spec = declaration.model_copy(update={"path": path})
                match = self.matcher.match(location.pathname, spec)
            else:
                match = context.match

            if match is not None:
                selected = declaration.model_copy(
                    update={"location": location, "computed_match": match}
                )
                return SwitchSelection(declaration=selected, match=match, index=index)

        return None

    def resolve(
        self,
        context: ResolutionContext | None,
        declarations: Iterable[Any],
        location: LocationLike | None = None,
    ) -> RouteResolution | None:
        """Select a declaration and resolve only that one.

        Returns:
            RouteResolution of the selected route, or None if nothing
            matched or the selection is not a route
        """
        selection = self.select(context, declarations, location)
        if selection is None or not isinstance(selection.declaration, RouteDeclaration):
            return None

        logger.debug(
            "Switch selected route",
            index=selection.index,
            pattern=selection.match.pattern,
        )
        return self.resolver.resolve(context, selection.declaration)
