"""Route declarations and the render strategies they can carry."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict, Field

from ..matching.models import MatchResult, MatchSpec
from .context import ResolutionContext


@dataclass(frozen=True)
class FixedChildren:
    """Pre-built children, rendered only on a match"""

    value: Any


@dataclass(frozen=True)
class ChildrenFunction:
    """Children computed from the context, invoked whether or not the route matched"""

    fn: Callable[[ResolutionContext], Any]


@dataclass(frozen=True)
class NamedComponent:
    """A component handed to the rendering collaborator on a match"""

    component: Callable[..., Any]


@dataclass(frozen=True)
class RenderFunction:
    """Inline render callback invoked on a match"""

    fn: Callable[[ResolutionContext], Any]


RenderStrategy = FixedChildren | ChildrenFunction | NamedComponent | RenderFunction


def _is_empty_children(children: Any) -> bool:
    return children is None or (isinstance(children, list | tuple) and len(children) == 0)


def declares_path(path: Any) -> bool:
    """Whether a declaration carries a pattern to match against.

    Only a missing or empty-string path defers to the inherited match. An
    empty list of alternatives is still a pattern, one that never matches.
    """
    return path is not None and path != ""


class Declaration(MatchSpec):
    """Anything a switch can select between.

    ``from_path`` (populated by the ``from`` key) stands in for ``path`` on
    redirect-like declarations.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_path: str | None = Field(default=None, alias="from")
    location: Any = Field(default=None, description="Location overriding the inherited one")
    computed_match: MatchResult | None = Field(
        default=None, description="Match precomputed by an enclosing switch"
    )

    @property
    def effective_path(self) -> Any:
        return self.path if declares_path(self.path) else self.from_path


class RouteDeclaration(Declaration):
    """A route: a pattern plus what to render when it matches."""

    children: Any = Field(default=None, description="Children, or a function of the context")
    component: Callable[..., Any] | None = Field(default=None)
    render: Callable[[ResolutionContext], Any] | None = Field(default=None)

    def children_strategy(self) -> FixedChildren | ChildrenFunction | None:
        if _is_empty_children(self.children):
            return None
        if callable(self.children):
            return ChildrenFunction(self.children)
        return FixedChildren(self.children)


def select_strategy(declaration: RouteDeclaration, matched: bool) -> RenderStrategy | None:
    """Pick the single strategy to invoke.

    On a match the order is children function, fixed children, component,
    render function. Without a match only a children function runs.
    """
    children = declaration.children_strategy()

    if not matched:
        return children if isinstance(children, ChildrenFunction) else None

    if isinstance(children, ChildrenFunction):
        return children
    if isinstance(children, FixedChildren):
        return children
    if declaration.component is not None:
        return NamedComponent(declaration.component)
    if declaration.render is not None:
        return RenderFunction(declaration.render)
    return None
