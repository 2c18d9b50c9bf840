"""Locations and the context propagated down a route tree."""

from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..matching.models import MatchResult
from .interfaces import LocationLike


class Location(BaseModel):
    """An immutable navigational position."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pathname: str = Field(default="/", description="Path portion of the location")
    search: str = Field(default="", description="Query string including the leading '?'")
    hash: str = Field(default="", description="Fragment including the leading '#'")
    state: Any = Field(default=None, description="Opaque state attached by the history backend")
    key: str | None = Field(default=None, description="Backend-assigned location key")

    @classmethod
    def from_path(cls, path: str, state: Any = None, key: str | None = None) -> "Location":
        """Build a location from a path such as "/users?page=2#top"."""
        # Fragment first, then query; the rest is the pathname verbatim.
        rest, _, fragment = path.partition("#")
        pathname, _, query = rest.partition("?")
        return cls(
            pathname=pathname or "/",
            search=f"?{query}" if query else "",
            hash=f"#{fragment}" if fragment else "",
            state=state,
            key=key,
        )

    @property
    def path(self) -> str:
        return f"{self.pathname}{self.search}{self.hash}"


@dataclass(frozen=True)
class ResolutionContext:
    """Location, match and navigation handle visible to a route's descendants"""

    location: LocationLike
    match: MatchResult | None
    navigation: Any = None

    def derive(self, location: LocationLike, match: MatchResult | None) -> "ResolutionContext":
        """Context for the children of a route that resolved against this one"""
        return replace(self, location=location, match=match)
