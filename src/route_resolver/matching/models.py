"""Pattern, option and match models used by the matching layer."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class CompileOptions:
    """Options that change the regex generated for a pattern.

    Doubles as the first-level pattern cache key.
    """

    end: bool = False
    strict: bool = False
    sensitive: bool = False


@dataclass(frozen=True)
class PathKey:
    """A parameter token parsed out of a path pattern"""

    name: str
    prefix: str
    delimiter: str
    optional: bool
    repeat: bool
    partial: bool
    asterisk: bool
    pattern: str


@dataclass(frozen=True)
class CompiledMatcher:
    """Regex plus ordered parameter keys for one (pattern, options) pair"""

    pattern: str
    options: CompileOptions
    regex: re.Pattern[str]
    keys: tuple[PathKey, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(key.name for key in self.keys)

    def test(self, pathname: str) -> tuple[str, tuple[str | None, ...]] | None:
        """Run the matcher against a pathname.

        Returns:
            (matched substring, captured values in key order), or None
        """
        found = self.regex.match(pathname)
        if found is None:
            return None
        return found.group(0), found.groups()


PathValue = str | list[str | None] | tuple[str | None, ...] | None


class MatchSpec(BaseModel):
    """A pattern (or list of alternatives) plus its match options."""

    model_config = ConfigDict(frozen=True)

    path: PathValue = Field(default=None, description="Pattern or ordered alternatives")
    exact: bool = Field(default=False, description="Require the whole pathname to match")
    strict: bool = Field(default=False, description="Treat a trailing slash literally")
    sensitive: bool = Field(default=False, description="Compare case-sensitively")

    @classmethod
    def coerce(cls, spec: Any) -> "MatchSpec":
        """Normalize the accepted spec shapes into a MatchSpec.

        A bare string or sequence of strings is treated as ``{"path": spec}``.
        """
        if isinstance(spec, MatchSpec):
            return spec
        if isinstance(spec, str | list | tuple):
            return cls(path=spec)
        if isinstance(spec, Mapping):
            return cls.model_validate(dict(spec))
        raise TypeError(f"Cannot build a match spec from {type(spec).__name__}")

    def candidates(self) -> list[str | None]:
        """Patterns to try, in declaration order"""
        if isinstance(self.path, list | tuple):
            return list(self.path)
        return [self.path]

    def compile_options(self) -> CompileOptions:
        return CompileOptions(end=self.exact, strict=self.strict, sensitive=self.sensitive)


class MatchResult(BaseModel):
    """Result of matching a pathname against one pattern."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(description="The pattern that matched")
    matched_url: str = Field(description="The matched portion of the pathname")
    is_exact: bool = Field(description="Whether the whole pathname was matched")
    params: dict[str, str | None] = Field(
        default_factory=dict, description="Captured parameter values by name"
    )
