"""Path pattern compilation, caching and matching."""

from .cache import PatternCache
from .compiler import compile_pattern, parse_pattern, tokens_to_regex
from .matcher import PathMatcher, default_matcher, match_path
from .models import CompiledMatcher, CompileOptions, MatchResult, MatchSpec, PathKey

__all__ = [
    "PatternCache",
    "PathMatcher",
    "default_matcher",
    "match_path",
    "compile_pattern",
    "parse_pattern",
    "tokens_to_regex",
    "CompileOptions",
    "CompiledMatcher",
    "PathKey",
    "MatchSpec",
    "MatchResult",
]
