"""Public path matching entry point."""

from typing import Any

from ..common.config import DEFAULT_CONFIG, RouterConfig
from .cache import PatternCache
from .models import MatchResult, MatchSpec

ROOT_PATTERN = "/"


class PathMatcher:
    """Matches pathnames against patterns through a bounded pattern cache."""

    def __init__(
        self,
        cache: PatternCache | None = None,
        config: RouterConfig | None = None,
    ):
        """Initialize path matcher.

        Args:
            cache: Pattern cache to use; a new one sized from config otherwise
            config: Router configuration
        """
        self.config = config or DEFAULT_CONFIG
        self.cache = cache if cache is not None else PatternCache(limit=self.config.cache_limit)

    def match(self, pathname: str, spec: Any) -> MatchResult | None:
        """Match a pathname against one or more patterns.

        Candidates are tried in declaration order and the first success wins.
        With ``exact`` set, a candidate that only matches a prefix of the
        pathname is skipped and the next candidate is tried.

        Args:
            pathname: Path to resolve (e.g., "/users/42")
            spec: A pattern string, a list of patterns, a mapping with
                ``path``/``exact``/``strict``/``sensitive``, or a MatchSpec

        Returns:
            MatchResult for the first matching candidate, None otherwise

        Raises:
            PatternSyntaxError: If a candidate pattern is malformed
        """
        spec = MatchSpec.coerce(spec)
        options = spec.compile_options()

        for pattern in spec.candidates():
            if not pattern and pattern != "":
                continue

            compiled = self.cache.get(pattern, options)
            found = compiled.test(pathname)
            if found is None:
                continue

            url, values = found
            is_exact = pathname == url
            if spec.exact and not is_exact:
                continue

            return MatchResult(
                pattern=pattern,
                matched_url=ROOT_PATTERN if pattern == ROOT_PATTERN and url == "" else url,
                is_exact=is_exact,
                params=dict(zip(compiled.param_names, values, strict=True)),
            )

        return None


# Process-wide matcher backing match_path; lives as long as the interpreter.
default_matcher = PathMatcher()


def match_path(pathname: str, spec: Any) -> MatchResult | None:
    """Match a pathname using the process-wide default matcher"""
    return default_matcher.match(pathname, spec)
