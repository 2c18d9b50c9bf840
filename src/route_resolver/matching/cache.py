"""Bounded memo of compiled path patterns."""

import threading
from collections.abc import Callable

from ..common.config import DEFAULT_CACHE_LIMIT
from ..common.logging import get_logger
from .compiler import compile_pattern
from .models import CompileOptions, CompiledMatcher

logger = get_logger(__name__)


class PatternCache:
    """Two-level store of compiled patterns: options, then pattern string.

    Entries are inserted at most once per key and never evicted. After
    ``limit`` entries have been stored across all option combinations,
    new (pattern, options) pairs are compiled on every lookup instead of
    being stored. A route table is a small fixed set of patterns, so it is
    fully cached after first use; callers that build patterns from runtime
    values cannot grow memory without bound.

    The lifetime of a cache is the lifetime of its owner (usually a
    PathMatcher). Lookups do not lock; inserts do.
    """

    def __init__(
        self,
        limit: int = DEFAULT_CACHE_LIMIT,
        compiler: Callable[[str, CompileOptions], CompiledMatcher] = compile_pattern,
    ):
        """Initialize pattern cache.

        Args:
            limit: Maximum number of stored entries across all options
            compiler: Function used to build a matcher on a miss
        """
        if limit < 0:
            raise ValueError("Cache limit cannot be negative")

        self._limit = limit
        self._compiler = compiler
        self._entries: dict[CompileOptions, dict[str, CompiledMatcher]] = {}
        self._count = 0
        self._lock = threading.Lock()
        self._saturation_logged = False

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def is_full(self) -> bool:
        """True once no further entries will be stored"""
        return self._count >= self._limit

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: tuple[str, CompileOptions]) -> bool:
        pattern, options = key
        return pattern in self._entries.get(options, {})

    def get(self, pattern: str, options: CompileOptions) -> CompiledMatcher:
        """Return the matcher for a pattern, compiling it on a miss.

        Raises:
            PatternSyntaxError: If the pattern cannot be compiled
        """
        cached = self._entries.get(options, {}).get(pattern)
        if cached is not None:
            return cached

        matcher = self._compiler(pattern, options)

        with self._lock:
            bucket = self._entries.setdefault(options, {})
            existing = bucket.get(pattern)
            if existing is not None:
                return existing

            if self._count < self._limit:
                bucket[pattern] = matcher
                self._count += 1
            elif not self._saturation_logged:
                self._saturation_logged = True
                logger.warning(
                    "Pattern cache is full; new patterns will be compiled on every match",
                    limit=self._limit,
                    pattern=pattern,
                )

        return matcher

    def clear(self) -> None:
        """Drop every stored entry"""
        with self._lock:
            self._entries.clear()
            self._count = 0
            self._saturation_logged = False
