"""Tests for PathMatcher and match_path."""

import pytest
from pydantic import ValidationError

from route_resolver.common.config import RouterConfig
from route_resolver.matching import (
    CompiledMatcher,
    CompileOptions,
    MatchSpec,
    PathMatcher,
    PatternCache,
    compile_pattern,
    match_path,
)
from route_resolver.tree import RouteDeclaration


class TestPathMatcher:
    """Test PathMatcher resolution semantics"""

    def test_named_parameter(self, matcher):
        """Test extracting a named parameter"""
        result = matcher.match("/one/two", {"path": "/one/:id"})

        assert result is not None
        assert result.params == {"id": "two"}
        assert result.is_exact is True
        assert result.matched_url == "/one/two"
        assert result.pattern == "/one/:id"

    def test_bare_string_spec(self, matcher):
        result = matcher.match("/one/two", "/one/:id")
        assert result is not None
        assert result.params == {"id": "two"}

    def test_prefix_match_is_not_exact(self, matcher):
        """Test a non-exact pattern matches a leading portion"""
        result = matcher.match("/one/two/three", "/one/:id")

        assert result is not None
        assert result.matched_url == "/one/two"
        assert result.is_exact is False

    def test_exact_rejects_prefix_match(self, matcher):
        assert matcher.match("/one/two/three", {"path": "/one/:id", "exact": True}) is None

    def test_strict_trailing_slash(self, matcher):
        """Test strict mode treats a trailing slash literally"""
        strict = matcher.match(
            "/one/two/", {"path": "/one/:id", "strict": True, "exact": True}
        )
        loose = matcher.match(
            "/one/two/", {"path": "/one/:id", "strict": False, "exact": True}
        )

        assert strict is None
        assert loose is not None
        assert loose.params == {"id": "two"}

    def test_strict_without_exact_matches_prefix(self, matcher):
        """Test strict prefix matching stops before the trailing slash"""
        result = matcher.match("/one/two/", {"path": "/one/:id", "strict": True})

        assert result is not None
        assert result.matched_url == "/one/two"
        assert result.is_exact is False

    def test_sensitive(self, matcher):
        """Test case sensitivity"""
        assert matcher.match("/ABC", {"path": "/abc", "sensitive": True}) is None
        assert matcher.match("/ABC", {"path": "/abc", "sensitive": False}) is not None

    def test_alternatives(self, matcher):
        """Test the first matching alternative wins"""
        result = matcher.match("/b", {"path": ["/a", "/b"]})

        assert result is not None
        assert result.pattern == "/b"

    def test_first_alternative_wins(self, matcher):
        result = matcher.match("/users/new", ["/users/new", "/users/:id"])
        assert result.pattern == "/users/new"
        assert result.params == {}

    def test_exact_mismatch_tries_next_alternative(self, matcher):
        """Test an inexact candidate does not abort the remaining candidates"""
        result = matcher.match("/a/b", {"path": ["/a", "/a/b"], "exact": True})

        assert result is not None
        assert result.pattern == "/a/b"
        assert result.is_exact

    def test_missing_patterns_are_skipped(self, matcher):
        result = matcher.match("/x", {"path": [None, "/x"]})
        assert result.pattern == "/x"

    def test_empty_pattern_matches_everything(self, matcher):
        """Test the empty pattern is a real pattern, not a missing one"""
        result = matcher.match("/anything", {"path": ""})

        assert result is not None
        assert result.matched_url == ""
        assert result.is_exact is False

    def test_spec_without_path(self, matcher):
        assert matcher.match("/x", {}) is None
        assert matcher.match("/x", {"exact": True}) is None

    def test_no_match(self, matcher):
        assert matcher.match("/other", "/one/:id") is None

    def test_root_match_url(self, matcher):
        """Test the root pattern always reports "/" as the matched URL"""
        exact = matcher.match("/", {"path": "/"})
        nested = matcher.match("/users/1", {"path": "/"})

        assert exact.matched_url == "/"
        assert exact.is_exact is True
        assert nested.matched_url == "/"
        assert nested.is_exact is False

    def test_optional_parameter_is_present(self, matcher):
        """Test every declared parameter is present in params"""
        result = matcher.match("/users", {"path": "/users/:id?", "exact": True})
        assert result.params == {"id": None}

    def test_declaration_as_spec(self, matcher):
        declaration = RouteDeclaration(path="/posts/:slug", exact=True)
        result = matcher.match("/posts/hello", declaration)
        assert result.params == {"slug": "hello"}

    def test_unsupported_spec(self, matcher):
        with pytest.raises(TypeError, match="match spec"):
            matcher.match("/x", 42)

    def test_exact_iff_full_match(self, matcher):
        """Test exact matching agrees with the compiled matcher's full match"""
        patterns = ["/", "/one", "/one/:id", "/one/:id?", "/files/*", "/:a.:b", "/x/:p+"]
        pathnames = ["/", "/one", "/one/", "/one/two", "/one/two/three", "/files/a/b", "/f.txt", "/x/1/2"]

        for pattern in patterns:
            compiled = compile_pattern(pattern, CompileOptions(end=True))
            for pathname in pathnames:
                found = compiled.test(pathname)
                expected = found is not None and found[0] == pathname
                result = matcher.match(pathname, {"path": pattern, "exact": True})
                assert (result is not None) == expected, (pattern, pathname)

    def test_key_value_mismatch_is_a_bug(self):
        """Test a compiler returning mismatched keys is caught"""
        good = compile_pattern("/:a")

        def broken(pattern, options):
            return CompiledMatcher(
                pattern=pattern, options=options, regex=good.regex, keys=()
            )

        matcher = PathMatcher(cache=PatternCache(compiler=broken))
        with pytest.raises(ValueError):
            matcher.match("/x", "/:a")

    def test_capacity_exhausted_still_correct(self):
        """Test lookups past the cache limit still resolve correctly"""
        cache = PatternCache(limit=3)
        matcher = PathMatcher(cache=cache)

        for name in ("a", "b", "c"):
            assert matcher.match(f"/{name}", f"/{name}") is not None
        assert cache.is_full

        result = matcher.match("/d/9", "/d/:x")
        assert result.params == {"x": "9"}
        assert result.pattern == "/d/:x"
        assert len(cache) == 3

    def test_cache_sized_from_config(self):
        matcher = PathMatcher(config=RouterConfig(cache_limit=5))
        assert matcher.cache.limit == 5


class TestMatchSpec:
    """Test MatchSpec normalization"""

    def test_coerce_string(self):
        spec = MatchSpec.coerce("/a")
        assert spec.candidates() == ["/a"]
        assert spec.compile_options() == CompileOptions()

    def test_coerce_mapping(self):
        spec = MatchSpec.coerce({"path": ["/a", "/b"], "exact": True, "strict": True})
        assert spec.candidates() == ["/a", "/b"]
        assert spec.compile_options() == CompileOptions(end=True, strict=True)

    def test_frozen(self):
        spec = MatchSpec(path="/a")
        with pytest.raises(ValidationError):
            spec.exact = True

    def test_rejects_non_pattern_path(self):
        """Test only strings and sequences of strings are accepted as paths"""
        assert not MatchSpec.model_config.get("arbitrary_types_allowed")
        with pytest.raises(ValidationError):
            MatchSpec(path=object())


def test_match_path_uses_default_matcher():
    """Test the module-level helper"""
    result = match_path("/users/7", "/users/:id")
    assert result.params == {"id": "7"}
