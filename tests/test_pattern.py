"""Pattern compiler tests."""

import pytest
from pageroutes_core.errors import MissingParameterError, PatternError
from pageroutes_core.routing.pattern import compile_pattern
from pageroutes_core.routing.querystring import decode_component


class TestPatternMatching:
    """Test forward matching."""

    def test_named_parameter(self):
        """Test single named parameter."""
        compiled = compile_pattern("/users/:id")
        assert compiled.match("/users/42") == ("42",)
        assert compiled.match("/users") is None
        assert compiled.match("/users/42/posts") is None

    def test_trailing_slash(self):
        """Test optional trailing slash unless strict."""
        assert compile_pattern("/users/:id").match("/users/42/") == ("42",)
        assert compile_pattern("/users/:id", strict=True).match("/users/42/") is None

    def test_case_sensitivity(self):
        """Test case-insensitive matching by default."""
        assert compile_pattern("/users/:id").match("/USERS/42") == ("42",)
        assert compile_pattern("/users/:id", sensitive=True).match("/USERS/42") is None

    def test_optional_parameter(self):
        """Test optional parameter."""
        compiled = compile_pattern("/users/:id?")
        assert compiled.match("/users") == (None,)
        assert compiled.match("/users/7") == ("7",)

    def test_leading_optional_parameter(self):
        """Test optional parameter before literals."""
        compiled = compile_pattern("/:lang?/about")
        assert compiled.match("/about") == (None,)
        assert compiled.match("/fr/about") == ("fr",)

    def test_one_or_more(self):
        """Test repeated parameter joined into one value."""
        compiled = compile_pattern("/files/:path+")
        assert compiled.match("/files/a/b/c") == ("a/b/c",)
        assert compiled.match("/files") is None

    def test_zero_or_more(self):
        """Test optional repeated parameter."""
        compiled = compile_pattern("/files/:path*")
        assert compiled.match("/files") == (None,)
        assert compiled.match("/files/a/b") == ("a/b",)

    def test_custom_sub_pattern(self):
        """Test parameter with custom regex."""
        compiled = compile_pattern(r"/users/:id(\d+)")
        assert compiled.match("/users/12") == ("12",)
        assert compiled.match("/users/abc") is None

    def test_wildcard(self):
        """Test bare asterisk capture."""
        compiled = compile_pattern("/static/*")
        assert compiled.match("/static/css/app.css") == ("css/app.css",)
        assert compiled.param_keys == ()

    def test_escaped_character(self):
        """Test escaped colon is literal."""
        compiled = compile_pattern(r"/a\:b")
        assert compiled.match("/a:b") == ()
        assert compiled.param_keys == ()

    def test_unnamed_captures_excluded_from_keys(self):
        """Test unnamed captures keep a slot but no key."""
        compiled = compile_pattern("/clubs/:folder([a-zA-Z0-9_-]+)(.*)")
        assert compiled.param_keys == ("folder",)
        assert len(compiled.keys) == 2
        assert compiled.match("/clubs/chess/calendar") == ("chess", "/calendar")


class TestPatternTemplating:
    """Test reverse substitution."""

    def test_substitutes_values(self):
        """Test named parameter substitution."""
        assert compile_pattern("/users/:id").to_path({"id": 42}) == "/users/42"

    def test_encodes_segments(self):
        """Test values are percent-encoded per segment."""
        compiled = compile_pattern("/users/:id")
        assert compiled.to_path({"id": "a b/c"}) == "/users/a%20b%2Fc"

    def test_repeated_values(self):
        """Test sequence values for repeated parameters."""
        compiled = compile_pattern("/a/:b/:c+")
        assert compiled.to_path({"b": "b", "c": [1, 2]}) == "/a/b/1/2"

    def test_missing_required_parameter(self):
        """Test missing required parameter fails."""
        with pytest.raises(MissingParameterError) as exc_info:
            compile_pattern("/users/:id").to_path({})
        assert exc_info.value.name == "id"

    def test_missing_optional_parameter(self):
        """Test omitted optional parameter is skipped."""
        assert compile_pattern("/users/:id?").to_path({}) == "/users"
        assert compile_pattern("/users/:id?").to_path({"id": None}) == "/users"

    def test_empty_path(self):
        """Test templater may produce an empty path."""
        assert compile_pattern("/:a?").to_path({}) == ""

    def test_sequence_for_single_parameter(self):
        """Test sequence value for non-repeated parameter fails."""
        with pytest.raises(MissingParameterError):
            compile_pattern("/users/:id").to_path({"id": [1, 2]})

    def test_empty_sequence(self):
        """Test empty sequence for required repeated parameter fails."""
        with pytest.raises(MissingParameterError):
            compile_pattern("/files/:path+").to_path({"path": []})
        assert compile_pattern("/files/:path*").to_path({"path": []}) == "/files"

    def test_value_must_fit_sub_pattern(self):
        """Test values are checked against custom regex."""
        with pytest.raises(MissingParameterError):
            compile_pattern(r"/users/:id(\d+)").to_path({"id": "abc"})

    def test_unnamed_capture_accepting_empty(self):
        """Test trailing catch-all needs no value."""
        assert compile_pattern("/docs/(.*)").to_path({}) == "/docs"

    def test_round_trip(self):
        """Test match recovers templated parameters."""
        cases = [
            ("/users/:id", {"id": "a b"}),
            ("/a/:b/:c?", {"b": "x/y"}),
            ("/:lang?/about/:page", {"lang": "fr", "page": "team"}),
            (r"/posts/:year(\d+)/:slug", {"year": "2024", "slug": "hello-world"}),
        ]
        for pattern, params in cases:
            compiled = compile_pattern(pattern)
            values = compiled.match(compiled.to_path(params))
            recovered = {
                key.name: decode_component(value)
                for key, value in zip(compiled.keys, values)
                if value is not None
            }
            assert recovered == params


class TestPatternErrors:
    """Test invalid patterns fail at compile time."""

    def test_unbalanced_parenthesis(self):
        """Test unclosed group."""
        with pytest.raises(PatternError):
            compile_pattern("/users/:id(")

    def test_stray_closing_parenthesis(self):
        """Test stray closing paren."""
        with pytest.raises(PatternError):
            compile_pattern("/users)")

    def test_invalid_regex(self):
        """Test invalid custom regex."""
        with pytest.raises(PatternError):
            compile_pattern("/users/:id([)")

    def test_duplicate_parameter(self):
        """Test duplicate names."""
        with pytest.raises(PatternError):
            compile_pattern("/:a/:a")
