"""Querystring codec tests."""

import pytest
from pageroutes_core.routing.querystring import (
    decode_component,
    encode_component,
    parse_query,
    parse_url,
    to_querystring,
)


class TestToQuerystring:
    """Test query string encoding."""

    def test_encode_pairs(self):
        """Test keys keep mapping order."""
        assert to_querystring({"b": "b", "a": 1}) == "b=b&a=1"

    def test_drops_none(self):
        """Test None values are dropped."""
        assert to_querystring({"a": "x", "b": None}) == "a=x"
        assert to_querystring({"b": None}) == ""

    def test_empty(self):
        """Test empty input."""
        assert to_querystring({}) == ""
        assert to_querystring(None) == ""

    def test_sequence_joined_with_slash(self):
        """Test sequences are joined before encoding."""
        assert to_querystring({"c": [1, 2]}) == "c=1%2F2"

    def test_escapes_keys_and_values(self):
        """Test reserved characters are escaped."""
        assert to_querystring({"a b": "c&d=e"}) == "a%20b=c%26d%3De"

    def test_integral_floats(self):
        """Test whole floats stringify like integers."""
        assert to_querystring({"a": 2.0, "b": 2.5, "c": -0.0}) == "a=2&b=2.5&c=0"

    def test_booleans(self):
        """Test booleans stringify like JavaScript."""
        assert to_querystring({"x": True, "y": False}) == "x=true&y=false"


class TestComponentCodec:
    """Test component encoding."""

    @pytest.mark.parametrize("value", ["a b", "a/b", "a b / c", "100%", "é"])
    def test_round_trip(self, value):
        """Test encode then decode returns the value."""
        assert decode_component(encode_component(value)) == value

    def test_unreserved_characters_kept(self):
        """Test encodeURIComponent safe set."""
        assert encode_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"


class TestParsing:
    """Test URL parsing."""

    def test_parse_query(self):
        """Test repeated keys become lists."""
        assert parse_query("a=1&a=2&b=") == {"a": ["1", "2"], "b": ""}

    def test_parse_query_decodes(self):
        """Test values are decoded."""
        assert parse_query("?q=a%20b&r=c+d") == {"q": "a b", "r": "c d"}

    def test_parse_url(self):
        """Test URL components."""
        parsed = parse_url("/a/b?x=1#top")
        assert parsed.pathname == "/a/b"
        assert parsed.search == "?x=1"
        assert parsed.query == {"x": "1"}
        assert parsed.hash == "#top"
        assert parsed.href == "/a/b?x=1#top"

    def test_parse_url_without_query(self):
        """Test URL without query string."""
        parsed = parse_url("/a")
        assert parsed.search == ""
        assert parsed.query == {}

    def test_parse_url_double_slash(self):
        """Test a leading double slash is not read as a host."""
        parsed = parse_url("//evil/a/b?x=1")
        assert parsed.pathname == "//evil/a/b"
        assert parsed.query == {"x": "1"}

    def test_parse_url_absolute(self):
        """Test scheme and host are dropped from absolute URLs."""
        assert parse_url("https://app.example.com/a/b?x=1").pathname == "/a/b"
        assert parse_url("https://app.example.com").pathname == "/"
