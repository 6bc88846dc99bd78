"""Querystring - Query string codec and URL parsing helpers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import parse_qsl, quote, unquote

QueryValue = Union[str, List[str]]

# Characters left alone by encodeURIComponent
COMPONENT_SAFE = "-_.!~*'()"

# Characters left alone by encodeURI, minus "?" and "#"
WILDCARD_SAFE = COMPONENT_SAFE + ";,/:@&=+$"

_ORIGIN_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://[^/?#]*")


@dataclass(frozen=True)
class ParsedUrl:
    """Parsed request URL."""

    href: str
    pathname: str
    search: str = ""
    query: Dict[str, QueryValue] = field(default_factory=dict)
    hash: str = ""


def stringify(value: Any) -> str:
    """Convert a parameter value to its string form."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_component(value: Any, safe: str = COMPONENT_SAFE) -> str:
    """Percent-encode a single URL component."""
    return quote(stringify(value), safe=safe)


def decode_component(value: str) -> str:
    """Decode percent-escapes in a URL component."""
    return unquote(value)


def to_querystring(params: Optional[Mapping[str, Any]]) -> str:
    """Encode a parameter mapping as a query string.

    Keys keep the mapping's order, ``None`` values are dropped and
    sequence values are joined with ``/`` before encoding.

    Args:
        params: Parameter mapping

    Returns:
        Query string without the leading ``?``
    """
    if not params:
        return ""

    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = "/".join(stringify(item) for item in value)
        pairs.append(f"{encode_component(key)}={encode_component(value)}")

    return "&".join(pairs)


def parse_query(search: str) -> Dict[str, QueryValue]:
    """Parse a query string.

    Single occurrences map to strings, repeated keys to lists.
    """
    if search.startswith("?"):
        search = search[1:]

    query: Dict[str, QueryValue] = {}
    for key, value in parse_qsl(search, keep_blank_values=True):
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]

    return query


def parse_url(url: str) -> ParsedUrl:
    """Split a request URL into pathname and parsed query.

    Only a scheme-qualified URL has an origin to drop. A path starting
    with ``//`` is kept whole rather than read as a host.
    """
    rest, _, fragment = url.partition("#")
    rest, _, query_string = rest.partition("?")

    origin = _ORIGIN_RE.match(rest)
    if origin:
        rest = rest[origin.end():] or "/"

    return ParsedUrl(
        href=url,
        pathname=rest,
        search=f"?{query_string}" if query_string else "",
        query=parse_query(query_string),
        hash=f"#{fragment}" if fragment else "",
    )


__all__ = [
    "ParsedUrl",
    "QueryValue",
    "stringify",
    "encode_component",
    "decode_component",
    "to_querystring",
    "parse_query",
    "parse_url",
]
