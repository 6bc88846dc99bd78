"""Route - A named pattern bound to a page.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pageroutes_core.errors import MissingPageError
from pageroutes_core.routing.pattern import CompiledPattern, compile_pattern
from pageroutes_core.routing.querystring import decode_component, to_querystring

_INDEX_RE = re.compile(r"(^|/)index$")
_LEADING_SLASH_RE = re.compile(r"^/?")


def normalize_page(page: str) -> str:
    """Drop a trailing index segment and force a single leading slash."""
    page = _INDEX_RE.sub("", page)
    return _LEADING_SLASH_RE.sub("/", page, count=1)


@dataclass(frozen=True)
class UrlPair:
    """Outbound URL pair.

    ``href`` is the internal page reference, ``as_`` the public path
    shown to the user.
    """

    href: str
    as_: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to ``{"href": ..., "as": ...}``."""
        return {"href": self.href, "as": self.as_}


@dataclass(frozen=True, eq=False)
class Route:
    """Route definition.

    Compiled once on construction; immutable afterwards. Routes compare
    and hash by identity.

    Usage:
        route = Route(name="user", pattern="/users/:id", page="users/show")
        route.match("/users/42")          # {"id": "42"}
        route.get_urls({"id": 42, "tab": "posts"})
        # UrlPair(href="/users/show?id=42&tab=posts", as_="/users/42?tab=posts")
    """

    name: Optional[str] = None
    pattern: Optional[str] = None
    page: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    sensitive: bool = False
    strict: bool = False

    compiled: CompiledPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        page = self.page or self.name
        if not page:
            raise MissingPageError(self.pattern)

        object.__setattr__(self, "pattern", self.pattern or f"/{self.name}")
        object.__setattr__(self, "page", normalize_page(page))
        object.__setattr__(self, "meta", dict(self.meta or {}))
        object.__setattr__(
            self,
            "compiled",
            compile_pattern(self.pattern, sensitive=self.sensitive, strict=self.strict),
        )

    @property
    def param_keys(self) -> tuple:
        """Names of the pattern's named parameters, in order."""
        return self.compiled.param_keys

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Match a pathname.

        Returns:
            Decoded parameters if match, None otherwise
        """
        values = self.compiled.match(path)
        if values is None:
            return None

        params = {}
        for key, value in zip(self.compiled.keys, values):
            if value is None or not key.named:
                continue
            params[key.name] = decode_component(value)
        return params

    def get_href(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Internal reference: page plus every parameter as query."""
        return f"{self.page}?{to_querystring(params or {})}"

    def get_as(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """Public path: substituted pattern plus leftover parameters as query."""
        params = params or {}
        as_path = self.compiled.to_path(params) or "/"

        qs_keys = [key for key in params if key not in self.param_keys]
        if not qs_keys:
            return as_path

        qs_params = {key: params[key] for key in qs_keys}
        return f"{as_path}?{to_querystring(qs_params)}"

    def get_urls(self, params: Optional[Mapping[str, Any]] = None) -> UrlPair:
        """Build both halves of the URL pair."""
        return UrlPair(href=self.get_href(params), as_=self.get_as(params))


__all__ = [
    "Route",
    "UrlPair",
    "normalize_page",
]
