"""Request/Response - Transport objects at the dispatch boundary.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Request:
    """Incoming request as seen by the dispatcher.

    ``url`` is the path plus query string; ``original_url`` is the URL
    before any rewriting by the transport (defaults to ``url``).
    """

    url: str
    hostname: str = ""
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    original_url: str = ""

    # Transport specific extras
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.original_url:
            self.original_url = self.url

    @property
    def path(self) -> str:
        """Get path without query string."""
        return self.url.split("?", 1)[0]

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default


@dataclass
class Response:
    """Response produced by the dispatcher itself (redirects)."""

    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_redirect(self) -> bool:
        """Check if response is redirect (3xx)."""
        return 300 <= self.status < 400

    @property
    def location(self) -> Optional[str]:
        """Get redirect target."""
        return self.headers.get("Location")

    @classmethod
    def redirect(
        cls,
        location: str,
        status: int = 302,
    ) -> "Response":
        """Create redirect response."""
        return cls(
            status=status,
            headers={"Location": location},
        )


__all__ = [
    "Request",
    "Response",
]
