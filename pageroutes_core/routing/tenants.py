"""Tenants - Club folder path namespaces.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

On the shared app domain every club lives under ``/clubs/{folder}``.
Incoming paths have the folder stripped before route matching, and
outbound paths get it re-added unless the club has its own domain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pageroutes_core.routing.pattern import compile_pattern

logger = logging.getLogger(__name__)

DEFAULT_CLUBS_PREFIX = "/clubs"
FOLDER_PATTERN = "[a-zA-Z0-9_-]+"


@dataclass(frozen=True)
class Tenant:
    """A club addressed either by folder or by its own domain."""

    folder: str
    external_domain: Optional[str] = None

    @property
    def has_external_domain(self) -> bool:
        """Check if the club is served from its own domain."""
        return bool(self.external_domain)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tenant":
        """Create tenant from dictionary (snake or camel case keys)."""
        return cls(
            folder=data["folder"],
            external_domain=data.get("external_domain", data.get("externalDomain")),
        )


class ClubFolderRule:
    """Strips and re-adds the club folder prefix."""

    def __init__(self, prefix: str = DEFAULT_CLUBS_PREFIX):
        self.prefix = "/" + prefix.strip("/")
        self._pattern = compile_pattern(f"{self.prefix}/:folder({FOLDER_PATTERN})(.*)")

    def folder_of(self, pathname: str) -> Optional[str]:
        """Get the club folder of a path, if it has one."""
        values = self._pattern.match(pathname)
        if values is None:
            return None
        return values[0]

    def strip(self, pathname: str) -> str:
        """Remove the club folder prefix from a path.

        The remainder always starts with exactly one ``/``. Paths
        without the prefix are returned unchanged.
        """
        folder = self.folder_of(pathname)
        if folder is None:
            return pathname

        stripped = pathname[len(f"{self.prefix}/{folder}"):]
        logger.debug(f"Stripped club folder {folder!r} from {pathname!r}")
        return stripped if stripped.startswith("/") else f"/{stripped}"

    def prefix_path(self, folder: str, path: str) -> str:
        """Put a path under a club folder."""
        return f"{self.prefix}/{folder}{path}"


__all__ = [
    "Tenant",
    "ClubFolderRule",
    "DEFAULT_CLUBS_PREFIX",
]
