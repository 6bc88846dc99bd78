"""Navigator - Route-aware wrapper around a client navigation backend.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pageroutes_core.routing.registry import Routes
from pageroutes_core.routing.tenants import Tenant

logger = logging.getLogger(__name__)


class Navigator:
    """Navigate by route name or literal path.

    The backend is any client router with ``push``, ``replace`` and
    ``prefetch`` methods taking ``(href, as_, options)``.

    Usage:
        navigator = Navigator(routes, backend=client_router)
        navigator.push_route("event", {"slug": "open"})
        navigator.push_route("/about")
        navigator.push_club_route(Tenant("chess"), "calendar")
    """

    def __init__(self, routes: Routes, backend: Any):
        self.routes = routes
        self.backend = backend

    def _navigate(
        self,
        method: str,
        route: str,
        params: Optional[Mapping[str, Any]],
        options: Any,
    ) -> Any:
        found = self.routes.find_and_get_urls(route, params)
        urls = found.urls
        logger.debug(f"{method} {urls.href} as {urls.as_}")
        # Literal paths hand their params to the backend in place of options
        return getattr(self.backend, method)(
            urls.href,
            urls.as_,
            options if found.by_name else params,
        )

    def push_route(
        self,
        route: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> Any:
        """Push a new history entry."""
        return self._navigate("push", route, params, options)

    def replace_route(
        self,
        route: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> Any:
        """Replace the current history entry."""
        return self._navigate("replace", route, params, options)

    def prefetch_route(
        self,
        route: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> Any:
        """Prefetch a route's page."""
        return self._navigate("prefetch", route, params, options)

    def _navigate_club(
        self,
        method: str,
        tenant: Union[Tenant, Mapping[str, Any]],
        name: str,
        params: Optional[Mapping[str, Any]],
        options: Any,
    ) -> Any:
        urls = self.routes.resolve_tenant_route(tenant, name, params).urls
        return getattr(self.backend, method)(urls.href, urls.as_, options)

    def push_club_route(
        self,
        tenant: Union[Tenant, Mapping[str, Any]],
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> Any:
        """Push a club-scoped route."""
        return self._navigate_club("push", tenant, name, params, options)

    def replace_club_route(
        self,
        tenant: Union[Tenant, Mapping[str, Any]],
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> Any:
        """Replace the current entry with a club-scoped route."""
        return self._navigate_club("replace", tenant, name, params, options)


def link_props(
    routes: Routes,
    route: Optional[str] = None,
    to: Optional[str] = None,
    params: Optional[Mapping[str, Any]] = None,
    **props: Any,
) -> Dict[str, Any]:
    """Resolve link properties.

    ``route`` (or its alias ``to``) is resolved into ``href``/``as``,
    overriding any given ``href``. Without either, props pass through.
    """
    name_or_url = route or to
    if name_or_url:
        props.update(routes.find_and_get_urls(name_or_url, params).urls.to_dict())
    return props


__all__ = [
    "Navigator",
    "link_props",
]
