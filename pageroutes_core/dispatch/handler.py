"""Request Handler - Hands matched routes to the rendering layer.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pageroutes_core.dispatch.request import Request, Response
from pageroutes_core.routing.querystring import ParsedUrl, QueryValue
from pageroutes_core.routing.registry import Routes
from pageroutes_core.routing.route import Route

logger = logging.getLogger(__name__)

PERMANENT_REDIRECT = 308


@dataclass
class DispatchContext:
    """Everything a custom handler needs to serve a matched route."""

    request: Request
    route: Route
    query: Dict[str, QueryValue]
    params: Dict[str, str]


RenderFn = Callable[[Request, str, Dict[str, QueryValue]], Any]
FallbackFn = Callable[[Request, ParsedUrl], Any]
CustomHandlerFn = Callable[[DispatchContext], Any]


class RequestHandler:
    """Dispatch requests through a route registry.

    Flow:
    ┌────────────────────────────────────────────────────────────┐
    │                    Request Handler                          │
    │                                                             │
    │  "//path" ──▶ 308 redirect to "/path"                       │
    │                                                             │
    │  Request ──▶ Routes.match ──┬─▶ hit  ──▶ render / custom    │
    │                             └─▶ miss ──▶ fallback           │
    └────────────────────────────────────────────────────────────┘

    Usage:
        handler = RequestHandler(
            routes,
            render=lambda req, page, query: app.render(req, page, query),
            fallback=lambda req, parsed: app.default_handler(req, parsed),
        )
        result = handler(Request(url="/clubs/chess/calendar", hostname="app.example.com"))
    """

    def __init__(
        self,
        routes: Routes,
        render: Optional[RenderFn] = None,
        fallback: Optional[FallbackFn] = None,
        custom_handler: Optional[CustomHandlerFn] = None,
    ):
        if render is None and custom_handler is None:
            raise ValueError("RequestHandler needs a render function or a custom handler")

        self.routes = routes
        self.render = render
        self.fallback = fallback
        self.custom_handler = custom_handler

    def __call__(self, request: Request) -> Any:
        return self.handle(request)

    def handle(self, request: Request) -> Any:
        """Dispatch a request.

        Returns:
            A redirect Response for duplicated leading slashes, otherwise
            whatever the render, custom or fallback handler returns
        """
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        if request.original_url.startswith("//"):
            location = request.original_url[1:]
            logger.warning(f"[{request_id}] Redirecting {request.original_url!r} -> {location!r}")
            return Response.redirect(location, status=PERMANENT_REDIRECT)

        logger.debug(f"[{request_id}] --> {request.method} {request.hostname}{request.url}")

        result = self.routes.match(request.url, request.hostname)

        if result.route is not None:
            if self.custom_handler is not None:
                response = self.custom_handler(
                    DispatchContext(
                        request=request,
                        route=result.route,
                        query=result.query,
                        params=result.params,
                    )
                )
            else:
                response = self.render(request, result.route.page, result.query)
            outcome = f"route {result.route.name or result.route.pattern!r}"
        elif self.fallback is not None:
            response = self.fallback(request, result.parsed_url)
            outcome = "fallback"
        else:
            response = Response(status=404, body=b"Not Found")
            outcome = "not found"

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(f"[{request_id}] <-- {outcome} ({duration_ms:.2f}ms)")
        return response


__all__ = [
    "RequestHandler",
    "DispatchContext",
    "PERMANENT_REDIRECT",
]
