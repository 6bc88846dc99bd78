"""PageRoutes - Declarative page routing with club folders.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

PageRoutes maps public paths to internal page identifiers:
- Named route patterns (/events/:slug, /files/:path+, /:lang?/about)
- First-match-wins resolution with parameter decoding
- URL pair generation (internal href + public "as" path)
- Club folder stripping for multi-tenant path namespaces
- Dispatch and navigation adapters for the transport and client layers

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              PageRoutes                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                          Registration                                 │  │
│  │  add(...) ──▶ RouteSpec ──▶ Pattern Compiler ──▶ Route ──▶ Routes     │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │ Pattern Compiler│  │     Route       │  │       Route Registry        │ │
│  │                 │  │                 │  │                             │ │
│  │ - Tokenizer     │  │ - match         │  │ - Insertion order priority  │ │
│  │ - Matcher       │  │ - get_href      │  │ - Club folder stripping     │ │
│  │ - Templater     │  │ - get_as        │  │ - find_and_get_urls         │ │
│  │                 │  │ - get_urls      │  │ - resolve_tenant_route      │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │   Querystring   │  │    Dispatch     │  │        Navigation           │ │
│  │                 │  │                 │  │                             │ │
│  │ - Encode        │  │ - // redirect   │  │ - push/replace/prefetch     │ │
│  │ - Parse         │  │ - render        │  │ - Club routes               │ │
│  │                 │  │ - fallback      │  │ - Link props                │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Request Flow:
1. Transport redirects "//path" to "/path"
2. Registry strips the club folder when the host is the app domain
3. Routes are tried in registration order, first match wins
4. Matched params are merged over the query string
5. The page is rendered with the merged query, or the fallback runs

Usage:
    from pageroutes_core import Routes

    routes = Routes(app_domain="app.example.com")
    routes.add("home", "/", "index")
    routes.add("event", "/events/:slug", "events/show")
    routes.freeze()

    result = routes.match("/clubs/chess/events/open", "app.example.com")
    result.route.page      # "/events/show"
    result.query           # {"slug": "open"}

    routes.find_and_get_urls("event", {"slug": "open", "ref": "mail"}).urls
    # UrlPair(href="/events/show?slug=open&ref=mail", as_="/events/open?ref=mail")
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Errors
from pageroutes_core.errors import (
    ConfigurationError,
    DuplicateRouteError,
    MissingPageError,
    MissingParameterError,
    PatternError,
    RegistryFrozenError,
    RouteNotFoundError,
    RoutingError,
)

# Routing
from pageroutes_core.routing.pattern import CompiledPattern, compile_pattern
from pageroutes_core.routing.querystring import ParsedUrl, parse_url, to_querystring
from pageroutes_core.routing.route import Route, UrlPair
from pageroutes_core.routing.registry import (
    FoundUrls,
    MatchResult,
    Routes,
    RouteSpec,
    TenantUrls,
)
from pageroutes_core.routing.tenants import ClubFolderRule, Tenant
from pageroutes_core.routing.loader import load_routes

# Dispatch
from pageroutes_core.dispatch.request import Request, Response
from pageroutes_core.dispatch.handler import DispatchContext, RequestHandler

# Navigation
from pageroutes_core.navigation.navigator import Navigator, link_props

# Utils
from pageroutes_core.utils.config import RoutesConfig, configure_logging, load_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "RoutingError",
    "ConfigurationError",
    "DuplicateRouteError",
    "MissingPageError",
    "PatternError",
    "RegistryFrozenError",
    "MissingParameterError",
    "RouteNotFoundError",
    # Routing
    "CompiledPattern",
    "compile_pattern",
    "ParsedUrl",
    "parse_url",
    "to_querystring",
    "Route",
    "UrlPair",
    "Routes",
    "RouteSpec",
    "MatchResult",
    "FoundUrls",
    "TenantUrls",
    "ClubFolderRule",
    "Tenant",
    "load_routes",
    # Dispatch
    "Request",
    "Response",
    "RequestHandler",
    "DispatchContext",
    # Navigation
    "Navigator",
    "link_props",
    # Utils
    "RoutesConfig",
    "configure_logging",
    "load_config",
]
