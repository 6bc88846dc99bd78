"""Routing module - Pattern compilation, route registry and URL generation."""

from pageroutes_core.routing.pattern import CompiledPattern, Token, compile_pattern
from pageroutes_core.routing.querystring import ParsedUrl, parse_url, to_querystring
from pageroutes_core.routing.route import Route, UrlPair
from pageroutes_core.routing.registry import (
    FoundUrls,
    MatchResult,
    RegistrationForm,
    Routes,
    RouteSpec,
    TenantUrls,
)
from pageroutes_core.routing.tenants import ClubFolderRule, Tenant
from pageroutes_core.routing.loader import load_routes

__all__ = [
    "CompiledPattern",
    "Token",
    "compile_pattern",
    "ParsedUrl",
    "parse_url",
    "to_querystring",
    "Route",
    "UrlPair",
    "Routes",
    "RouteSpec",
    "RegistrationForm",
    "MatchResult",
    "FoundUrls",
    "TenantUrls",
    "ClubFolderRule",
    "Tenant",
    "load_routes",
]
