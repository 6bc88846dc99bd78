"""Route Registry - Ordered route table with first-match dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from pageroutes_core.errors import (
    ConfigurationError,
    DuplicateRouteError,
    RegistryFrozenError,
    RouteNotFoundError,
)
from pageroutes_core.routing.querystring import ParsedUrl, QueryValue, parse_url
from pageroutes_core.routing.route import Route, UrlPair
from pageroutes_core.routing.tenants import ClubFolderRule, Tenant
from pageroutes_core.utils.config import RoutesConfig

logger = logging.getLogger(__name__)


class RegistrationForm(Enum):
    """Shapes accepted by ``Routes.add``."""

    NAME = auto()
    NAME_PATTERN = auto()
    NAME_PATTERN_PAGE = auto()
    PATTERN_PAGE = auto()
    DESCRIPTOR = auto()


_SPEC_FIELDS = ("name", "pattern", "page", "meta")


@dataclass(frozen=True)
class RouteSpec:
    """Normalized route registration."""

    name: Optional[str] = None
    pattern: Optional[str] = None
    page: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    form: RegistrationForm = RegistrationForm.DESCRIPTOR

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RouteSpec":
        """Create spec from a ``{name, pattern, page, meta}`` mapping."""
        unknown = set(data) - set(_SPEC_FIELDS)
        if unknown:
            raise ConfigurationError(f"Unknown route option(s): {', '.join(sorted(unknown))}")
        return cls(
            name=data.get("name") or None,
            pattern=data.get("pattern"),
            page=data.get("page"),
            meta=dict(data.get("meta") or {}),
        )

    @classmethod
    def from_args(cls, *args: Any, **kwargs: Any) -> "RouteSpec":
        """Resolve any accepted ``add`` call shape into a spec.

        Accepted:
            (spec)                  RouteSpec instance
            (mapping)               {name, pattern, page, meta}
            (**options)             keyword form of the mapping
            (name)
            (name, pattern)
            (name, pattern, page)
            (pattern, page)         first argument starts with "/"

        Positional forms also take ``pattern``, ``page`` and ``meta``
        keywords; ``pattern`` cannot be given twice for the pattern-first
        form.
        """
        if not args:
            if not kwargs:
                raise ConfigurationError("No route given")
            return cls.from_mapping(kwargs)

        first = args[0]
        if len(args) == 1 and not kwargs:
            if isinstance(first, RouteSpec):
                return first
            if isinstance(first, Mapping):
                return cls.from_mapping(first)

        if len(args) > 3 or not isinstance(first, str):
            raise ConfigurationError(f"Unsupported route arguments: {args!r}")

        extra = set(kwargs) - {"pattern", "page", "meta"}
        if extra:
            raise ConfigurationError(f"Unknown route option(s): {', '.join(sorted(extra))}")

        meta = dict(kwargs.get("meta") or {})

        if first.startswith("/"):
            if len(args) > 2 or "pattern" in kwargs:
                raise ConfigurationError(f"Unsupported route arguments: {args!r}")
            name, pattern, page = None, first, (args[1] if len(args) > 1 else None)
            form = RegistrationForm.PATTERN_PAGE
        else:
            name, pattern, page = (tuple(args) + (None, None))[:3]
            form = (
                RegistrationForm.NAME,
                RegistrationForm.NAME_PATTERN,
                RegistrationForm.NAME_PATTERN_PAGE,
            )[len(args) - 1]

        # Keyword pattern/page override the positional ones
        if "pattern" in kwargs or "page" in kwargs:
            pattern = kwargs.get("pattern", pattern)
            page = kwargs.get("page", page)
            form = RegistrationForm.DESCRIPTOR

        return cls(name=name or None, pattern=pattern, page=page, meta=meta, form=form)

    def build(self, sensitive: bool = False, strict: bool = False) -> Route:
        """Compile the spec into a Route."""
        return Route(
            name=self.name,
            pattern=self.pattern,
            page=self.page,
            meta=self.meta,
            sensitive=sensitive,
            strict=strict,
        )


@dataclass
class MatchResult:
    """Result of matching a request URL.

    ``route`` is None when nothing matched; ``query`` is then the plain
    parsed query string.
    """

    route: Optional[Route]
    params: Dict[str, str]
    query: Dict[str, QueryValue]
    parsed_url: ParsedUrl

    @property
    def matched(self) -> bool:
        """Check if a route was found."""
        return self.route is not None


@dataclass
class FoundUrls:
    """URL pair resolved from a route name or a literal path."""

    route: Optional[Route]
    urls: UrlPair
    by_name: bool = False


@dataclass
class TenantUrls:
    """URL pair resolved for a club."""

    route: Route
    urls: UrlPair


class Routes:
    """Route registry.

    Features:
    - Named and unnamed routes
    - First-match-wins dispatch in registration order
    - Club folder stripping on the app domain
    - URL pair generation by name or literal path
    - Build once, then freeze

    Usage:
        routes = Routes(app_domain="app.example.com")
        routes.add("home", "/", "index")
        routes.add("event", "/events/:slug", "events/show")
        routes.add("/about", "static/about")
        routes.freeze()

        result = routes.match("/clubs/chess/events/open", "app.example.com")
        if result.route:
            render(result.route.page, result.query)

        routes.find_and_get_urls("event", {"slug": "open"}).urls
    """

    def __init__(
        self,
        app_domain: Optional[str] = None,
        config: Optional[RoutesConfig] = None,
    ):
        self.config = config or RoutesConfig()
        self.app_domain = app_domain if app_domain is not None else self.config.app_domain
        self.club_folders = ClubFolderRule(self.config.clubs_prefix)
        self._routes: Tuple[Route, ...] = ()
        self._frozen = False
        self._lock = threading.Lock()

    @property
    def routes(self) -> Tuple[Route, ...]:
        """Registered routes, in priority order."""
        return self._routes

    @property
    def frozen(self) -> bool:
        """Check if registration is closed."""
        return self._frozen

    def add(self, *args: Any, **kwargs: Any) -> "Routes":
        """Register a route.

        Args:
            *args: ``(name)``, ``(name, pattern)``, ``(name, pattern, page)``,
                ``(pattern, page)``, a ``RouteSpec`` or a mapping
            **kwargs: ``name``, ``pattern``, ``page``, ``meta``

        Raises:
            DuplicateRouteError: If the name is already registered
            MissingPageError: If no page can be derived
            PatternError: If the pattern is not valid
            RegistryFrozenError: If the registry was frozen
        """
        spec = RouteSpec.from_args(*args, **kwargs)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot add route {spec.name or spec.pattern!r} after freeze()"
                )
            if self.find_by_name(spec.name):
                raise DuplicateRouteError(spec.name)

            route = spec.build(
                sensitive=self.config.case_sensitive,
                strict=self.config.strict,
            )
            self._routes = self._routes + (route,)

        logger.debug(f"Added route {route.name!r}: {route.pattern} -> {route.page}")
        return self

    def freeze(self) -> "Routes":
        """Close registration. The registry is read-only afterwards."""
        with self._lock:
            self._frozen = True
        logger.info(f"Route registry frozen with {len(self._routes)} routes")
        return self

    def find_by_name(self, name: Optional[str]) -> Optional[Route]:
        """Find a route by name."""
        if not name:
            return None
        for route in self._routes:
            if route.name == name:
                return route
        return None

    def normalize_path(self, pathname: str, hostname: Optional[str] = None) -> str:
        """Strip the club folder when the hostname is the app domain.

        Both being unset counts as a match, so a registry without an app
        domain strips folders from hostless lookups such as
        ``find_and_get_urls``.
        """
        if hostname == self.app_domain:
            return self.club_folders.strip(pathname)
        return pathname

    def match(self, url: str, hostname: Optional[str] = None) -> MatchResult:
        """Match a request URL to the first fitting route.

        Args:
            url: Request path with optional query string
            hostname: Request hostname

        Returns:
            MatchResult; matched params override query keys of the same name
        """
        parsed_url = parse_url(url)
        pathname = self.normalize_path(parsed_url.pathname, hostname)

        for route in self._routes:
            params = route.match(pathname)
            if params is not None:
                return MatchResult(
                    route=route,
                    params=params,
                    query={**parsed_url.query, **params},
                    parsed_url=parsed_url,
                )

        logger.debug(f"No route matches {pathname!r}")
        return MatchResult(
            route=None,
            params={},
            query=dict(parsed_url.query),
            parsed_url=parsed_url,
        )

    def find_and_get_urls(
        self,
        name_or_url: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> FoundUrls:
        """Resolve a route name or a literal path into a URL pair.

        A registered name uses ``params``. Anything else is treated as a
        literal path: ``as`` is the path itself and ``href`` comes from the
        matched route and the path's own query (or the path if unmatched).
        """
        route = self.find_by_name(name_or_url)
        if route:
            return FoundUrls(route=route, urls=route.get_urls(params), by_name=True)

        result = self.match(name_or_url)
        href = result.route.get_href(result.query) if result.route else name_or_url
        return FoundUrls(
            route=result.route,
            urls=UrlPair(href=href, as_=name_or_url),
            by_name=False,
        )

    def resolve_tenant_route(
        self,
        tenant: Union[Tenant, Mapping[str, Any]],
        name: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> TenantUrls:
        """Resolve a named route for a club.

        Clubs without their own domain get the club folder prefixed to
        ``as``; ``href`` is never changed.

        Raises:
            RouteNotFoundError: If no route has this name
        """
        if not isinstance(tenant, Tenant):
            tenant = Tenant.from_dict(dict(tenant))

        route = self.find_by_name(name)
        if route is None:
            raise RouteNotFoundError(name)

        urls = route.get_urls(params)
        if not tenant.has_external_domain:
            urls = UrlPair(
                href=urls.href,
                as_=self.club_folders.prefix_path(tenant.folder, urls.as_),
            )

        return TenantUrls(route=route, urls=urls)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)


__all__ = [
    "Routes",
    "RouteSpec",
    "RegistrationForm",
    "MatchResult",
    "FoundUrls",
    "TenantUrls",
]
