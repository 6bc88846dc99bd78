"""Errors - Exception hierarchy for route registration and URL generation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Configuration errors are raised while the route table is being built and are
meant to abort application startup. Resolution misses (no route for a path,
a literal fallback URL) are never raised; they come back as empty results.
"""

from __future__ import annotations

from typing import Optional, Union


class RoutingError(Exception):
    """Base class for all routing errors."""
    pass


class ConfigurationError(RoutingError):
    """Route table could not be built."""
    pass


class DuplicateRouteError(ConfigurationError):
    """A route with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Route "{name}" already exists')


class MissingPageError(ConfigurationError):
    """No page could be derived for a route."""

    def __init__(self, pattern: Optional[str]):
        self.pattern = pattern
        super().__init__(f'Missing page to render for route "{pattern}"')


class PatternError(ConfigurationError):
    """Pattern string is not valid."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class RegistryFrozenError(ConfigurationError):
    """Registration attempted after the registry was frozen."""
    pass


class MissingParameterError(RoutingError, ValueError):
    """A required parameter was not supplied, or did not fit its segment."""

    def __init__(self, name: Union[str, int], message: Optional[str] = None):
        self.name = name
        super().__init__(message or f'Expected "{name}" to be defined')


class RouteNotFoundError(RoutingError, LookupError):
    """No route is registered under the requested name."""

    def __init__(self, name: Optional[str]):
        self.name = name
        super().__init__(f'Route "{name}" is not registered')


__all__ = [
    "RoutingError",
    "ConfigurationError",
    "DuplicateRouteError",
    "MissingPageError",
    "PatternError",
    "RegistryFrozenError",
    "MissingParameterError",
    "RouteNotFoundError",
]
