"""Route Loader - Build a route registry from a YAML or JSON document.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Document layout::

    app_domain: app.example.com
    routes:
      - home                              # (name)
      - [event, /events/:slug]            # (name, pattern)
      - [/about, static/about]            # (pattern, page)
      - name: calendar
        pattern: /calendar
        page: calendar/index
        meta: {section: events}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pageroutes_core.errors import ConfigurationError
from pageroutes_core.routing.registry import Routes
from pageroutes_core.utils.config import RoutesConfig, configure_logging, read_document

logger = logging.getLogger(__name__)


def _add_entry(routes: Routes, entry: Any, position: int) -> None:
    if isinstance(entry, str):
        routes.add(entry)
    elif isinstance(entry, (list, tuple)):
        routes.add(*entry)
    elif isinstance(entry, Mapping):
        routes.add(dict(entry))
    else:
        raise ConfigurationError(f"Route entry #{position} has unsupported type {type(entry).__name__}")


def load_routes(
    source: Union[str, Path, Mapping[str, Any]],
    config: Optional[RoutesConfig] = None,
) -> Routes:
    """Load a route registry.

    Args:
        source: Path to a ``.yaml``/``.yml``/``.json`` file, or the parsed
            document itself
        config: Base configuration; settings in the document override it

    Returns:
        Registry with every route added, frozen if ``freeze_on_load``

    Raises:
        ConfigurationError: On unreadable documents or bad route entries,
            including duplicate names and invalid patterns
    """
    if isinstance(source, Mapping):
        document: Dict[str, Any] = dict(source)
        origin = "<mapping>"
    else:
        origin = str(source)
        document = read_document(origin) or {}
        if not isinstance(document, Mapping):
            raise ConfigurationError(f"Route document {origin} must be a mapping")

    entries = document.get("routes") or []
    if not isinstance(entries, list):
        raise ConfigurationError(f"'routes' in {origin} must be a list")

    settings = {k: v for k, v in document.items() if k != "routes"}
    config = (config or RoutesConfig()).merge(settings)
    if config.log_level:
        configure_logging(config.log_level)

    routes = Routes(config=config)
    for position, entry in enumerate(entries):
        _add_entry(routes, entry, position)

    logger.info(f"Loaded {len(routes)} routes from {origin}")

    if config.freeze_on_load:
        routes.freeze()

    return routes


__all__ = [
    "load_routes",
]
