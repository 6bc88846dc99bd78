"""Utilities module - Configuration loading."""

from pageroutes_core.utils.config import (
    RoutesConfig,
    configure_logging,
    load_config,
    read_document,
)

__all__ = [
    "RoutesConfig",
    "configure_logging",
    "load_config",
    "read_document",
]
