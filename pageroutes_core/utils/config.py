"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

from pageroutes_core.errors import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RoutesConfig")


def read_document(path: str) -> Any:
    """Read a JSON or YAML document.

    Raises:
        ConfigurationError: If the file type is not supported
    """
    with open(path, "r") as f:
        if path.endswith(".json"):
            return json.load(f)
        if path.endswith((".yaml", ".yml")):
            return yaml.safe_load(f)
    raise ConfigurationError(f"Unknown config format: {path}")


@dataclass
class RoutesConfig:
    """Route registry configuration."""

    # Domain on which club folders are stripped from incoming paths
    app_domain: Optional[str] = None
    clubs_prefix: str = "/clubs"

    # Pattern matching
    case_sensitive: bool = False
    strict: bool = False

    # Loading
    freeze_on_load: bool = True

    # Package log level applied by load_routes; None leaves logging alone
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        unknown = set(data) - valid_fields
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        return cls.from_dict(read_document(path) or {})

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        return cls.from_dict(read_document(path) or {})

    @classmethod
    def from_env(cls: Type[T], prefix: str = "ROUTES_") -> T:
        """Load config from environment variables."""
        data = {}

        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()

                if value.lower() in ("true", "false"):
                    data[config_key] = value.lower() == "true"
                else:
                    data[config_key] = value

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, other: Dict[str, Any]) -> "RoutesConfig":
        """Merge with explicitly set values (other takes precedence)."""
        data = self.to_dict()
        data.update(other)
        return type(self).from_dict(data)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "ROUTES_",
) -> RoutesConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RoutesConfig()

    if path:
        if Path(path).exists():
            data = read_document(path) or {}
            # A routes file may carry its own settings next to the table
            data = {k: v for k, v in data.items() if k != "routes"}
            config = RoutesConfig.from_dict(data)
        else:
            logger.warning(f"Config file not found: {path}")

    env_config = RoutesConfig.from_env(env_prefix)
    env_values = {
        field_name: value
        for field_name, value in env_config.to_dict().items()
        if f"{env_prefix}{field_name.upper()}" in os.environ
    }
    return config.merge(env_values)


def configure_logging(level: Optional[str] = None) -> None:
    """Set the log level of the package logger."""
    logging.getLogger("pageroutes_core").setLevel((level or "INFO").upper())


__all__ = [
    "RoutesConfig",
    "read_document",
    "load_config",
    "configure_logging",
]
