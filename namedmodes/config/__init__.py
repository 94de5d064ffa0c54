"""
Configuration module.

Pydantic models validated from a YAML file with environment expansion.
"""

from namedmodes.config.schema import (
    AppConfig,
    LoggingConfig,
    NamedModesConfig,
    ServerConfig,
)
from namedmodes.config.loader import load_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "NamedModesConfig",
    "ServerConfig",
    "load_config",
]
