"""
Configuration validation with Pydantic.

Provides:
- ServerConfig: server identity
- NamedModesConfig: placeholder mode and display masking settings
- LoggingConfig: log level and output format
- AppConfig: root model
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ServerConfig(BaseModel):
    """Server identity."""
    name: str = Field(default="irc.example.net", min_length=1)


class NamedModesConfig(BaseModel):
    """Named mode translation settings."""
    placeholder_letter: str = Field(default="Z", min_length=1, max_length=1)
    placeholder_name: str = Field(default="namebase", min_length=1)
    masked_mode: str = "key"
    masked_value: str = "<key>"
    auspex_privilege: str = "channels/auspex"

    @field_validator("placeholder_letter")
    @classmethod
    def letter_is_printable(cls, v):
        if v in "+- :" or not v.isprintable():
            raise ValueError(f"placeholder_letter cannot be {v!r}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    log_dir: Optional[str] = None
    log_file: str = "namedmodes.log"


class AppConfig(BaseModel):
    """Main application configuration."""
    server: ServerConfig = Field(default_factory=ServerConfig)
    namedmodes: NamedModesConfig = Field(default_factory=NamedModesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
