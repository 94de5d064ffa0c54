"""
Configuration Loader.

Loads a YAML config file with environment variable expansion and validates
it into an AppConfig.

Features:
- `.env` file loaded into the environment first (existing variables win)
- Environment variable expansion: ${VAR_NAME} or ${VAR_NAME:default}
- Missing file means defaults

Usage:
    from namedmodes.config import load_config

    config = load_config(Path("namedmodes.yaml"))
    letter = config.namedmodes.placeholder_letter
"""

import os
import re
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from namedmodes.config.schema import AppConfig
from namedmodes.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _expand_value(value: Any) -> Any:
    """
    Expand environment variables in a value.

    Supports:
        ${VAR_NAME}          - Required, raises if not found
        ${VAR_NAME:default}  - Uses default if not found
    """
    if isinstance(value, dict):
        return {k: _expand_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_value(item) for item in value]
    if not isinstance(value, str):
        return value

    def replace(match: "re.Match[str]") -> str:
        expr = match.group(1)
        if ":" in expr:
            var_name, default = expr.split(":", 1)
            return os.environ.get(var_name.strip(), default)

        var_name = expr.strip()
        var_value = os.environ.get(var_name)
        if var_value is None:
            raise ConfigError(
                f"Required environment variable not found: {var_name}",
                {"variable": var_name},
            )
        return var_value

    return ENV_PATTERN.sub(replace, value)


def _load_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", {"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping in {path}", {"path": str(path)})
    return data


def load_config(
    config_path: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> AppConfig:
    """
    Load and validate configuration.

    Args:
        config_path: YAML file to read (defaults only if None or missing)
        env_file: `.env` file to load before expansion

    Returns:
        Validated AppConfig

    Raises:
        ConfigError: On unreadable YAML, missing required variables or
            validation failures
    """
    if env_file is not None and env_file.exists():
        load_dotenv(env_file, override=False)

    raw: Dict[str, Any] = {}
    if config_path is None or not config_path.exists():
        logger.warning("No config file found, using defaults only")
    else:
        raw = _expand_value(_load_file(config_path))
        logger.info(f"Loaded config from {config_path}")

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", {"errors": e.errors()}) from e
