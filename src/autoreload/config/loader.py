"""Configuration loader with YAML and environment variable support.

This module reads ~/.config/autoreload/config.yaml and allows environment
variable overrides using the AUTORELOAD_* prefix. Unlike credentials-bearing
configs, every setting has a default, so a missing file is not an error.

Environment variables:
- AUTORELOAD_RELOAD_ENABLED: Override reload.enabled (1/true/yes/on or 0/false/no/off)
- AUTORELOAD_RELOAD_INTERVAL_MS: Override reload.interval_ms
- AUTORELOAD_LOG_LEVEL: Override logging.level
- AUTORELOAD_LOG_FILE: Override logging.log_file
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from autoreload.models.config import Config


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "autoreload" / "config.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. If None, uses ~/.config/autoreload/config.yaml

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the YAML or the resulting configuration is invalid
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        data = Config.read_yaml(config_path)
    elif explicit:
        raise FileNotFoundError(f"Configuration file not found at {config_path}")
    else:
        data = {}

    data = _apply_env_overrides(data)

    try:
        return Config(**data)
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    if not isinstance(data.get("reload"), dict):
        data["reload"] = {}
    if not isinstance(data.get("logging"), dict):
        data["logging"] = {}

    if env_enabled := os.getenv("AUTORELOAD_RELOAD_ENABLED"):
        value = env_enabled.strip().lower()
        if value in _TRUE_VALUES:
            data["reload"]["enabled"] = True
        elif value in _FALSE_VALUES:
            data["reload"]["enabled"] = False

    if env_interval := os.getenv("AUTORELOAD_RELOAD_INTERVAL_MS"):
        try:
            data["reload"]["interval_ms"] = int(env_interval)
        except ValueError:
            pass  # Invalid value, ignore

    if env_level := os.getenv("AUTORELOAD_LOG_LEVEL"):
        data["logging"]["level"] = env_level

    if env_log_file := os.getenv("AUTORELOAD_LOG_FILE"):
        data["logging"]["log_file"] = env_log_file

    return data
