"""Configuration models for Autoreload."""

from pydantic import BaseModel, Field, ValidationError, field_validator
from pathlib import Path
from typing import Any, Dict, Optional
import yaml


class ReloadConfig(BaseModel):
    """Auto reload switch and polling cadence.

    Mutable because the toggle command flips ``enabled`` at runtime.
    """

    enabled: bool = Field(
        default=False,
        description="Whether scheduler ticks perform a reload"
    )

    interval_ms: int = Field(
        default=100,
        gt=0,
        description="Delay between two reload ticks in milliseconds"
    )

    model_config = {"frozen": False, "validate_assignment": True}


class LoggingConfig(BaseModel):
    """Configuration for structured log output."""

    level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (defaults to ~/.cache/autoreload/logs/autoreload.log)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(
                f"Invalid log level: {v}\n"
                f"Expected one of DEBUG, INFO, WARNING, ERROR"
            )
        return level

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for Autoreload."""

    reload: ReloadConfig = Field(default_factory=ReloadConfig, description="Reload settings")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    @staticmethod
    def read_yaml(path: Path) -> Dict[str, Any]:
        """
        Read a config file into a plain mapping without validating it.

        Args:
            path: Path to config.yaml file

        Returns:
            Parsed mapping (empty for an empty file)

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the YAML is invalid or not a mapping
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Please create the file with the following format:\n\n"
                f"reload:\n"
                f"  enabled: false\n"
                f"  interval_ms: 100\n\n"
                f"logging:\n"
                f"  level: INFO\n"
            )

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping")
        return data

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file, without environment overrides.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        data = cls.read_yaml(path)
        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
