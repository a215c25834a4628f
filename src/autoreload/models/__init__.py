"""Pydantic data models for Autoreload."""

from autoreload.models.config import Config, LoggingConfig, ReloadConfig
from autoreload.models.snapshot import FileSnapshot, ViewerState
from autoreload.models.tick import SyncReport, TickOutcome, TickResult
