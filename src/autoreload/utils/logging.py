"""Structured logging setup for Autoreload."""

import structlog
from pathlib import Path
from typing import Any, Optional
import os


DEFAULT_LOG_FILE = Path.home() / ".cache" / "autoreload" / "logs" / "autoreload.log"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """
    Configure structlog for JSON logging to ~/.cache/autoreload/logs/autoreload.log.

    Log level can be controlled via AUTORELOAD_LOG_LEVEL environment variable,
    which wins over the ``level`` argument (usually taken from config.yaml):
    - Set to "DEBUG" to see every skipped tick and completed reload
    - Defaults to "INFO" if not set

    Log levels:
    - DEBUG: Skipped ticks (no path, busy guard, unavailable source), reload details
    - INFO: Auto reload toggled, service start/stop
    - WARNING: Subscriber and scheduler hiccups
    - ERROR: File open/read failures, failures while resyncing the buffer

    Example:
        AUTORELOAD_LOG_LEVEL=DEBUG autoreload watch firmware.bin

        # View logs with jq for readability:
        tail -f ~/.cache/autoreload/logs/autoreload.log | jq .
    """
    if log_file is None:
        log_file = DEFAULT_LOG_FILE
    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    log_level = os.environ.get("AUTORELOAD_LOG_LEVEL", level or "INFO").upper()

    if log_level not in VALID_LEVELS:
        log_level = "INFO"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=open(log_file, "a")),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.error("reload_open_failed", path="/tmp/data.bin")
    """
    return structlog.get_logger(name)
