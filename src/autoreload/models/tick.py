"""Outcome models for reload ticks."""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional


class TickOutcome(str, Enum):
    """How a single reload tick ended."""

    DISABLED = "disabled"
    BUSY = "busy"
    HANDLE_UNAVAILABLE = "handle_unavailable"
    PATH_UNRESOLVED = "path_unresolved"
    IO_OPEN_FAILED = "io_open_failed"
    IO_READ_FAILED = "io_read_failed"
    SYNC_FAILED = "sync_failed"
    RELOADED = "reloaded"
    READ_ONLY = "read_only"


class SyncReport(BaseModel):
    """What a buffer sync did to the data source."""

    resized: bool = Field(default=False, description="Buffer length was changed")
    written: bool = Field(default=False, description="Buffer bytes were overwritten")
    read_only: bool = Field(default=False, description="Source refused content writes")
    new_size: int = Field(default=0, ge=0, description="Size of the file that was synced")

    @property
    def changed(self) -> bool:
        return self.resized or self.written

    @property
    def synced(self) -> bool:
        """True when the source now mirrors the file, or at least its size changed."""
        return self.resized or not self.read_only

    model_config = {"frozen": True}


class TickResult(BaseModel):
    """Result of one ReloadService.tick() call."""

    outcome: TickOutcome = Field(..., description="Terminal state of the tick")

    path: Optional[str] = Field(
        default=None,
        description="Backing file path, if it was resolved"
    )

    bytes_read: int = Field(
        default=0,
        ge=0,
        description="Number of bytes read from disk"
    )

    error_message: Optional[str] = Field(
        default=None,
        description="Error details for failed ticks"
    )

    notified: bool = Field(
        default=False,
        description="Whether a DataChanged event was posted"
    )

    @property
    def succeeded(self) -> bool:
        return self.outcome in (TickOutcome.RELOADED, TickOutcome.READ_ONLY)

    model_config = {"frozen": True}
