"""Transient per-tick models: viewer state and file contents."""

from pydantic import BaseModel, Field


class ViewerState(BaseModel):
    """Navigation state of a data source that must survive a resync."""

    base_address: int = Field(..., ge=0, description="Address shown at offset 0")
    current_page: int = Field(..., ge=0, description="Page the viewer is positioned on")

    model_config = {"frozen": True}


class FileSnapshot(BaseModel):
    """Complete contents of a backing file as read during one tick."""

    path: str = Field(..., description="File the bytes were read from")
    data: bytes = Field(..., description="Full file contents")

    @property
    def size(self) -> int:
        return len(self.data)

    model_config = {"frozen": True}
