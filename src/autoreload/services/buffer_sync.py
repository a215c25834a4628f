"""Overwrite a data source's buffer with freshly read file contents."""

from autoreload.host.provider import DataSourceHandle
from autoreload.models.snapshot import FileSnapshot
from autoreload.models.tick import SyncReport


def apply(handle: DataSourceHandle, snapshot: FileSnapshot) -> SyncReport:
    """
    Make the handle's size and bytes match ``snapshot``.

    Steps:
    1. Resize to the file size if the source is resizable and sizes differ
    2. Write the whole file at offset 0 with write_raw, bypassing any
       patch/undo tracking, if the source is writable and the file isn't empty
    3. Clear the dirty flag so the reload isn't shown as an unsaved edit

    A read-only source keeps its content; the dirty flag is still cleared.

    Args:
        handle: Data source to update
        snapshot: File contents read from disk

    Returns:
        SyncReport describing which steps modified the source

    Raises:
        Any exception raised by the handle's operations
    """
    resized = False
    written = False
    read_only = not handle.is_writable()

    if handle.is_resizable() and handle.get_actual_size() != snapshot.size:
        handle.resize_raw(snapshot.size)
        resized = True

    if not read_only and snapshot.size > 0:
        handle.write_raw(0, snapshot.data)
        written = True

    handle.mark_dirty(False)

    return SyncReport(
        resized=resized,
        written=written,
        read_only=read_only,
        new_size=snapshot.size,
    )
