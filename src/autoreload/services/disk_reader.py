"""Read a backing file fully into memory."""

import os

from autoreload.models.snapshot import FileSnapshot
from autoreload.services.exceptions import IoOpenFailedError, IoReadFailedError


def read_file(path: str) -> FileSnapshot:
    """
    Read the whole file at ``path``.

    The size comes from a filesystem query made after opening, and exactly
    that many bytes must be read back.

    Args:
        path: File to read

    Returns:
        FileSnapshot with the file's bytes

    Raises:
        IoOpenFailedError: If the file can't be opened
        IoReadFailedError: If the size query or the read fails, or the read is short
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise IoOpenFailedError(path, f"Failed to open file for reading ({e.strerror or e})") from e

    with f:
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise IoReadFailedError(path, f"Failed to query file size ({e.strerror or e})") from e

        try:
            data = f.read(size)
        except OSError as e:
            raise IoReadFailedError(path, f"Failed to read file ({e.strerror or e})") from e

    if len(data) != size:
        raise IoReadFailedError(path, f"Short read: got {len(data)} of {size} bytes")

    return FileSnapshot(path=path, data=data)
