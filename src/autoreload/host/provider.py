"""Data source abstraction and an in-memory, file-backed provider.

The reload pipeline only talks to ``DataSourceHandle``. ``FileBufferProvider``
is the reference host implementation used by the CLI and the tests.
"""

import os
import threading
from datetime import datetime
from pathlib import Path
from typing import NamedTuple, Protocol, Sequence, runtime_checkable

from autoreload.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 0x1000


class DescriptionEntry(NamedTuple):
    """One (name, value) row of a data source's description."""

    name: str
    value: str


@runtime_checkable
class DataSourceHandle(Protocol):
    """Capabilities the reload pipeline needs from an open data source."""

    def is_available(self) -> bool: ...

    def get_data_description(self) -> Sequence[DescriptionEntry]: ...

    def get_base_address(self) -> int: ...

    def set_base_address(self, address: int) -> None: ...

    def get_current_page(self) -> int: ...

    def set_current_page(self, page: int) -> None: ...

    def is_resizable(self) -> bool: ...

    def resize_raw(self, new_size: int) -> None: ...

    def is_writable(self) -> bool: ...

    def write_raw(self, offset: int, data: bytes) -> None: ...

    def get_actual_size(self) -> int: ...

    def mark_dirty(self, dirty: bool = True) -> None: ...


class FileBufferProvider:
    """
    Editable in-memory copy of a file.

    Every public method takes an internal re-entrant lock, so each call is
    atomic with respect to other threads. Sequences of calls are not.

    Example:
        >>> provider = FileBufferProvider(Path("firmware.bin"))
        >>> provider.open()
        >>> provider.write(0, b"\\x7fELF")  # user edit, marks dirty
        >>> provider.is_dirty()
        True
    """

    def __init__(
        self,
        path: Path,
        writable: bool = True,
        resizable: bool = True,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.path = Path(path)
        self.page_size = page_size
        self._writable = writable
        self._resizable = resizable
        self._buffer = bytearray()
        self._base_address = 0
        self._current_page = 0
        self._dirty = False
        self._available = False
        self._lock = threading.RLock()

    def open(self) -> None:
        """
        Load the backing file into memory.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: On other read errors
        """
        with self._lock:
            self._buffer = bytearray(self.path.read_bytes())
            self._dirty = False
            self._available = True
        logger.debug("provider_opened", path=str(self.path), size=len(self._buffer))

    def close(self) -> None:
        with self._lock:
            self._buffer = bytearray()
            self._available = False

    def is_available(self) -> bool:
        with self._lock:
            return self._available

    def get_data_description(self) -> Sequence[DescriptionEntry]:
        with self._lock:
            if not self._available:
                raise RuntimeError("Provider is closed")
            entries = [
                DescriptionEntry("File path", str(self.path)),
                DescriptionEntry("File size", f"{len(self._buffer)} bytes"),
            ]
        try:
            created = datetime.fromtimestamp(os.stat(self.path).st_ctime)
            entries.append(DescriptionEntry("Creation time", created.isoformat(timespec="seconds")))
        except OSError:
            pass
        return entries

    def get_base_address(self) -> int:
        with self._lock:
            return self._base_address

    def set_base_address(self, address: int) -> None:
        if address < 0:
            raise ValueError(f"Base address must be non-negative, got {address}")
        with self._lock:
            self._base_address = address

    def get_page_count(self) -> int:
        with self._lock:
            return max(1, -(-len(self._buffer) // self.page_size))

    def get_current_page(self) -> int:
        with self._lock:
            return self._current_page

    def set_current_page(self, page: int) -> None:
        if page < 0:
            raise ValueError(f"Page must be non-negative, got {page}")
        with self._lock:
            self._current_page = page

    def is_resizable(self) -> bool:
        return self._resizable

    def resize_raw(self, new_size: int) -> None:
        """Grow with zero bytes or truncate. Navigation resets to the defaults."""
        if new_size < 0:
            raise ValueError(f"Size must be non-negative, got {new_size}")
        with self._lock:
            if not self._resizable:
                raise PermissionError(f"Provider is not resizable: {self.path}")
            current = len(self._buffer)
            if new_size < current:
                del self._buffer[new_size:]
            else:
                self._buffer.extend(bytes(new_size - current))
            self._base_address = 0
            self._current_page = 0

    def is_writable(self) -> bool:
        return self._writable

    def write_raw(self, offset: int, data: bytes) -> None:
        """Overwrite bytes in place without touching the dirty flag."""
        with self._lock:
            if not self._writable:
                raise PermissionError(f"Provider is read-only: {self.path}")
            end = offset + len(data)
            if offset < 0 or end > len(self._buffer):
                raise ValueError(
                    f"Write of {len(data)} bytes at offset {offset} exceeds "
                    f"buffer size {len(self._buffer)}"
                )
            self._buffer[offset:end] = data

    def write(self, offset: int, data: bytes) -> None:
        """User edit: overwrite bytes and mark the buffer as modified."""
        with self._lock:
            self.write_raw(offset, data)
            self._dirty = True

    def read(self, offset: int = 0, size: int = -1) -> bytes:
        with self._lock:
            if size < 0:
                return bytes(self._buffer[offset:])
            return bytes(self._buffer[offset:offset + size])

    def get_actual_size(self) -> int:
        with self._lock:
            return len(self._buffer)

    def is_dirty(self) -> bool:
        with self._lock:
            return self._dirty

    def mark_dirty(self, dirty: bool = True) -> None:
        with self._lock:
            self._dirty = dirty
