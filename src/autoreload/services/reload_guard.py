"""Non-blocking single-flight guard for reloads."""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReloadGuard:
    """
    At most one holder at a time. A contended acquire fails instead of waiting.

    Example:
        >>> guard = ReloadGuard()
        >>> with guard.held() as acquired:
        ...     if acquired:
        ...         reload()
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def try_acquire(self) -> bool:
        """Return True if the caller now holds the guard, False if it is taken."""
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        """
        Release the guard. Only the holder may call this.

        Raises:
            RuntimeError: If the guard is not held
        """
        self._lock.release()

    @contextmanager
    def held(self) -> Iterator[bool]:
        """Try to acquire for the duration of the block; release on every exit path."""
        acquired = self.try_acquire()
        try:
            yield acquired
        finally:
            if acquired:
                self.release()
