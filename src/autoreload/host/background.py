"""Periodic background runner for registered service callbacks."""

import threading
from typing import Callable, Optional

from autoreload.utils.logging import get_logger


logger = get_logger(__name__)


class BackgroundService:
    """
    Call ``callback`` every ``interval_ms`` milliseconds on a daemon thread.

    Each iteration waits for the interval and then runs the callback, so
    invocations never overlap. Exceptions escaping the callback are logged
    and the loop keeps going.
    """

    def __init__(
        self,
        name: str,
        callback: Callable[[], object],
        interval_ms: int | Callable[[], int] = 100,
    ):
        self.name = name
        self.callback = callback
        self._interval_ms = interval_ms
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.iterations = 0

    @property
    def interval_ms(self) -> int:
        if callable(self._interval_ms):
            return self._interval_ms()
        return self._interval_ms

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread. No-op if already running."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.info("background_service_started", name=self.name, interval_ms=self.interval_ms)

    def stop(self, timeout: float = 5.0) -> None:
        """Ask the loop to exit and wait for the current iteration to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("background_service_stop_timeout", name=self.name, timeout=timeout)
            else:
                self._thread = None
        logger.info("background_service_stopped", name=self.name, iterations=self.iterations)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            if self._stop_event.wait(self.interval_ms / 1000):
                break

            try:
                self.callback()
            except Exception as e:
                logger.error("background_service_failed", name=self.name, error=str(e), exc_info=True)
            finally:
                self.iterations += 1
