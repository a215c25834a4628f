"""Periodic reload of a data source from its backing file.

The host's scheduler calls ``ReloadService.tick()`` on a fixed cadence. A tick
runs the full pipeline (resolve path, read file, capture viewer state, sync
buffer, restore state, notify) or stops at the first step that can't proceed.
Every failure is handled inside the tick; the scheduler never sees an
exception.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from autoreload.host.events import DataChanged, EventBus
from autoreload.host.provider import DataSourceHandle
from autoreload.models.config import ReloadConfig
from autoreload.models.tick import TickOutcome, TickResult
from autoreload.services import buffer_sync, state_snapshot
from autoreload.services.disk_reader import read_file
from autoreload.services.exceptions import (
    HandleUnavailableError,
    IoOpenFailedError,
    IoReadFailedError,
    SyncFailedError,
)
from autoreload.services.path_resolver import resolve_path
from autoreload.services.reload_guard import ReloadGuard
from autoreload.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass
class ReloadServiceState:
    """Process-wide state of the service: the on/off switch and the guard."""

    config: ReloadConfig = field(default_factory=ReloadConfig)
    guard: ReloadGuard = field(default_factory=ReloadGuard)


class ReloadService:
    """
    Resync the host's current data source from disk on every enabled tick.

    The data source is obtained from ``handle_getter`` at the start of each
    tick and dropped when the tick ends; it is never stored on the service.

    Example:
        >>> service = ReloadService(ReloadServiceState(), lambda: provider, EventBus())
        >>> service.toggle()
        True
        >>> service.tick().outcome
        <TickOutcome.RELOADED: 'reloaded'>
    """

    def __init__(
        self,
        state: ReloadServiceState,
        handle_getter: Callable[[], Optional[DataSourceHandle]],
        event_bus: Optional[EventBus] = None,
    ):
        self.state = state
        self.handle_getter = handle_getter
        self.event_bus = event_bus if event_bus is not None else EventBus()

    @property
    def enabled(self) -> bool:
        return self.state.config.enabled

    def toggle(self) -> bool:
        """Flip the enable flag. Takes effect from the next tick."""
        self.state.config.enabled = not self.state.config.enabled
        logger.info("auto_reload_toggled", enabled=self.state.config.enabled)
        return self.state.config.enabled

    def tick(self) -> TickResult:
        """
        Run one reload attempt.

        Returns:
            TickResult describing how the tick ended
        """
        if not self.enabled:
            return TickResult(outcome=TickOutcome.DISABLED)

        with self.state.guard.held() as acquired:
            if not acquired:
                logger.debug("reload_busy")
                return TickResult(outcome=TickOutcome.BUSY)

            return self._reload()

    def _reload(self) -> TickResult:
        """Pipeline body. Caller holds the guard."""
        try:
            handle = self._current_handle()
        except HandleUnavailableError as e:
            logger.debug("reload_handle_unavailable", error=str(e))
            return TickResult(outcome=TickOutcome.HANDLE_UNAVAILABLE, error_message=e.message)

        path = resolve_path(handle)
        if path is None:
            logger.debug("reload_path_unresolved")
            return TickResult(outcome=TickOutcome.PATH_UNRESOLVED)

        try:
            snapshot = read_file(path)
        except IoOpenFailedError as e:
            logger.error("reload_open_failed", path=path, error=str(e))
            return TickResult(outcome=TickOutcome.IO_OPEN_FAILED, path=path, error_message=str(e))
        except IoReadFailedError as e:
            logger.error("reload_read_failed", path=path, error=str(e))
            return TickResult(outcome=TickOutcome.IO_READ_FAILED, path=path, error_message=str(e))

        try:
            viewer_state = state_snapshot.capture(handle)
            try:
                report = buffer_sync.apply(handle, snapshot)
            finally:
                # A failed write may follow a resize that reset navigation.
                state_snapshot.restore(handle, viewer_state)
        except Exception as e:
            error = SyncFailedError(path, e)
            logger.error("reload_sync_failed", path=path, error=str(error), exc_info=True)
            return TickResult(
                outcome=TickOutcome.SYNC_FAILED,
                path=path,
                bytes_read=snapshot.size,
                error_message=str(error),
            )

        if not report.synced:
            logger.debug("reload_read_only", path=path, size=snapshot.size)
            return TickResult(outcome=TickOutcome.READ_ONLY, path=path, bytes_read=snapshot.size)

        self.event_bus.post(DataChanged(handle))
        logger.debug(
            "reload_completed",
            path=path,
            size=snapshot.size,
            resized=report.resized,
            written=report.written,
        )
        return TickResult(
            outcome=TickOutcome.RELOADED,
            path=path,
            bytes_read=snapshot.size,
            notified=True,
        )

    def _current_handle(self) -> DataSourceHandle:
        """
        Fetch the host's current data source and check it's usable.

        Raises:
            HandleUnavailableError: If there is no data source or it is unavailable
        """
        try:
            handle = self.handle_getter()
        except Exception as e:
            raise HandleUnavailableError(f"Failed to get current data source ({e})") from e

        if handle is None:
            raise HandleUnavailableError("No data source is open")

        try:
            available = handle.is_available()
        except Exception as e:
            raise HandleUnavailableError(f"Failed to query data source availability ({e})") from e

        if not available:
            raise HandleUnavailableError()

        return handle
