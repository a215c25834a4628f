"""Save and restore a data source's navigation state around a resync."""

from autoreload.host.provider import DataSourceHandle
from autoreload.models.snapshot import ViewerState


def capture(handle: DataSourceHandle) -> ViewerState:
    return ViewerState(
        base_address=handle.get_base_address(),
        current_page=handle.get_current_page(),
    )


def restore(handle: DataSourceHandle, state: ViewerState) -> None:
    # Base address first: some providers derive page bounds from it.
    handle.set_base_address(state.base_address)
    handle.set_current_page(state.current_page)
