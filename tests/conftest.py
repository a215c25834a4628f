"""Shared test fixtures for all test modules."""

import pytest
from pathlib import Path
from unittest.mock import Mock

from autoreload.host.events import DataChanged, EventBus
from autoreload.host.provider import DescriptionEntry, FileBufferProvider
from autoreload.models.config import ReloadConfig
from autoreload.services.reload_service import ReloadService, ReloadServiceState


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the user's config, log directory and env overrides."""
    for name in (
        "AUTORELOAD_RELOAD_ENABLED",
        "AUTORELOAD_RELOAD_INTERVAL_MS",
        "AUTORELOAD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AUTORELOAD_LOG_FILE", str(tmp_path / "logs" / "autoreload.log"))
    monkeypatch.setattr(
        "autoreload.config.loader.DEFAULT_CONFIG_PATH",
        tmp_path / "missing" / "config.yaml",
    )


@pytest.fixture
def data_file(tmp_path) -> Path:
    """A 10-byte file containing bytes 0..9."""
    path = tmp_path / "data.bin"
    path.write_bytes(bytes(range(10)))
    return path


@pytest.fixture
def provider(data_file) -> FileBufferProvider:
    """Writable, resizable provider opened on data_file."""
    provider = FileBufferProvider(data_file, page_size=4)
    provider.open()
    return provider


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def changed_events(event_bus) -> list:
    """Collects every DataChanged posted on event_bus."""
    events = []
    event_bus.subscribe(DataChanged, events.append)
    return events


@pytest.fixture
def service(provider, event_bus) -> ReloadService:
    """Enabled ReloadService whose current data source is `provider`."""
    state = ReloadServiceState(config=ReloadConfig(enabled=True))
    return ReloadService(state, lambda: provider, event_bus)


@pytest.fixture
def mock_handle(data_file) -> Mock:
    """Mock data source that reports data_file as its path."""
    handle = Mock()
    handle.is_available.return_value = True
    handle.get_data_description.return_value = [DescriptionEntry("File path", str(data_file))]
    handle.get_base_address.return_value = 0x400
    handle.get_current_page.return_value = 2
    handle.is_resizable.return_value = True
    handle.is_writable.return_value = True
    handle.get_actual_size.return_value = 10
    return handle
