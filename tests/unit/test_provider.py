"""Unit tests for FileBufferProvider."""

import pytest

from autoreload.host.provider import DataSourceHandle, FileBufferProvider


class TestFileBufferProvider:
    """Test the in-memory file-backed data source."""

    def test_satisfies_handle_protocol(self, provider):
        assert isinstance(provider, DataSourceHandle)

    def test_open_loads_file(self, provider):
        assert provider.is_available()
        assert provider.read() == bytes(range(10))
        assert not provider.is_dirty()

    def test_open_missing_file_raises(self, tmp_path):
        provider = FileBufferProvider(tmp_path / "missing.bin")

        with pytest.raises(FileNotFoundError):
            provider.open()
        assert not provider.is_available()

    def test_close_makes_unavailable(self, provider):
        provider.close()

        assert not provider.is_available()
        with pytest.raises(RuntimeError):
            provider.get_data_description()

    def test_description_contains_path(self, provider, data_file):
        entries = {entry.name: entry.value for entry in provider.get_data_description()}

        assert entries["File path"] == str(data_file)
        assert entries["File size"] == "10 bytes"

    def test_user_write_marks_dirty(self, provider):
        provider.write(0, b"\xff")

        assert provider.is_dirty()
        assert provider.read(0, 1) == b"\xff"

    def test_write_raw_keeps_dirty_flag(self, provider):
        provider.write_raw(0, b"\xff")

        assert not provider.is_dirty()

    def test_write_past_end_raises(self, provider):
        with pytest.raises(ValueError, match="exceeds"):
            provider.write_raw(8, b"abcd")

    def test_read_only_rejects_writes(self, data_file):
        provider = FileBufferProvider(data_file, writable=False)
        provider.open()

        with pytest.raises(PermissionError):
            provider.write_raw(0, b"x")

    def test_resize_grows_with_zeros(self, provider):
        provider.resize_raw(12)

        assert provider.read() == bytes(range(10)) + b"\x00\x00"

    def test_resize_truncates(self, provider):
        provider.resize_raw(4)

        assert provider.read() == bytes(range(4))

    def test_resize_resets_navigation(self, provider):
        provider.set_base_address(0x100)
        provider.set_current_page(2)

        provider.resize_raw(20)

        assert provider.get_base_address() == 0
        assert provider.get_current_page() == 0

    def test_not_resizable_rejects_resize(self, data_file):
        provider = FileBufferProvider(data_file, resizable=False)
        provider.open()

        with pytest.raises(PermissionError):
            provider.resize_raw(20)

    def test_page_count(self, provider):
        assert provider.get_page_count() == 3

    @pytest.mark.parametrize("method", ["set_base_address", "set_current_page", "resize_raw"])
    def test_negative_values_rejected(self, provider, method):
        with pytest.raises(ValueError):
            getattr(provider, method)(-1)

    def test_invalid_page_size_rejected(self, data_file):
        with pytest.raises(ValueError):
            FileBufferProvider(data_file, page_size=0)
