"""Unit tests for configuration models and loader."""

import pytest
from pydantic import ValidationError

from autoreload.config.loader import load_config
from autoreload.models.config import Config, LoggingConfig, ReloadConfig


class TestReloadConfig:
    """Test reload configuration model."""

    def test_defaults(self):
        config = ReloadConfig()

        assert config.enabled is False
        assert config.interval_ms == 100

    def test_enabled_is_mutable(self):
        """The toggle command flips enabled at runtime."""
        config = ReloadConfig()
        config.enabled = True

        assert config.enabled

    @pytest.mark.parametrize("interval", [0, -5])
    def test_interval_must_be_positive(self, interval):
        with pytest.raises(ValidationError):
            ReloadConfig(interval_ms=interval)

    def test_interval_assignment_is_validated(self):
        config = ReloadConfig()

        with pytest.raises(ValidationError):
            config.interval_ms = 0


class TestLoggingConfig:
    """Test logging configuration model."""

    def test_level_is_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingConfig(level="VERBOSE")

    def test_logging_config_immutable(self):
        config = LoggingConfig()

        with pytest.raises(ValidationError):
            config.level = "ERROR"


class TestConfigLoad:
    """Test Config.load without environment overrides."""

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTORELOAD_RELOAD_INTERVAL_MS", "5")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reload:\n  enabled: true\n  interval_ms: 300\n")

        config = Config.load(config_file)

        assert config.reload.enabled is True
        assert config.reload.interval_ms == 300
        assert config.logging == LoggingConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="interval_ms"):
            Config.load(tmp_path / "missing.yaml")

    def test_invalid_values_raise_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ValueError, match="validation failed"):
            Config.load(config_file)

    def test_non_mapping_raises_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("42\n")

        with pytest.raises(ValueError, match="mapping"):
            Config.load(config_file)


class TestLoadConfig:
    """Test YAML loading with environment overrides."""

    def test_missing_default_file_gives_defaults(self, monkeypatch):
        monkeypatch.delenv("AUTORELOAD_LOG_FILE")

        config = load_config()

        assert config == Config()

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_load_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "reload:\n"
            "  enabled: true\n"
            "  interval_ms: 250\n"
            "logging:\n"
            "  level: warning\n"
        )

        config = load_config(config_file)

        assert config.reload.enabled is True
        assert config.reload.interval_ms == 250
        assert config.logging.level == "WARNING"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        config = load_config(config_file)

        assert config.reload == ReloadConfig()

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reload: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_file)

    def test_non_mapping_yaml_raises_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(config_file)

    def test_invalid_interval_raises_value_error(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reload:\n  interval_ms: 0\n")

        with pytest.raises(ValueError, match="validation failed"):
            load_config(config_file)

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reload:\n  enabled: false\n  interval_ms: 250\n")
        monkeypatch.setenv("AUTORELOAD_RELOAD_ENABLED", "yes")
        monkeypatch.setenv("AUTORELOAD_RELOAD_INTERVAL_MS", "50")
        monkeypatch.setenv("AUTORELOAD_LOG_LEVEL", "DEBUG")

        config = load_config(config_file)

        assert config.reload.enabled is True
        assert config.reload.interval_ms == 50
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == str(tmp_path / "logs" / "autoreload.log")

    def test_env_disable(self, monkeypatch):
        monkeypatch.setenv("AUTORELOAD_RELOAD_ENABLED", "off")

        assert load_config().reload.enabled is False

    def test_invalid_env_values_ignored(self, monkeypatch):
        monkeypatch.setenv("AUTORELOAD_RELOAD_ENABLED", "maybe")
        monkeypatch.setenv("AUTORELOAD_RELOAD_INTERVAL_MS", "fast")

        config = load_config()

        assert config.reload == ReloadConfig()
