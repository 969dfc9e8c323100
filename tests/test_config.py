"""
Tests for pagescope configuration system.
"""

import json

import pytest

from pagescope.config import (
    ConfigurationError,
    LoadOptions,
    LoggingOptions,
    LogLevel,
    PageScopeConfig,
    configure,
    default_load_validations,
    get_config,
    load_config,
    load_env_config,
    load_file,
    reset_config,
    set_config,
    set_default_load_validations,
)


class TestOptions:
    """Tests for option classes."""

    def test_default_values(self):
        """Test default configuration values."""
        config = PageScopeConfig()
        assert config.load.default_load_validations is True
        assert config.logging.level == LogLevel.WARNING
        assert "%(message)s" in config.logging.format

    def test_level_case_insensitive(self):
        """Test log levels are normalized."""
        assert LoggingOptions(level="debug").level == LogLevel.DEBUG

    def test_invalid_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            LoggingOptions(level="chatty")

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = PageScopeConfig.from_dict(
            {"load": {"default_load_validations": False}}
        )
        assert config.load.default_load_validations is False
        assert config.logging.level == LogLevel.WARNING


class TestEnv:
    """Tests for environment variable support."""

    def test_load_env_config(self, monkeypatch):
        """Test mapped variables become nested config."""
        monkeypatch.setenv("PAGESCOPE_DEFAULT_LOAD_VALIDATIONS", "no")
        monkeypatch.setenv("PAGESCOPE_LOG_LEVEL", "info")

        assert load_env_config() == {
            "load": {"default_load_validations": False},
            "logging": {"level": "info"},
        }

    def test_log_format_from_env(self, monkeypatch):
        """Test the log format variable reaches the loaded config."""
        monkeypatch.setenv("PAGESCOPE_LOG_FORMAT", "%(levelname)s %(message)s")

        assert load_config().logging.format == "%(levelname)s %(message)s"

    def test_load_env_config_empty(self):
        """Test no variables gives an empty dict."""
        assert load_env_config() == {}


class TestLoader:
    """Tests for configuration file loading."""

    def test_load_json(self, tmp_path):
        """Test loading JSON config."""
        path = tmp_path / "pagescope.config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))

        assert load_file(path) == {"logging": {"level": "DEBUG"}}

    def test_load_toml(self, tmp_path):
        """Test loading TOML config."""
        path = tmp_path / "pagescope.config.toml"
        path.write_text("[load]\ndefault_load_validations = false\n")

        assert load_file(path) == {"load": {"default_load_validations": False}}

    def test_load_yaml(self, tmp_path):
        """Test loading YAML config."""
        pytest.importorskip("yaml")
        path = tmp_path / "pagescope.config.yaml"
        path.write_text("logging:\n  level: error\n")

        assert load_file(path) == {"logging": {"level": "error"}}

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_file(tmp_path / "absent.json")

    def test_unsupported_format(self, tmp_path):
        """Test unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[load]\n")

        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_file(path)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ConfigurationError."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid configuration file"):
            load_file(path)

    def test_priority(self, tmp_path, monkeypatch):
        """Test overrides beat env, which beats the file."""
        path = tmp_path / "pagescope.config.json"
        path.write_text(
            json.dumps(
                {
                    "load": {"default_load_validations": False},
                    "logging": {"level": "DEBUG", "format": "%(message)s"},
                }
            )
        )
        monkeypatch.setenv("PAGESCOPE_LOG_LEVEL", "ERROR")

        config = load_config(path, overrides={"load": {"default_load_validations": True}})

        assert config.load.default_load_validations is True
        assert config.logging.level == LogLevel.ERROR
        assert config.logging.format == "%(message)s"

    def test_invalid_values(self):
        """Test validation errors surface as ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(overrides={"logging": {"level": "LOUD"}}, load_env=False)


class TestSettings:
    """Tests for the process-wide configuration lifecycle."""

    def test_lazy_default(self):
        """Test the active config is built on first use."""
        assert get_config() is get_config()
        assert default_load_validations() is True

    def test_env_read_on_first_use(self, monkeypatch):
        """Test env variables feed the lazily built config."""
        monkeypatch.setenv("PAGESCOPE_DEFAULT_LOAD_VALIDATIONS", "false")
        assert default_load_validations() is False

    def test_toggle_and_reset(self):
        """Test the switch can be toggled and reset without residue."""
        set_default_load_validations(False)
        assert default_load_validations() is False

        reset_config()
        assert default_load_validations() is True

    def test_set_config(self):
        """Test replacing the active configuration."""
        config = PageScopeConfig(load=LoadOptions(default_load_validations=False))
        assert set_config(config) is config
        assert get_config() is config

    def test_configure_from_file(self, tmp_path):
        """Test configure() loads and activates a file."""
        path = tmp_path / "pagescope.config.toml"
        path.write_text("[load]\ndefault_load_validations = false\n")

        configure(path)

        assert default_load_validations() is False
