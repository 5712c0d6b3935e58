"""
Tests for settings and YAML configuration loading.
"""

import logging

import pytest
import yaml

from q3log.config import quake_data
from q3log.config.loader import ConfigLoader, load_and_apply_config
from q3log.config.settings import ParserSettings, reload_settings, get_settings


class TestQuakeData:
    """Test default mappings."""

    def test_default_mappings(self):
        assert quake_data.get_method_label("MOD_RAILGUN") == "Railgun"
        assert quake_data.get_method_label("MOD_NEW") == "MOD_NEW"
        assert quake_data.is_environmental_method("MOD_TRIGGER_HURT")
        assert not quake_data.is_environmental_method("MOD_SHOTGUN")
        assert quake_data.is_world_actor("<world>")
        assert not quake_data.is_world_actor("world")


class TestConfigLoader:
    """Test ConfigLoader."""

    def test_load_explicit_path(self, tmp_path):
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(yaml.safe_dump({"method_labels": {"MOD_RAILGUN": "Rail"}}))

        config = ConfigLoader.load_config(str(config_path))

        assert config == {"method_labels": {"MOD_RAILGUN": "Rail"}}

    def test_missing_config_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert ConfigLoader.load_config() == {}

    def test_search_path_used_without_explicit_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "q3log.yaml").write_text(yaml.safe_dump({"environmental_methods": ["MOD_ACID"]}))

        assert ConfigLoader.load_config() == {"environmental_methods": ["MOD_ACID"]}

    def test_missing_explicit_path_does_not_fall_back(self, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "q3log.yaml").write_text(yaml.safe_dump({"method_labels": {"MOD_RAILGUN": "Local"}}))

        with caplog.at_level(logging.ERROR):
            assert ConfigLoader.load_config(str(tmp_path / "nope.yaml")) == {}

        assert "Configuration file not found" in caplog.text

    def test_broken_yaml_is_ignored(self, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("method_labels: [unclosed")

        with caplog.at_level(logging.ERROR):
            assert ConfigLoader.load_config(str(config_path)) == {}

        assert "Failed to load config" in caplog.text

    def test_apply_config(self, isolated_quake_data):
        ConfigLoader.apply_config({
            "method_labels": {"MOD_RAILGUN": "Rail", "MOD_ACID": "Acid Pool"},
            "environmental_methods": ["MOD_ACID"],
        })

        assert isolated_quake_data.get_method_label("MOD_RAILGUN") == "Rail"
        assert isolated_quake_data.get_method_label("MOD_ACID") == "Acid Pool"
        assert isolated_quake_data.is_environmental_method("MOD_ACID")

    def test_invalid_entries_skipped(self, isolated_quake_data, caplog):
        with caplog.at_level(logging.WARNING):
            ConfigLoader.apply_config({
                "method_labels": {"MOD_RAILGUN": None},
                "environmental_methods": [42, "MOD_ACID"],
            })

        assert isolated_quake_data.get_method_label("MOD_RAILGUN") == "Railgun"
        assert isolated_quake_data.is_environmental_method("MOD_ACID")
        assert 42 not in isolated_quake_data.ENVIRONMENTAL_METHODS
        assert "Invalid" in caplog.text

    def test_wrong_section_types(self, isolated_quake_data, caplog):
        with caplog.at_level(logging.WARNING):
            ConfigLoader.apply_config({"method_labels": ["MOD_RAILGUN"], "environmental_methods": "MOD_ACID"})

        assert isolated_quake_data.get_method_label("MOD_RAILGUN") == "Railgun"
        assert "must be" in caplog.text

    def test_load_and_apply(self, tmp_path, isolated_quake_data):
        config_path = tmp_path / "q3log.yaml"
        config_path.write_text(yaml.safe_dump({"method_labels": {"MOD_BFG": "Big Gun"}}))

        config = load_and_apply_config(str(config_path))

        assert config["method_labels"]["MOD_BFG"] == "Big Gun"
        assert isolated_quake_data.get_method_label("MOD_BFG") == "Big Gun"


class TestParserSettings:
    """Test environment driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("Q3LOG_LOG_LEVEL", "Q3LOG_DEFAULT_VIEW", "Q3LOG_ENCODING", "Q3LOG_WORKERS"):
            monkeypatch.delenv(name, raising=False)

        settings = ParserSettings.from_env()

        assert settings.log_level == "info"
        assert settings.default_view == "standard"
        assert settings.encoding == "utf-8"
        assert settings.workers is None
        assert settings.logging_level == logging.INFO
        settings.validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("Q3LOG_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("Q3LOG_DEFAULT_VIEW", "by_kill_method")
        monkeypatch.setenv("Q3LOG_WORKERS", "4")

        settings = ParserSettings.from_env()

        assert settings.log_level == "debug"
        assert settings.default_view == "by_kill_method"
        assert settings.workers == 4
        assert settings.logging_level == logging.DEBUG

    def test_bad_worker_count_falls_back(self, monkeypatch):
        monkeypatch.setenv("Q3LOG_WORKERS", "many")
        assert ParserSettings.from_env().workers is None

    def test_validate(self):
        settings = ParserSettings(log_level="loud", default_view="by_player", workers=0)

        with pytest.raises(ValueError) as exc_info:
            settings.validate()

        message = str(exc_info.value)
        assert "log level" in message
        assert "default view" in message
        assert "worker count" in message

    def test_validate_unknown_encoding(self):
        settings = ParserSettings(encoding="bogus")

        with pytest.raises(ValueError, match="Invalid encoding: bogus"):
            settings.validate()

    def test_reload_settings(self, monkeypatch):
        monkeypatch.setenv("Q3LOG_DEFAULT_VIEW", "by_kill_method")
        try:
            assert reload_settings().default_view == "by_kill_method"
            assert get_settings().default_view == "by_kill_method"
        finally:
            monkeypatch.delenv("Q3LOG_DEFAULT_VIEW")
            reload_settings()
