"""Tests for the configuration repository."""

import pytest
from yaml import dump, safe_load

from ticktrack import configuration
from ticktrack.repository.configuration import ConfigurationRepository


@pytest.fixture
def config_path(temp_dir, monkeypatch):
    path = temp_dir / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    return path


def test_missing_settings_are_back_filled_and_flushed(config_path):
    config_path.write_text(dump({"log_level": "DEBUG"}))
    repository = ConfigurationRepository()

    config = repository.get_config()

    assert config["log_level"] == "DEBUG"
    assert config["description_save_debounce_seconds"] == 1.0
    assert config["display_timer_interval_seconds"] == 1.0
    assert repository.flush() is True
    assert safe_load(config_path.read_text()) == config
    assert repository.flush() is False


def test_complete_config_is_not_rewritten(config_path):
    config_path.write_text(dump(configuration.get_default_configuration()))
    repository = ConfigurationRepository()

    repository.get_config()

    assert repository.flush() is False


def test_empty_config_file_gets_defaults(config_path):
    config_path.write_text("")
    repository = ConfigurationRepository()

    assert repository.get_config() == configuration.get_default_configuration()
