"""
Tests for script configuration loading
"""

import json
from pathlib import Path

import pytest

from hoteldesk_admin.exceptions import HotelDeskError
from hoteldesk_admin.managers.config_manager import CONFIG_PATH_ENV, DEFAULT_CONFIG, ConfigManager


def test_missing_config_is_created_with_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_mgr = ConfigManager(config_file)

    config = config_mgr.load_config()

    assert config == DEFAULT_CONFIG
    assert json.loads(config_file.read_text()) == DEFAULT_CONFIG


def test_missing_keys_are_filled_from_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"log_level": "DEBUG"}))

    config_mgr = ConfigManager(config_file)
    config_mgr.load_config()

    assert config_mgr.get("log_level") == "DEBUG"
    assert config_mgr.get("cashier_email") == "cashier@gmail.com"
    assert config_mgr.get("no_such_key", "fallback") == "fallback"


def test_invalid_config_file_is_rejected(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("[1, 2")

    with pytest.raises(HotelDeskError):
        ConfigManager(config_file).load_config()

    config_file.write_text("[1, 2]")
    with pytest.raises(HotelDeskError):
        ConfigManager(config_file).load_config()


def test_set_persists(tmp_path):
    config_file = tmp_path / "nested" / "config.json"
    config_mgr = ConfigManager(config_file)
    config_mgr.load_config()

    config_mgr.set("cashier_email", "till@hotel.com")

    reloaded = ConfigManager(config_file)
    reloaded.load_config()
    assert reloaded.get("cashier_email") == "till@hotel.com"


def test_environment_variable_selects_config_file(tmp_path, monkeypatch):
    config_file = tmp_path / "alt.json"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

    assert ConfigManager().config_file == config_file


def test_default_location_is_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    assert ConfigManager().config_file == Path.cwd() / "config.json"


def test_relative_database_path_resolves_next_to_config(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"database_path": "data/store.db"}))
    config_mgr = ConfigManager(config_file)
    config_mgr.load_config()

    assert config_mgr.get_database_path() == str(tmp_path / "data" / "store.db")

    absolute = tmp_path / "elsewhere.db"
    config_mgr.config["database_path"] = str(absolute)
    assert config_mgr.get_database_path() == str(absolute)
