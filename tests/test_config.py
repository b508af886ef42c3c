"""Tests for configuration handling."""

import json
import logging

import pytest

from password_analyzer.utils.config import Config, verbosity_to_level
from password_analyzer.utils.exceptions import ConfigError


def test_defaults_without_file(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    assert config["length"] == 16
    assert config.get("include_symbols") is True
    assert config.get("verbosity") == "warning"
    assert "count" in config


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"length": 24, "include_symbols": False}))
    config = Config(str(path))
    assert config["length"] == 24
    assert config["include_symbols"] is False
    assert config["include_numbers"] is True


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    config.update({"length": 20})
    config.save()

    assert json.loads(path.read_text())["length"] == 20
    assert Config(str(path)).get("length") == 20


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config(str(path))


def test_non_object_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ConfigError, match="JSON object"):
        Config(str(path))


def test_defaults_are_not_shared(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    config.update({"length": 99})
    assert Config.DEFAULT_CONFIG["length"] == 16


@pytest.mark.parametrize("verbosity, level", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("error", logging.ERROR),
    ("bogus", logging.WARNING),
    (logging.CRITICAL, logging.CRITICAL),
])
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


@pytest.mark.parametrize("values", [
    {"include_symbols": "false"},
    {"length": "abc"},
    {"length": True},
    {"count": 2.5},
    {"verbosity": 10},
])
def test_wrong_types_raise(tmp_path, values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values))
    with pytest.raises(ConfigError, match="must be"):
        Config(str(path))


def test_update_checks_types(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError):
        config.update({"include_numbers": 1})
    assert config["include_numbers"] is True


def test_unknown_keys_are_kept(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "dark", "log_file": None}))
    config = Config(str(path))
    assert config.get("theme") == "dark"
    assert config.get("log_file") is None
