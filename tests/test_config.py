"""Tests for loading and validating settings."""
import json

import pytest

from fuzzy_eyes.config import (
    DEFAULT_CONFIG, TEST_REMINDER_INTERVAL, load_config, save_config, validate_config,
)


@pytest.fixture
def cfg_path(tmp_path):
    return str(tmp_path / "fuzzy_eyes_config.json")


def write(path, data):
    with open(path, "w", encoding="utf-8") as f:
        f.write(data if isinstance(data, str) else json.dumps(data))


def test_defaults_when_file_missing(cfg_path):
    cfg = load_config(cfg_path)
    assert cfg["reminder_interval"] == 1200
    assert cfg["countdown_duration"] == 20
    assert cfg["dismiss_policy"] == "rearm"
    assert cfg["notification_backend"] == "toast"


def test_file_overrides_defaults(cfg_path):
    write(cfg_path, {"reminder_interval": 600, "dismiss_policy": "wait"})
    cfg = load_config(cfg_path)
    assert cfg["reminder_interval"] == 600
    assert cfg["dismiss_policy"] == "wait"
    assert cfg["countdown_duration"] == 20


def test_defaults_are_not_mutated(cfg_path):
    write(cfg_path, {"reminder_interval": 5})
    load_config(cfg_path)
    assert DEFAULT_CONFIG["reminder_interval"] == 1200


def test_test_mode_uses_short_interval(cfg_path):
    write(cfg_path, {"reminder_interval": 600})
    assert load_config(cfg_path, test_mode=True)["reminder_interval"] == TEST_REMINDER_INTERVAL == 10


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"text"'])
def test_bad_file_falls_back_to_defaults(cfg_path, content, caplog):
    write(cfg_path, content)
    with caplog.at_level("WARNING", logger="fuzzy_eyes"):
        cfg = load_config(cfg_path)
    assert cfg["reminder_interval"] == 1200
    assert caplog.records


@pytest.mark.parametrize("key, value, expected", [
    ("reminder_interval", 0, 1200),
    ("reminder_interval", -5, 1200),
    ("reminder_interval", "soon", 1200),
    ("reminder_interval", True, 1200),
    ("reminder_interval", 90.7, 90),
    ("countdown_duration", 0, 20),
    ("countdown_duration", 45, 45),
    ("toast_timeout", 1, 30),
    ("dismiss_policy", "later", "rearm"),
    ("notification_backend", "carrier pigeon", "toast"),
    ("notification_backend", "tray", "tray"),
])
def test_validation(key, value, expected):
    cfg = dict(DEFAULT_CONFIG, **{key: value})
    assert validate_config(cfg)[key] == expected


def test_non_string_sound_path_is_cleared():
    cfg = validate_config(dict(DEFAULT_CONFIG, custom_sound_path=42))
    assert cfg["custom_sound_path"] == ""


def test_save_then_load(cfg_path):
    cfg = load_config(cfg_path)
    cfg["countdown_duration"] = 30
    assert save_config(cfg, cfg_path) is True
    assert load_config(cfg_path)["countdown_duration"] == 30


def test_save_to_unwritable_path_reports_failure(tmp_path):
    assert save_config(dict(DEFAULT_CONFIG), str(tmp_path / "missing" / "cfg.json")) is False
