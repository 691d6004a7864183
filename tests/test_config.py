"""Tests for demo configuration."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pytps.config import Config, DEFAULT_CONFIG


def test_defaults_when_missing(tmp_path):
    config = Config(tmp_path / "config.json")
    assert config.initial_name == DEFAULT_CONFIG["initial_name"]
    assert config.initial_age == 0
    assert config.debug_logging is False
    assert config.show_stack is False


def test_load_merges_stored_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"initial_name": "Vito", "initial_age": 65}))
    config = Config(path)
    assert config.initial_name == "Vito"
    assert config.initial_age == 65
    assert config.show_stack is False


def test_malformed_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(path)
    assert config.initial_name == "No Name"


def test_set_persists(tmp_path):
    path = tmp_path / "sub" / "config.json"
    config = Config(path)
    config.set("initial_name", "Fredo")
    config.show_stack = True
    stored = json.loads(path.read_text())
    assert stored["initial_name"] == "Fredo"
    assert stored["show_stack"] is True
    assert Config(path).initial_name == "Fredo"


def test_bad_initial_age_falls_back_to_default(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"initial_age": "abc"}))
    assert Config(path).initial_age == DEFAULT_CONFIG["initial_age"]
    path.write_text(json.dumps({"initial_age": None}))
    assert Config(path).initial_age == DEFAULT_CONFIG["initial_age"]
