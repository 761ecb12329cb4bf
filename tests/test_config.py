"""Tests for the configuration singleton."""

import logging

import pytest
import yaml

from relnorm import config
from relnorm.engine.config import Config


def test_defaults():
    assert config.get("schema.strict") is False
    assert config.get("limits.warn_attributes") == 12
    assert config.get("missing.key", "fallback") == "fallback"
    assert not config.is_strict_schema()


def test_set_and_reset():
    config.set("limits.warn_attributes", 4)
    config.set("new.nested.value", True)
    assert config.warn_attributes() == 4
    assert config.get("new.nested.value") is True
    config.reset()
    assert config.warn_attributes() == 12
    assert config.get("new") is None


def test_singleton():
    assert Config.get_instance() is config
    with pytest.raises(RuntimeError):
        Config()


def test_load_and_save_yaml(tmp_path):
    path = tmp_path / "relnorm.yaml"
    path.write_text(yaml.dump({"schema": {"strict": True}}))
    config.load_from_file(str(path))
    assert config.is_strict_schema()
    assert config.warn_attributes() == 12

    out = tmp_path / "saved.yaml"
    config.save(str(out))
    assert yaml.safe_load(out.read_text())["schema"]["strict"] is True


def test_missing_file_keeps_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        config.load_from_file(str(tmp_path / "nope.yaml"))
    assert "not found" in caplog.text
    assert config.warn_attributes() == 12


def test_non_mapping_file_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        config.load_from_file(str(path))
