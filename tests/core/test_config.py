"""Tests for configuration loading."""

import json

import pytest

from src.core import config


@pytest.mark.unit
def test_defaults_are_applied(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"drupal_root": "/var/www"}))

    loaded = config.load_config(path)

    assert loaded["theme"] == "groundwork"
    assert loaded["styles_dir"] == "css/block-style-components"


@pytest.mark.unit
def test_missing_config_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "absent.json")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ValueError, match="Configuration not found"):
        config.load_config()


@pytest.mark.unit
def test_get_config_is_cached(config_file):
    first = config.get_config()
    config_file.write_text(json.dumps({"drupal_root": "/elsewhere"}))

    assert config.get_config() is first

    config.reset_config()
    assert config.get_config()["drupal_root"] == "/elsewhere"


@pytest.mark.unit
def test_missing_drupal_root_raises(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"drupal_root": str(tmp_path / "gone")}))
    monkeypatch.setattr(config, "CONFIG_PATH", path)

    with pytest.raises(ValueError, match="Drupal root not found"):
        config.get_drupal_root()


@pytest.mark.unit
def test_category_order_override(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"drupal_root": "/x", "category_order": {"Brand": 1, "Misc": "2"}}))
    monkeypatch.setattr(config, "CONFIG_PATH", path)

    assert config.get_category_order() == (("Brand", 1), ("Misc", 2))


@pytest.mark.unit
def test_category_order_defaults_to_none(config_file):
    assert config.get_category_order() is None
