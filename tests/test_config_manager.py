"""
Tests for the JSON configuration manager.
"""
import json

from signal_locate.config_manager import DEFAULT_CONFIG, ConfigManager


def test_missing_file_uses_defaults(tmp_path, capsys):
    config = ConfigManager(str(tmp_path / "config.json"))

    assert config.get("base_weight") == 0.40
    assert config.get("heatmap_weight") == 0.60
    assert config.get("gradient_colors") == ["red", "yellow", "green"]
    assert config.get("radius") is None
    assert config.get("unknown", "fallback") == "fallback"
    assert "not found" in capsys.readouterr().out


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.config == {}
    assert "malformed" in capsys.readouterr().out


def test_non_object_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert ConfigManager(str(path)).config == {}


def test_set_saves_immediately(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = ConfigManager(str(path))

    config.set("radius", 120)

    assert json.loads(path.read_text(encoding="utf-8")) == {"radius": 120}
    assert ConfigManager(str(path)).get("radius") == 120


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"base_weight": 0.5, "interpolation": "linear"}), encoding="utf-8")

    config = ConfigManager(str(path))
    merged = config.get_all_config()

    assert merged["base_weight"] == 0.5
    assert merged["interpolation"] == "linear"
    assert merged["heatmap_weight"] == DEFAULT_CONFIG["heatmap_weight"]

    merged["base_weight"] = 1.0
    assert config.get("base_weight") == 0.5
