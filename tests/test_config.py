"""Tests for configuration loading and validation."""

import json

import pytest

from aquarium.core.config import AquariumConfig, ConfigError, load_config


def test_defaults_match_scene_cadence():
    config = AquariumConfig()

    assert config.fishCount == 5
    assert config.weedCount == 20
    assert config.behaviorIntervalMs == 300
    assert config.headingChangeProbability == pytest.approx(0.05)
    assert config.gazeChangeProbability == pytest.approx(0.6)
    assert config.bubbleProbability == pytest.approx(0.3)
    assert config.fpsTarget == 0


def test_from_dict_ignores_unknown_keys():
    config = AquariumConfig.from_dict({"fishCount": 9, "sharkCount": 3})

    assert config.fishCount == 9
    assert not hasattr(config, "sharkCount")


def test_to_dict_feeds_from_dict():
    config = AquariumConfig(fishCount=2, weedCount=7, seed=11)
    assert AquariumConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("field,value", [
    ("fishCount", -1),
    ("screenWidth", -10),
    ("bubbleProbability", 1.5),
    ("gazeChangeProbability", -0.1),
    ("behaviorIntervalMs", 0),
    ("curveSegments", 0),
])
def test_validate_rejects_out_of_range(field, value):
    config = AquariumConfig(**{field: value})
    with pytest.raises(ConfigError):
        config.validate()


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "aquarium.json"
    path.write_text(json.dumps({"fishCount": 12, "screenWidth": 640, "screenHeight": 480}))

    config = load_config(str(path))

    assert config.fishCount == 12
    assert (config.screenWidth, config.screenHeight) == (640, 480)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        load_config(str(tmp_path / "nope.json"))


def test_load_config_malformed_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{fishCount: ")

    with pytest.raises(ConfigError, match="Malformed config"):
        load_config(str(path))


def test_load_config_requires_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_config_validates(tmp_path):
    path = tmp_path / "neg.json"
    path.write_text(json.dumps({"weedCount": -4}))

    with pytest.raises(ConfigError, match="weedCount"):
        load_config(str(path))


@pytest.mark.parametrize("field,value", [
    ("fishCount", "5"),
    ("screenWidth", 640.5),
    ("weedCount", True),
    ("bubbleProbability", "0.3"),
    ("seed", "7"),
])
def test_validate_rejects_wrong_types(field, value):
    config = AquariumConfig(**{field: value})
    with pytest.raises(ConfigError, match=field):
        config.validate()


def test_validate_accepts_integer_rates():
    config = AquariumConfig(bubbleProbability=1, bubbleSwayReferenceMs=16)
    assert config.validate() is config


def test_load_config_string_count(tmp_path):
    path = tmp_path / "typed.json"
    path.write_text(json.dumps({"fishCount": "5"}))

    with pytest.raises(ConfigError, match="fishCount"):
        load_config(str(path))
