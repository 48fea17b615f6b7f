"""Tests for the command-line entry point."""

import argparse
import json

import pytest

from aquarium.core.config import ConfigError
from aquarium.main import build_config, main


def make_args(**kwargs):
    values = dict(config=None, width=None, height=None, fish=None, weeds=None, seed=None)
    values.update(kwargs)
    return argparse.Namespace(**values)


def test_build_config_applies_overrides():
    config = build_config(make_args(width=640, height=480, fish=8, seed=3))

    assert (config.screenWidth, config.screenHeight) == (640, 480)
    assert config.fishCount == 8
    assert config.weedCount == 20
    assert config.seed == 3


def test_build_config_overrides_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"fishCount": 2, "weedCount": 3}))

    config = build_config(make_args(config=str(path), weeds=11))

    assert config.fishCount == 2
    assert config.weedCount == 11


def test_build_config_rejects_negative_override():
    with pytest.raises(ConfigError):
        build_config(make_args(fish=-3))


def test_main_exits_on_bad_config(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "missing.json")])

    assert exc.value.code == 2
    assert "Error:" in capsys.readouterr().out


def test_main_headless_recording(tmp_path, capsys):
    snapshot = tmp_path / "frame.png"

    main(["--record", "4", "--width", "96", "--height", "64", "--fish", "2", "--weeds", "2",
          "--seed", "1", "--snapshot", str(snapshot)])

    out = capsys.readouterr().out
    assert "RECORDING SUMMARY" in out
    assert snapshot.exists()


def test_main_zero_frame_recording_stays_headless(tmp_path, monkeypatch, capsys):
    def fail_interactive(config):
        raise AssertionError("interactive window opened")

    monkeypatch.setattr("aquarium.main.run_interactive", fail_interactive)
    snapshot = tmp_path / "frame.png"

    main(["--record", "0", "--width", "32", "--height", "32", "--fish", "1", "--weeds", "1",
          "--snapshot", str(snapshot)])

    assert "RECORDING SUMMARY" in capsys.readouterr().out
    assert snapshot.exists()


def test_main_rejects_negative_frame_count():
    with pytest.raises(SystemExit) as exc:
        main(["--record", "-5"])

    assert exc.value.code == 2
