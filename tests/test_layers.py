"""Tests for weed layer grouping and sway transforms."""

import math

import pytest

from aquarium.rendering.canvas import RecordingCanvas
from aquarium.rendering.layers import apply_layer_transform, group_by_layer, layer_sway


def test_group_by_layer_contiguous_groups(make_weed):
    weeds = [make_weed(layer=l) for l in (0, 0, 1, 1, 3)]

    groups = list(group_by_layer(weeds))

    assert [(layer, len(group)) for layer, group in groups] == [(0, 2), (1, 2), (3, 1)]
    assert groups[0][1] == weeds[:2]


def test_group_by_layer_empty():
    assert list(group_by_layer([])) == []


def test_layer_sway_depends_on_time_and_layer():
    assert layer_sway(0.0, 0) == pytest.approx(0.0)
    assert layer_sway(0.0, 1) == pytest.approx(math.sin(1) / 50)
    assert layer_sway(1000.0, 2) == pytest.approx(math.sin(3) / 50)


def test_layer_transform_flips_scene_so_weeds_grow_upward():
    canvas = RecordingCanvas(800, 600)

    sway = apply_layer_transform(canvas, 0, 0.0, 800, 600)

    assert sway == pytest.approx(0.0)
    # Root just below the bottom edge
    x, y = canvas.to_device(100.0, 600.0)
    assert x == pytest.approx(700.0)
    assert y == pytest.approx(650.0)
    # 300px further along the strand is 300px higher on screen
    _, y_tip = canvas.to_device(100.0, 900.0)
    assert y_tip == pytest.approx(350.0)


def test_layer_transform_resets_previous_state():
    canvas = RecordingCanvas(800, 600)
    canvas.translate(1000, 1000)

    apply_layer_transform(canvas, 1, 0.0, 800, 600)

    assert canvas.names()[1:4] == ["reset_transform", "rotate", "transform"]


def test_layer_sway_shears_horizontally():
    canvas = RecordingCanvas(800, 600)
    sway = apply_layer_transform(canvas, 1, 0.0, 800, 600)

    x_low, _ = canvas.to_device(100.0, 600.0)
    x_high, _ = canvas.to_device(100.0, 900.0)

    assert x_low - x_high == pytest.approx(sway * 300.0)
