"""Tests for SimulationState bookkeeping."""

from aquarium.core.state import SimulationState
from aquarium.core.vector import Vector2


def test_in_bounds_is_strict(empty_state):
    assert empty_state.in_bounds(Vector2(1.0, 1.0))
    assert empty_state.in_bounds(Vector2(799.9, 599.9))
    assert not empty_state.in_bounds(Vector2(0.0, 300.0))
    assert not empty_state.in_bounds(Vector2(800.0, 300.0))
    assert not empty_state.in_bounds(Vector2(400.0, -0.5))
    assert not empty_state.in_bounds(Vector2(400.0, 600.0))


def test_advance_clock_first_frame_has_zero_delta():
    state = SimulationState(width=10, height=10)

    assert state.advance_clock(5000.0) == 0.0
    assert state.advance_clock(5016.0) == 16.0
    assert state.advance_clock(5016.0) == 0.0
    assert state.last_frame_time == 5016.0


def test_add_weed_keeps_layer_order(empty_state, make_weed):
    for layer in (2, 0, 3, 1, 0, 2):
        empty_state.add_weed(make_weed(layer=layer))

    layers = [w.layer for w in empty_state.weeds]
    assert layers == sorted(layers)


def test_add_weed_appends_after_equal_layers(empty_state, make_weed):
    first = make_weed(layer=1, x=10.0)
    second = make_weed(layer=1, x=20.0)
    empty_state.add_weed(first)
    empty_state.add_weed(second)

    assert empty_state.weeds == [first, second]
