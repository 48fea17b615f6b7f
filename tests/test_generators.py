"""Tests for procedural entity generation."""

import pytest

from aquarium.core.entities import FISH_KINDS
from aquarium.core.vector import Vector2
from aquarium.generation.generators import (
    generate_bubble, generate_fish, generate_weeds, rand_int_in_range, random_color,
)

WIDTH, HEIGHT = 1024, 768


def test_fish_parameters_within_ranges(seeded_rng):
    fishes = generate_fish(300, WIDTH, HEIGHT, rng=seeded_rng)

    assert len(fishes) == 300
    for fish in fishes:
        assert 0 <= fish.position.x <= WIDTH
        assert 0 <= fish.position.y <= HEIGHT
        assert -1 <= fish.moveDir.x <= 1 and -1 <= fish.moveDir.y <= 1
        assert -1 <= fish.lookDir.x <= 1 and -1 <= fish.lookDir.y <= 1
        assert 30 <= fish.size <= 200
        assert 0.05 <= fish.speed <= 0.3
        assert 0.6 <= fish.pupilRatio <= 0.8
        assert fish.floaterPhase in (0.0, 1.0, 2.0, 3.0)
        assert isinstance(fish.floaterPhase, float)


def test_fish_color_channel_ranges(seeded_rng):
    for fish in generate_fish(300, WIDTH, HEIGHT, rng=seeded_rng):
        assert 150 <= fish.color.r <= 255
        assert 0 <= fish.color.g <= 150
        assert 0 <= fish.color.b <= 150


def test_fish_kinds_are_shared_instances(seeded_rng):
    fishes = generate_fish(100, WIDTH, HEIGHT, rng=seeded_rng)

    for fish in fishes:
        assert any(fish.kind is kind for kind in FISH_KINDS)
    assert len({id(f.kind) for f in fishes}) <= len(FISH_KINDS)


def test_fish_do_not_share_mutable_state(seeded_rng):
    a, b = generate_fish(2, WIDTH, HEIGHT, rng=seeded_rng)
    a.position = Vector2(-1.0, -1.0)

    assert b.position != Vector2(-1.0, -1.0)


def test_fish_uses_requested_kinds(seeded_rng):
    only = [FISH_KINDS[2]]
    fishes = generate_fish(20, WIDTH, HEIGHT, kinds=only, rng=seeded_rng)

    assert all(f.kind is FISH_KINDS[2] for f in fishes)


def test_zero_counts_produce_empty_lists(seeded_rng):
    assert generate_fish(0, WIDTH, HEIGHT, rng=seeded_rng) == []
    assert generate_weeds(0, WIDTH, HEIGHT, rng=seeded_rng) == []


def test_weeds_sorted_by_layer(seeded_rng):
    weeds = generate_weeds(200, WIDTH, HEIGHT, rng=seeded_rng)
    layers = [w.layer for w in weeds]

    assert layers == sorted(layers)
    assert set(layers) <= {0, 1, 2, 3}


def test_weed_parameters_within_ranges(seeded_rng):
    for weed in generate_weeds(200, WIDTH, HEIGHT, rng=seeded_rng):
        assert 100 <= weed.length <= 500
        assert 4 <= weed.width <= 7
        assert 8 <= weed.bendDistance <= 20
        assert 30 <= weed.segmentLength <= 40
        assert 0 <= weed.position.x <= WIDTH
        assert HEIGHT <= weed.position.y <= HEIGHT + 20


def test_weed_color_channel_ranges(seeded_rng):
    # Red, blue, green argument order: weeds end up green-dominant
    for weed in generate_weeds(200, WIDTH, HEIGHT, rng=seeded_rng):
        assert 0 <= weed.color.r < 10
        assert 50 <= weed.color.g < 80
        assert 20 <= weed.color.b < 60


def test_random_color_argument_order(seeded_rng):
    color = random_color(10, 11, 20, 21, 30, 31, rng=seeded_rng)

    assert (color.r, color.g, color.b) == (10, 30, 20)


def test_rand_int_in_range_empty_range_returns_low(seeded_rng):
    assert rand_int_in_range(5, 5, seeded_rng) == 5
    assert rand_int_in_range(5, 2, seeded_rng) == 5


@pytest.mark.parametrize("move_x,expected_offset", [(0.7, 50.0), (-0.2, -50.0), (0.0, -50.0)])
def test_bubble_spawns_on_moving_side(make_fish, seeded_rng, move_x, expected_offset):
    fish = make_fish(position=(400.0, 300.0), move_dir=(move_x, 0.5), size=100.0)

    bubble = generate_bubble(fish, rng=seeded_rng)

    assert bubble.position == Vector2(400.0 + expected_offset, 300.0)


def test_bubble_radius_range(make_fish, seeded_rng):
    fish = make_fish(size=120.0)

    for _ in range(100):
        assert 2 <= generate_bubble(fish, rng=seeded_rng).radius <= 12
