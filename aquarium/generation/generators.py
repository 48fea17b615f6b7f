"""
Randomized entity generators.

All generators take an optional `rng` with the `random.Random` interface so
tests can seed them; by default the module-level `random` is used.
"""

import random
from typing import List, Sequence

from ..core.color import RGBColor
from ..core.entities import FISH_KINDS, Bubble, Fish, FishKind, Weed
from ..core.vector import Vector2


def rand_in_range(low: float, high: float, rng=random) -> float:
    """Uniform float in [low, high]."""
    return rng.uniform(low, high)


def rand_int_in_range(low: int, high: int, rng=random) -> int:
    """Uniform integer in [low, high), or `low` when the range is empty."""
    if high <= low:
        return int(low)
    return int(low) + int(rng.random() * (high - low))


def random_color(min_r: int = 0, max_r: int = 255,
                 min_b: int = 0, max_b: int = 255,
                 min_g: int = 0, max_g: int = 255, rng=random) -> RGBColor:
    """
    Sample a colour channel by channel.

    Note the argument order is red, blue, green. Callers pass ranges in
    that order.

    Args:
        min_r, max_r: Red range
        min_b, max_b: Blue range
        min_g, max_g: Green range
        rng: Random source

    Returns:
        Opaque RGBColor with integer channels
    """
    r = rand_int_in_range(min_r, max_r, rng)
    g = rand_int_in_range(min_g, max_g, rng)
    b = rand_int_in_range(min_b, max_b, rng)
    return RGBColor(r, g, b)


def _random_direction(rng) -> Vector2:
    return Vector2(rng.random() * 2 - 1, rng.random() * 2 - 1)


def generate_fish(count: int, surface_width: float, surface_height: float,
                  kinds: Sequence[FishKind] = FISH_KINDS, rng=random) -> List[Fish]:
    """
    Generate a population of fish scattered over the surface.

    Args:
        count: Number of fish
        surface_width: Surface width in pixels
        surface_height: Surface height in pixels
        kinds: Body shapes to choose from
        rng: Random source

    Returns:
        List of `count` independent Fish
    """
    fishes = []
    for _ in range(count):
        fishes.append(Fish(
            position=Vector2(rng.random() * surface_width, rng.random() * surface_height),
            moveDir=_random_direction(rng),
            lookDir=_random_direction(rng),
            size=rand_in_range(30, 200, rng),
            speed=rand_in_range(0.05, 0.3, rng),
            pupilRatio=rand_in_range(0.6, 0.8, rng),
            kind=rng.choice(kinds),
            color=random_color(150, 255, 0, 150, 0, 150, rng=rng),
            floaterPhase=float(round(rand_in_range(0, 3, rng))),
        ))
    return fishes


def generate_weeds(count: int, surface_width: float, surface_height: float,
                   rng=random) -> List[Weed]:
    """
    Generate kelp rooted just below the bottom edge, sorted by layer.

    Args:
        count: Number of weeds
        surface_width: Surface width in pixels
        surface_height: Surface height in pixels
        rng: Random source

    Returns:
        Weeds in ascending layer order
    """
    weeds = []
    for _ in range(count):
        weeds.append(Weed(
            length=rand_in_range(100, 500, rng),
            width=rand_in_range(4, 7, rng),
            layer=int(round(rand_in_range(0, 3, rng))),
            bendDistance=rand_in_range(8, 20, rng),
            segmentLength=rand_in_range(30, 40, rng),
            color=random_color(0, 10, 20, 60, 50, 80, rng=rng),
            position=Vector2(
                rand_in_range(0, surface_width, rng),
                rand_in_range(surface_height, surface_height + 20, rng),
            ),
        ))

    weeds.sort(key=lambda weed: weed.layer)
    return weeds


def generate_bubble(fish: Fish, rng=random) -> Bubble:
    """
    Emit a bubble half a body length ahead of the fish.

    Args:
        fish: Emitting fish
        rng: Random source

    Returns:
        New Bubble at the fish's mouth side
    """
    offset = fish.size / 2 if fish.moveDir.x > 0 else -fish.size / 2
    return Bubble(
        position=Vector2(fish.position.x + offset, fish.position.y),
        radius=rand_in_range(2, fish.size / 10, rng),
    )
