"""
Slow-cadence behavior tick: heading, gaze and bubble decisions.
"""

import random

from ..core.config import AquariumConfig, DEFAULT_CONFIG
from ..core.entities import Fish
from ..core.state import SimulationState
from ..core.vector import Vector2
from ..generation.generators import generate_bubble


def turn_back(fish: Fish, rng=random) -> Vector2:
    """
    Pick a new heading biased away from the current one.

    Each axis gets a random magnitude in [0, 1) and points negative when
    the fish was moving positive on that axis, so fish near an edge turn
    back toward the middle.
    """
    x = rng.random()
    y = rng.random()

    if fish.moveDir.x > 0:
        x = -x
    if fish.moveDir.y > 0:
        y = -y

    return Vector2(x, y)


def random_gaze(rng=random) -> Vector2:
    return Vector2(rng.random() - 0.5, rng.random() - 0.5)


def cull_bubbles(state: SimulationState) -> int:
    """
    Drop bubbles that left the surface.

    Returns:
        Number of bubbles removed
    """
    before = len(state.bubbles)
    state.bubbles = [b for b in state.bubbles if state.in_bounds(b.position)]
    removed = before - len(state.bubbles)
    state.bubbles_culled += removed
    return removed


def behavior_tick(state: SimulationState, config: AquariumConfig = DEFAULT_CONFIG,
                  rng=random) -> None:
    """
    Run one behavior tick over every fish, then cull bubbles.

    Heading, gaze and bubble emission are independent draws. A fish outside
    the surface always gets a new heading.

    Args:
        state: Shared simulation state, mutated in place
        config: Decision probabilities
        rng: Random source
    """
    for fish in state.fishes:
        change_heading = (rng.random() < config.headingChangeProbability
                          or not state.in_bounds(fish.position))
        change_gaze = rng.random() < config.gazeChangeProbability
        make_bubble = rng.random() < config.bubbleProbability

        if change_heading:
            fish.moveDir = turn_back(fish, rng)

        if change_gaze:
            fish.lookDir = random_gaze(rng)

        if make_bubble:
            state.bubbles.append(generate_bubble(fish, rng))
            state.bubbles_emitted += 1

    cull_bubbles(state)
