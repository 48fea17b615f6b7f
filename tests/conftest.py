"""Pytest configuration and fixtures for aquarium tests."""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from aquarium.core.color import RGBColor
from aquarium.core.entities import FISH_KINDS, Bubble, Fish, Weed
from aquarium.core.state import SimulationState
from aquarium.core.vector import Vector2


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def make_fish():
    """Factory for a fish with sensible defaults."""
    def _make(position=(100.0, 100.0), move_dir=(1.0, 0.0), look_dir=(0.0, 0.0),
              size=100.0, speed=0.2, kind=FISH_KINDS[0]):
        return Fish(
            position=Vector2(*position),
            moveDir=Vector2(*move_dir),
            lookDir=Vector2(*look_dir),
            size=size,
            speed=speed,
            pupilRatio=0.7,
            kind=kind,
            color=RGBColor(200, 50, 50),
            floaterPhase=1.0,
        )
    return _make


@pytest.fixture
def make_weed():
    """Factory for a weed with sensible defaults."""
    def _make(layer=0, x=50.0, y=600.0, length=100.0, segment_length=30.0):
        return Weed(
            position=Vector2(x, y),
            length=length,
            width=5.0,
            layer=layer,
            bendDistance=10.0,
            segmentLength=segment_length,
            color=RGBColor(5, 60, 30),
        )
    return _make


@pytest.fixture
def empty_state():
    """An 800x600 state with no entities."""
    return SimulationState(width=800, height=600)


@pytest.fixture
def bubble():
    return Bubble(position=Vector2(100.0, 300.0), radius=10.0)
