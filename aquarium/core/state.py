"""
Shared mutable state of a running aquarium.
"""

import bisect
from dataclasses import dataclass, field
from typing import List, Optional

from .entities import Bubble, Fish, Weed
from .vector import Vector2


@dataclass
class SimulationState:
    """
    Everything the behavior tick and the render frame share.

    Owned by one controller and passed by reference to both stages.
    Surface dimensions are fixed for the lifetime of the state.
    """

    width: int
    height: int
    fishes: List[Fish] = field(default_factory=list)
    weeds: List[Weed] = field(default_factory=list)
    bubbles: List[Bubble] = field(default_factory=list)
    last_frame_time: Optional[float] = None
    bubbles_emitted: int = 0
    bubbles_culled: int = 0

    def in_bounds(self, position: Vector2) -> bool:
        """True if the position lies strictly inside the surface."""
        return 0 < position.x < self.width and 0 < position.y < self.height

    def advance_clock(self, now_ms: float) -> float:
        """
        Store `now_ms` as the frame reference and return the elapsed time.

        The first call returns 0.
        """
        if self.last_frame_time is None:
            delta = 0.0
        else:
            delta = now_ms - self.last_frame_time
        self.last_frame_time = now_ms
        return delta

    def add_weed(self, weed: Weed) -> None:
        """Insert a weed, keeping the list ordered by layer."""
        bisect.insort_right(self.weeds, weed, key=lambda w: w.layer)
