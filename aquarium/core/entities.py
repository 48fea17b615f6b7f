"""
Entity data model: fish kinds, fish, weeds and bubbles.
"""

from dataclasses import dataclass
from typing import Tuple

from .color import RGBColor
from .vector import Vector2


@dataclass(frozen=True)
class FishKind:
    """
    Body-shape proportions shared by many fish.

    Every value is a multiple of the owning fish's size.
    """

    name: str
    tailWidth: float
    tailLength: float
    mainFloaterLength: float
    topFloaterHeight: float
    bodyLength: float
    eyeSize: float


FISH_KINDS: Tuple[FishKind, ...] = (
    FishKind("long", tailWidth=0.45, tailLength=0.5, mainFloaterLength=0.33,
             topFloaterHeight=0.2, bodyLength=1.1, eyeSize=0.1),
    FishKind("stubby", tailWidth=0.5, tailLength=0.5, mainFloaterLength=0.4,
             topFloaterHeight=0.15, bodyLength=0.7, eyeSize=0.08),
    FishKind("goggle", tailWidth=0.35, tailLength=0.45, mainFloaterLength=0.45,
             topFloaterHeight=0.2, bodyLength=1.0, eyeSize=0.11),
    FishKind("compact", tailWidth=0.4, tailLength=0.3, mainFloaterLength=0.35,
             topFloaterHeight=0.15, bodyLength=0.8, eyeSize=0.07),
)


@dataclass
class Fish:
    """
    A swimming fish.

    `position` changes every render frame; `moveDir` and `lookDir` change on
    behavior ticks. Neither direction is required to be unit length. The
    sign of `moveDir.x` decides which way the fish faces.
    """

    position: Vector2
    moveDir: Vector2
    lookDir: Vector2
    size: float
    speed: float
    pupilRatio: float
    kind: FishKind
    color: RGBColor
    floaterPhase: float

    @property
    def facing_left(self) -> bool:
        return self.moveDir.x < 0


@dataclass(frozen=True)
class Weed:
    """A strand of kelp. Immutable once generated."""

    position: Vector2
    length: float
    width: float
    layer: int
    bendDistance: float
    segmentLength: float
    color: RGBColor

    @property
    def segment_count(self) -> int:
        # A trailing partial segment is still drawn
        full, remainder = divmod(self.length, self.segmentLength)
        return int(full) + (1 if remainder > 0 else 0)


@dataclass
class Bubble:
    """A rising bubble, owned exclusively by the live bubble list."""

    position: Vector2
    radius: float
