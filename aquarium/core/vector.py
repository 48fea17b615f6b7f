"""
Immutable 2D vector used for every position and direction in the aquarium.
"""

import math
from dataclasses import dataclass


class DegenerateVectorError(ValueError):
    """Raised when a zero-length vector is normalized in strict mode."""


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D point or displacement.

    Every operation returns a new instance. Screen coordinates are used
    throughout: origin top-left, +x right, +y down.
    """

    x: float
    y: float

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self, strict: bool = False) -> "Vector2":
        """
        Return a unit vector pointing the same way.

        Args:
            strict: Raise DegenerateVectorError for a zero vector instead
                of returning the zero vector

        Returns:
            Unit-length Vector2, or Vector2(0, 0) for a zero vector
        """
        mag = self.magnitude()
        if mag == 0:
            if strict:
                raise DegenerateVectorError("cannot normalize a zero-length vector")
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def move_along(self, direction: "Vector2", distance: float) -> "Vector2":
        """
        Step `distance` along the heading of `direction`.

        The heading angle is measured from the vertical axis
        (atan2(x, y)), so sine drives x and cosine drives y.

        Args:
            direction: Heading, not necessarily unit length
            distance: Distance to travel

        Returns:
            The displaced point
        """
        rotation = math.atan2(direction.x, direction.y)
        return Vector2(
            self.x + math.sin(rotation) * distance,
            self.y + math.cos(rotation) * distance,
        )


# Named directions. "up" is +y, matching the move_along convention.
Vector2.up = Vector2(0.0, 1.0)
Vector2.down = Vector2(0.0, -1.0)
Vector2.left = Vector2(-1.0, 0.0)
Vector2.right = Vector2(1.0, 0.0)
