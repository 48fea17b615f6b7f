"""
RGB colour value with formatting helpers.
"""

from dataclasses import dataclass
from typing import Tuple


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


@dataclass(frozen=True)
class RGBColor:
    """Immutable colour with channel intensities in 0..255 and optional alpha."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 255) -> "RGBColor":
        """Build a colour, rounding and clamping each channel into 0..255."""
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b), _clamp_channel(a))

    @classmethod
    def from_hex(cls, text: str) -> "RGBColor":
        """
        Parse '#RRGGBB' or '#RRGGBBAA'.

        Args:
            text: Hex colour string, leading '#' optional

        Returns:
            Parsed colour
        """
        digits = text.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex colour: {text!r}")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        if self.a == 255:
            return f"rgb({self.r},{self.g},{self.b})"
        return f"rgba({self.r},{self.g},{self.b},{self.a / 255:.3f})"

    def __str__(self) -> str:
        return self.to_css()
