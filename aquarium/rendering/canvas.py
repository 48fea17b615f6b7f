"""
Drawing capability consumed by the scene renderer.

`Canvas` follows HTML-canvas semantics: a current transformation matrix
with a save/restore stack, path building where points are mapped through
the current transform as they are added, and fill/stroke painting with
style attributes. Subclasses only implement the two raster hooks
`_paint_fill` and `_paint_stroke`.
"""

import math
from typing import List, Optional, Tuple

import numpy as np

from ..core.color import RGBColor

Point = Tuple[float, float]


def resolve_color(style) -> RGBColor:
    """
    Turn a style value into an RGBColor.

    Args:
        style: RGBColor, '#RRGGBB[AA]' string, or an (r, g, b[, a]) tuple

    Returns:
        Equivalent RGBColor
    """
    if isinstance(style, RGBColor):
        return style
    if isinstance(style, str):
        return RGBColor.from_hex(style)
    return RGBColor.clamped(*style)


class Subpath:
    """A run of device-space points started by move_to."""

    def __init__(self, start: Point):
        self.points: List[Point] = [start]
        self.closed = False

    def __len__(self) -> int:
        return len(self.points)


class Canvas:
    """
    Base 2D drawing surface with an affine transform stack.

    Attributes:
        fill_style: Colour used by fill() and fill_rect()
        stroke_style: Colour used by stroke()
        line_width: Stroke width in user units
        line_join: 'miter', 'round' or 'bevel'
        line_cap: 'butt', 'round' or 'square'
    """

    def __init__(self, width: int, height: int, curve_segments: int = 12):
        if curve_segments <= 0:
            raise ValueError(f"curve_segments must be positive, got {curve_segments}")

        self.width = width
        self.height = height
        self.curve_segments = curve_segments

        self.fill_style = RGBColor(0, 0, 0)
        self.stroke_style = RGBColor(0, 0, 0)
        self.line_width = 1.0
        self.line_join = "miter"
        self.line_cap = "butt"

        self._matrix = np.identity(3)
        self._stack = []
        self._subpaths: List[Subpath] = []

    # ------------------------------------------------------------------
    # Transform stack
    # ------------------------------------------------------------------

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        """Multiply the current transform by [[a, c, e], [b, d, f], [0, 0, 1]]."""
        self._record("transform", a, b, c, d, e, f)
        self._matrix = self._matrix @ np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._record("set_transform", a, b, c, d, e, f)
        self._matrix = np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])

    def reset_transform(self) -> None:
        self._record("reset_transform")
        self._matrix = np.identity(3)

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)
        self._matrix = self._matrix @ np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)
        cos, sin = math.cos(angle), math.sin(angle)
        self._matrix = self._matrix @ np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]])

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)
        self._matrix = self._matrix @ np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])

    def save(self) -> None:
        """Push the transform and style state."""
        self._record("save")
        self._stack.append((
            self._matrix.copy(),
            self.fill_style, self.stroke_style,
            self.line_width, self.line_join, self.line_cap,
        ))

    def restore(self) -> None:
        """Pop the state pushed by the matching save()."""
        self._record("restore")
        if not self._stack:
            raise ValueError("restore() without matching save()")
        (self._matrix, self.fill_style, self.stroke_style,
         self.line_width, self.line_join, self.line_cap) = self._stack.pop()

    def to_device(self, x: float, y: float) -> Point:
        """Map a user-space point through the current transform."""
        m = self._matrix
        return (m[0, 0] * x + m[0, 1] * y + m[0, 2],
                m[1, 0] * x + m[1, 1] * y + m[1, 2])

    def device_line_width(self) -> float:
        """Stroke width after the current transform's area scale."""
        return self.line_width * math.sqrt(abs(np.linalg.det(self._matrix[:2, :2])))

    # ------------------------------------------------------------------
    # Path building
    # ------------------------------------------------------------------

    def begin_path(self) -> None:
        self._record("begin_path")
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)
        self._subpaths.append(Subpath(self.to_device(x, y)))

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)
        self._line_to_device(self.to_device(x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Quadratic Bezier from the current point; flattened in device space."""
        self._record("quadratic_curve_to", cpx, cpy, x, y)
        control = self.to_device(cpx, cpy)
        end = self.to_device(x, y)

        if not self._subpaths:
            # Canvas semantics: with no current point the curve starts at its control point
            self._subpaths.append(Subpath(control))
        current = self._subpaths[-1]
        start = current.points[-1]

        for i in range(1, self.curve_segments + 1):
            t = i / self.curve_segments
            u = 1.0 - t
            current.points.append((
                u * u * start[0] + 2 * u * t * control[0] + t * t * end[0],
                u * u * start[1] + 2 * u * t * control[1] + t * t * end[1],
            ))

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float,
            anticlockwise: bool = False) -> None:
        """
        Circular arc, joined to the current subpath by a straight line.

        Args:
            cx, cy: Centre in user space
            radius: Radius in user units
            start_angle, end_angle: Radians, measured clockwise on screen
            anticlockwise: Sweep direction
        """
        self._record("arc", cx, cy, radius, start_angle, end_angle, anticlockwise)
        full = 2 * math.pi
        if not anticlockwise:
            if end_angle - start_angle >= full:
                sweep = full
            else:
                sweep = (end_angle - start_angle) % full
        elif start_angle - end_angle >= full:
            sweep = -full
        elif start_angle < end_angle:
            # End angle is pulled below the start, so a 0..2pi request is a full turn
            sweep = -(full - math.fmod(end_angle - start_angle, full))
        else:
            sweep = -((start_angle - end_angle) % full)

        steps = max(1, int(math.ceil(self.curve_segments * abs(sweep) / (math.pi / 2))))
        for i in range(steps + 1):
            angle = start_angle + sweep * i / steps
            point = self.to_device(cx + radius * math.cos(angle), cy + radius * math.sin(angle))
            if i == 0:
                self._line_to_device(point)
            else:
                self._subpaths[-1].points.append(point)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("rect", x, y, w, h)
        sub = Subpath(self.to_device(x, y))
        sub.points.extend([self.to_device(x + w, y), self.to_device(x + w, y + h),
                           self.to_device(x, y + h)])
        sub.closed = True
        self._subpaths.append(sub)
        self._subpaths.append(Subpath(self.to_device(x, y)))

    def close_path(self) -> None:
        self._record("close_path")
        if self._subpaths:
            current = self._subpaths[-1]
            current.closed = True
            self._subpaths.append(Subpath(current.points[0]))

    def _line_to_device(self, point: Point) -> None:
        if not self._subpaths:
            self._subpaths.append(Subpath(point))
        else:
            self._subpaths[-1].points.append(point)

    @property
    def subpaths(self) -> List[Subpath]:
        return list(self._subpaths)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def fill(self) -> None:
        """Fill every subpath of the current path with fill_style."""
        self._record("fill")
        polygons = [sub.points for sub in self._subpaths if len(sub) >= 3]
        if polygons:
            self._paint_fill(polygons, resolve_color(self.fill_style))

    def stroke(self) -> None:
        """Stroke every subpath of the current path with stroke_style."""
        self._record("stroke")
        polylines = []
        for sub in self._subpaths:
            if len(sub) < 2:
                continue
            points = list(sub.points)
            if sub.closed:
                points.append(points[0])
            polylines.append(points)
        if polylines:
            self._paint_stroke(polylines, resolve_color(self.stroke_style), self.device_line_width())

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Fill a rectangle without touching the current path."""
        self._record("fill_rect", x, y, w, h)
        corners = [self.to_device(x, y), self.to_device(x + w, y),
                   self.to_device(x + w, y + h), self.to_device(x, y + h)]
        self._paint_fill([corners], resolve_color(self.fill_style))

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _record(self, name: str, *args) -> None:
        pass

    def _paint_fill(self, polygons: List[List[Point]], color: RGBColor) -> None:
        raise NotImplementedError

    def _paint_stroke(self, polylines: List[List[Point]], color: RGBColor, width: float) -> None:
        raise NotImplementedError


class RecordingCanvas(Canvas):
    """
    Canvas that rasterizes nothing and remembers every call.

    `calls` holds (name, args) tuples in issue order. `fills` and `strokes`
    hold the device-space geometry and colour of each paint operation.
    """

    def __init__(self, width: int = 800, height: int = 600, curve_segments: int = 4):
        self.calls: List[Tuple[str, tuple]] = []
        self.fills: List[Tuple[List[List[Point]], RGBColor]] = []
        self.strokes: List[Tuple[List[List[Point]], RGBColor, float]] = []
        super().__init__(width, height, curve_segments)

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def _paint_fill(self, polygons, color) -> None:
        self.fills.append(([list(p) for p in polygons], color))

    def _paint_stroke(self, polylines, color, width) -> None:
        self.strokes.append(([list(p) for p in polylines], color, width))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return sum(1 for n, _ in self.calls if n == name)

    def clear(self) -> None:
        self.calls.clear()
        self.fills.clear()
        self.strokes.clear()

    def last(self, name: str) -> Optional[tuple]:
        for n, args in reversed(self.calls):
            if n == name:
                return args
        return None
