"""
Canvas implementation that rasterizes onto a pygame surface.
"""

import math
from typing import List, Optional

import pygame

from ..core.color import RGBColor
from .canvas import Canvas, Point


class PygameCanvas(Canvas):
    """
    Canvas backed by a pygame.Surface.

    Each fill or stroke is drawn onto a transparent scratch layer and then
    blitted once, so translucent colours blend once per paint call even
    where subpaths overlap. Only the bounding box of the painted geometry
    is cleared and blitted.
    """

    def __init__(self, surface: pygame.Surface, curve_segments: int = 12):
        """
        Initialize the canvas.

        Args:
            surface: Target surface (the display or an off-screen surface)
            curve_segments: Line segments used per curve or quarter arc
        """
        width, height = surface.get_size()
        super().__init__(width, height, curve_segments)
        self.surface = surface
        self._layer = pygame.Surface((width, height), pygame.SRCALPHA)

    def _bounds(self, shapes: List[List[Point]], pad: float) -> Optional[pygame.Rect]:
        xs = [p[0] for shape in shapes for p in shape]
        ys = [p[1] for shape in shapes for p in shape]
        left = math.floor(min(xs) - pad)
        top = math.floor(min(ys) - pad)
        right = math.ceil(max(xs) + pad) + 1
        bottom = math.ceil(max(ys) + pad) + 1
        rect = pygame.Rect(left, top, right - left, bottom - top).clip(self._layer.get_rect())
        if rect.width == 0 or rect.height == 0:
            return None
        return rect

    def _blit_layer(self, rect: pygame.Rect, color: RGBColor) -> None:
        if color.a != 255:
            self._layer.set_alpha(color.a)
        self.surface.blit(self._layer, rect.topleft, area=rect)
        if color.a != 255:
            self._layer.set_alpha(None)

    def _paint_fill(self, polygons: List[List[Point]], color: RGBColor) -> None:
        rect = self._bounds(polygons, 1)
        if rect is None:
            return

        self._layer.fill((0, 0, 0, 0), rect)
        for polygon in polygons:
            pygame.draw.polygon(self._layer, color.to_rgb(), polygon)
        self._blit_layer(rect, color)

    def _paint_stroke(self, polylines: List[List[Point]], color: RGBColor, width: float) -> None:
        px = max(1, int(round(width)))
        rect = self._bounds(polylines, px)
        if rect is None:
            return

        self._layer.fill((0, 0, 0, 0), rect)
        radius = px / 2
        rgb = color.to_rgb()

        for points in polylines:
            pygame.draw.lines(self._layer, rgb, False, points, px)

            if px > 2:
                if self.line_join == "round":
                    for point in points[1:-1]:
                        pygame.draw.circle(self._layer, rgb, point, radius)
                if self.line_cap == "round":
                    pygame.draw.circle(self._layer, rgb, points[0], radius)
                    pygame.draw.circle(self._layer, rgb, points[-1], radius)

        self._blit_layer(rect, color)
