"""
Per-layer parallax transforms for weeds.
"""

import itertools
import math
from typing import Iterable, Iterator, List, Tuple

from ..core.config import WEED_BOTTOM_MARGIN, WEED_SWAY_DIVISOR
from ..core.entities import Weed


def group_by_layer(weeds: Iterable[Weed]) -> Iterator[Tuple[int, List[Weed]]]:
    """
    Split a layer-sorted weed sequence into contiguous same-layer groups.

    Args:
        weeds: Weeds in ascending layer order

    Yields:
        (layer, weeds in that layer) pairs in drawing order
    """
    for layer, group in itertools.groupby(weeds, key=lambda weed: weed.layer):
        yield layer, list(group)


def layer_sway(now_ms: float, layer: int) -> float:
    """Horizontal shear factor for a layer at a given time."""
    return math.sin(now_ms / 1000 + layer) / WEED_SWAY_DIVISOR


def apply_layer_transform(canvas, layer: int, now_ms: float, width: float, height: float) -> float:
    """
    Replace the canvas transform with the sway transform for `layer`.

    The scene is turned upside down so weeds rooted below the bottom edge
    grow upward, then sheared by the layer's sway.

    Args:
        canvas: Target canvas
        layer: Layer index
        now_ms: Current time in milliseconds
        width: Surface width
        height: Surface height

    Returns:
        The shear factor that was applied
    """
    sway = layer_sway(now_ms, layer)

    canvas.reset_transform()
    canvas.rotate(math.pi)
    canvas.transform(1, 0, sway, 1, -width, -height * 2 - WEED_BOTTOM_MARGIN)

    return sway
