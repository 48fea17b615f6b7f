"""
Per-frame motion and drawing of the aquarium scene.

`render_frame` is the entry point. It advances fish and bubbles by the
wall-clock time elapsed since the previous frame and draws, in order: the
background, the anchor, fish, bubbles and layered weeds.
"""

import math
import random
from typing import List

from ..core.color import RGBColor
from ..core.config import (
    ANCHOR_COLOR, ANCHOR_FLUKE_HEIGHT, ANCHOR_PLANK_LENGTH, ANCHOR_PLANK_OFFSET,
    ANCHOR_PLANK_WIDTH, ANCHOR_RING_INNER, ANCHOR_RING_OFFSET, ANCHOR_RING_OUTER,
    ANCHOR_SHAFT_WIDTH, ANCHOR_SHOULDER_HEIGHT, ANCHOR_SHOULDER_WIDTH, ANCHOR_TILT,
    BACKGROUND_AMPLITUDE, BACKGROUND_BLUE_OFFSET, BACKGROUND_BLUE_PERIOD_MS,
    BACKGROUND_GREEN_PERIOD_MS, BACKGROUND_GREEN_PHASE, BUBBLE_LINE_WIDTH,
    BUBBLE_MAX_STRETCH, BUBBLE_STROKE_COLOR, DEFAULT_CONFIG, FISH_LINE_WIDTH,
    FISH_OUTLINE_COLOR, FISH_PUPIL_COLOR, FISH_SCLERA_COLOR, WEED_JITTER,
    AquariumConfig,
)
from ..core.entities import Bubble, Fish, Weed
from ..core.state import SimulationState
from ..core.vector import Vector2
from .layers import apply_layer_transform, group_by_layer

TWO_PI = 2 * math.pi


# ----------------------------------------------------------------------
# Background and anchor
# ----------------------------------------------------------------------

def background_color(now_ms: float) -> RGBColor:
    """Water colour drifting between night and day tones."""
    g = math.sin(now_ms / BACKGROUND_GREEN_PERIOD_MS + BACKGROUND_GREEN_PHASE) * BACKGROUND_AMPLITUDE
    b = math.sin(now_ms / BACKGROUND_BLUE_PERIOD_MS) * BACKGROUND_AMPLITUDE + BACKGROUND_BLUE_OFFSET
    return RGBColor.clamped(0, g, b)


def draw_background(canvas, now_ms: float) -> None:
    canvas.reset_transform()
    canvas.fill_style = background_color(now_ms)
    canvas.fill_rect(0, 0, canvas.width, canvas.height)


def _anchor_shoulder(canvas, direction: int) -> None:
    w = ANCHOR_SHOULDER_WIDTH
    h = ANCHOR_SHOULDER_HEIGHT

    canvas.quadratic_curve_to(w * 1.2 * direction, 0, w * direction, -h)
    canvas.line_to(w * direction * 0.9, -h)
    canvas.line_to(w * direction, -h - ANCHOR_FLUKE_HEIGHT)
    canvas.quadratic_curve_to(w * 1.5 * direction, 0, 0, 80)


def draw_anchor(canvas, x: float, y: float, length: float) -> None:
    """
    Draw the tilted anchor with its top at (x, y).

    Args:
        canvas: Target canvas
        x, y: Shaft top-left before the tilt
        length: Shaft length
    """
    width = ANCHOR_SHAFT_WIDTH
    plank_length = ANCHOR_PLANK_LENGTH

    canvas.reset_transform()
    canvas.rotate(math.pi * ANCHOR_TILT)
    canvas.translate(x, y)

    canvas.fill_style = ANCHOR_COLOR
    canvas.fill_rect(-plank_length / 2, ANCHOR_PLANK_OFFSET, plank_length / 2, ANCHOR_PLANK_WIDTH)
    canvas.fill_rect(width, ANCHOR_PLANK_OFFSET, plank_length / 2, ANCHOR_PLANK_WIDTH)

    canvas.begin_path()
    canvas.rect(0, 0, width, length)
    canvas.move_to(width / 2, -ANCHOR_RING_OFFSET)
    canvas.arc(width / 2, -ANCHOR_RING_OFFSET, ANCHOR_RING_OUTER, 0, TWO_PI, False)
    canvas.arc(width / 2, -ANCHOR_RING_OFFSET, ANCHOR_RING_INNER, 0, TWO_PI, True)
    canvas.fill()

    canvas.translate(width / 2, length)

    canvas.begin_path()
    canvas.move_to(0, 0)
    _anchor_shoulder(canvas, -1)
    canvas.move_to(0, 0)
    _anchor_shoulder(canvas, 1)
    canvas.fill()

    canvas.reset_transform()


# ----------------------------------------------------------------------
# Fish
# ----------------------------------------------------------------------

def draw_fish_eye(canvas, x: float, y: float, radius: float, pupil_ratio: float,
                  look_dir: Vector2) -> None:
    canvas.begin_path()
    canvas.arc(x, y, radius, 0, TWO_PI)
    canvas.fill_style = FISH_SCLERA_COLOR
    canvas.stroke()
    canvas.fill()

    pupil_radius = radius * pupil_ratio
    max_offset = radius - pupil_radius

    canvas.begin_path()
    canvas.arc(x + max_offset * look_dir.x, y + max_offset * look_dir.y, pupil_radius, 0, TWO_PI)
    canvas.fill_style = FISH_PUPIL_COLOR
    canvas.fill()


def draw_fish_tail(canvas, x: float, y: float, end_width: float, length: float,
                   now_ms: float) -> None:
    y_shift = math.sin(now_ms / 1000) * length * 0.1

    canvas.move_to(x, y)
    canvas.quadratic_curve_to(x, y + end_width / 3, x - length, y + end_width / 2 + y_shift)
    canvas.quadratic_curve_to(x - 0.5 * length, y, x - length, y - end_width / 2 + y_shift)
    canvas.quadratic_curve_to(x, y - end_width / 3, x, y)


def draw_fish_body(canvas, x: float, y: float, height: float, length: float) -> None:
    canvas.move_to(x, y)
    canvas.quadratic_curve_to(x + length / 2, y + height / 2, x + length, y)
    canvas.quadratic_curve_to(x + length / 2, y - height / 2, x, y)


def draw_fish_floater(canvas, x: float, y: float, size: float, phase: float,
                      now_ms: float) -> None:
    y_shift = math.sin(now_ms / 1000 + phase) * 0.1 * size

    canvas.move_to(x, y)
    canvas.quadratic_curve_to(x, y - size * 0.4, x - size, y + size * 0.5 + y_shift)
    canvas.quadratic_curve_to(x, y + size * 0.6, x, y)


def draw_fish_top_floater(canvas, x: float, y: float, size: float, height: float) -> None:
    # The fin closes on the body's centre line, not on y
    canvas.move_to(x, y)
    canvas.line_to(x - size * 0.35, y - height)
    canvas.line_to(x - size * 0.7, 0)


def draw_fish(canvas, fish: Fish, flip: bool, now_ms: float, rotation: float = 0.0) -> None:
    """
    Draw one fish at its current position.

    Parts are separate paths, each filled then stroked: top fin, body,
    tail with the main fin, then the eye.

    Args:
        canvas: Target canvas
        fish: Fish to draw
        flip: Mirror horizontally (fish swimming left)
        now_ms: Current time, drives the fin wiggle
        rotation: Extra rotation in radians
    """
    size = fish.size
    kind = fish.kind
    body_length = size * kind.bodyLength

    canvas.reset_transform()
    canvas.translate(fish.position.x, fish.position.y)
    canvas.rotate(rotation)
    if flip:
        canvas.transform(-1, 0, 0, 1, 0, 0)

    canvas.fill_style = fish.color
    canvas.line_width = FISH_LINE_WIDTH
    canvas.line_join = "round"
    canvas.stroke_style = FISH_OUTLINE_COLOR

    canvas.begin_path()
    draw_fish_top_floater(canvas, body_length * 0.2, -size * 0.15, body_length,
                          kind.topFloaterHeight * size)
    canvas.fill()
    canvas.stroke()

    canvas.begin_path()
    draw_fish_body(canvas, -body_length * 0.5, 0, size, body_length)
    canvas.fill()
    canvas.stroke()

    canvas.begin_path()
    draw_fish_tail(canvas, -body_length * 0.4, 0, size * kind.tailWidth,
                   size * kind.tailLength, now_ms)
    draw_fish_floater(canvas, body_length * 0.05, size * 0.1, size * kind.mainFloaterLength,
                      fish.floaterPhase, now_ms)
    canvas.fill()
    canvas.stroke()

    draw_fish_eye(canvas, body_length * 0.2, -size * 0.05, size * kind.eyeSize,
                  fish.pupilRatio, fish.lookDir)

    canvas.reset_transform()


def advance_fish(fish: Fish, delta: float) -> None:
    """Move a fish along its heading by speed * delta."""
    fish.position = fish.position.move_along(fish.moveDir, fish.speed * delta)


def draw_fishes(canvas, fishes: List[Fish], delta: float, now_ms: float) -> None:
    for fish in fishes:
        advance_fish(fish, delta)
        draw_fish(canvas, fish, fish.facing_left, now_ms)


# ----------------------------------------------------------------------
# Bubbles
# ----------------------------------------------------------------------

def advance_bubble(bubble: Bubble, delta: float, config: AquariumConfig = DEFAULT_CONFIG) -> None:
    """
    Rise proportionally to radius and sway sideways with height.

    Sway is scaled by delta against a reference frame time, so a zero
    delta leaves the bubble in place.
    """
    shift_x = (math.sin(bubble.position.y * config.bubbleSwayFrequency)
               * config.bubbleSwayAmplitude
               * delta / config.bubbleSwayReferenceMs)
    new_y = bubble.position.y - bubble.radius * config.bubbleRiseFactor * delta
    bubble.position = Vector2(bubble.position.x + shift_x, new_y)


def draw_bubbles(canvas, bubbles: List[Bubble], delta: float,
                 config: AquariumConfig = DEFAULT_CONFIG, rng=random) -> None:
    """
    Advance and draw all bubbles as one translucent stroked path.

    Each bubble gets a fresh random stretch every frame (shimmer).
    """
    if not bubbles:
        return

    canvas.reset_transform()
    canvas.begin_path()

    for bubble in bubbles:
        advance_bubble(bubble, delta, config)

        canvas.transform(1 + rng.random() * BUBBLE_MAX_STRETCH, 0,
                         0, 1 + rng.random() * BUBBLE_MAX_STRETCH,
                         bubble.position.x, bubble.position.y)
        canvas.move_to(bubble.radius, 0)
        canvas.arc(0, 0, bubble.radius, 0, TWO_PI)
        canvas.reset_transform()

    canvas.stroke_style = BUBBLE_STROKE_COLOR
    canvas.line_width = BUBBLE_LINE_WIDTH
    canvas.stroke()


# ----------------------------------------------------------------------
# Weeds
# ----------------------------------------------------------------------

def _shake(value: float, rng) -> float:
    return value + math.sin(rng.random() / 4) * WEED_JITTER


def draw_weed(canvas, weed: Weed, rng=random) -> None:
    """Stroke one weed as alternating-bend curve segments with fresh jitter."""
    canvas.stroke_style = weed.color
    canvas.line_width = weed.width
    canvas.line_cap = "round"

    canvas.begin_path()
    canvas.move_to(weed.position.x, weed.position.y)

    bend_dir = 1
    for segment in range(weed.segment_count):
        pos_x = weed.position.x
        pos_y = weed.position.y + segment * weed.segmentLength
        bend_x = pos_x + weed.bendDistance * bend_dir * 2
        bend_y = pos_y + weed.segmentLength * 1.2

        canvas.quadratic_curve_to(_shake(bend_x, rng), _shake(bend_y, rng),
                                  _shake(pos_x, rng), _shake(pos_y, rng))
        bend_dir = -bend_dir

    canvas.stroke()


def draw_weeds(canvas, weeds: List[Weed], width: float, height: float, now_ms: float,
               rng=random) -> None:
    """Draw weeds group by group, switching the sway transform per layer."""
    for layer, group in group_by_layer(weeds):
        apply_layer_transform(canvas, layer, now_ms, width, height)
        for weed in group:
            draw_weed(canvas, weed, rng)


# ----------------------------------------------------------------------
# Frame
# ----------------------------------------------------------------------

def render_frame(state: SimulationState, canvas, now_ms: float,
                 config: AquariumConfig = DEFAULT_CONFIG, rng=random) -> float:
    """
    Advance motion by the time since the previous frame and draw the scene.

    Args:
        state: Shared simulation state
        canvas: Drawing surface
        now_ms: Current wall-clock time in milliseconds
        config: Motion tunables and anchor placement
        rng: Random source for shimmer and jitter

    Returns:
        The elapsed time used for this frame, in milliseconds
    """
    delta = state.advance_clock(now_ms)

    draw_background(canvas, now_ms)
    draw_anchor(canvas, state.width / 2, state.height - config.anchorRise, config.anchorLength)
    draw_fishes(canvas, state.fishes, delta, now_ms)
    draw_bubbles(canvas, state.bubbles, delta, config, rng)
    draw_weeds(canvas, state.weeds, state.width, state.height, now_ms, rng)

    canvas.reset_transform()
    return delta
