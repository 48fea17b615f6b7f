"""
Interactive aquarium window with pygame.
"""

import random
import sys
from typing import Optional, Tuple

import pygame

from ..core.config import AquariumConfig, DEFAULT_CONFIG
from ..core.state import SimulationState
from ..generation.generators import generate_fish, generate_weeds
from ..rendering.pygame_canvas import PygameCanvas
from ..rendering.scene import render_frame
from .behavior import behavior_tick

BEHAVIOR_TICK_EVENT = pygame.USEREVENT + 1


def build_state(width: int, height: int, config: AquariumConfig = DEFAULT_CONFIG,
                rng=random) -> SimulationState:
    """
    Generate the initial population for a surface.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        config: Population counts
        rng: Random source

    Returns:
        Fresh SimulationState with fish and layer-sorted weeds
    """
    return SimulationState(
        width=width,
        height=height,
        fishes=generate_fish(config.fishCount, width, height, rng=rng),
        weeds=generate_weeds(config.weedCount, width, height, rng=rng),
    )


def resolve_surface_size(config: AquariumConfig) -> Tuple[int, int]:
    """
    Surface size from the config, falling back to the desktop size.

    Must be called after pygame.init().
    """
    width, height = config.screenWidth, config.screenHeight
    if width and height:
        return width, height

    desktop_width, desktop_height = pygame.display.get_desktop_sizes()[0]
    return width or desktop_width, height or desktop_height


class Aquarium:
    """
    Interactive aquarium with pygame visualization.

    The behavior tick is a pygame timer event; rendering runs every loop
    iteration. Both stages run on the pygame thread and share one
    SimulationState.
    """

    def __init__(self, config: Optional[AquariumConfig] = None):
        """
        Initialize the aquarium window.

        Args:
            config: Aquarium configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        if self.config.seed is not None:
            random.seed(self.config.seed)

        width, height = resolve_surface_size(self.config)

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Aquarium")
        self.clock = pygame.time.Clock()
        self.canvas = PygameCanvas(self.screen, self.config.curveSegments)

        self.state = build_state(width, height, self.config)

        self.frame_count = 0
        self.running = True

    def update(self) -> None:
        """Run one behavior tick."""
        behavior_tick(self.state, self.config)

    def draw(self) -> None:
        """Render the current frame."""
        render_frame(self.state, self.canvas, pygame.time.get_ticks(), self.config)
        pygame.display.flip()
        self.frame_count += 1

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        pygame.time.set_timer(BEHAVIOR_TICK_EVENT, self.config.behaviorIntervalMs)

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.type == BEHAVIOR_TICK_EVENT:
                    self.update()

            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.time.set_timer(BEHAVIOR_TICK_EVENT, 0)
        pygame.quit()
        sys.exit()
