"""
Headless aquarium run on a simulated clock, with optional video capture.
"""

import os
import random
import time
from typing import Any, Dict, Optional

import cv2
import numpy as np
import pygame

from ..core.config import AquariumConfig, DEFAULT_CONFIG
from ..rendering.pygame_canvas import PygameCanvas
from ..rendering.scene import render_frame
from .behavior import behavior_tick
from .interactive import build_state

# Default recorder surface when the config leaves the size to the host
DEFAULT_RECORD_SIZE = (1280, 720)
PROGRESS_INTERVAL = 100


def set_headless() -> None:
    """Enable headless mode for recording."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


class HeadlessRecorder:
    """
    Runs the aquarium without a window.

    Time advances in fixed frame steps. The behavior tick fires every
    `behaviorIntervalMs` of simulated time, interleaved with frames on the
    one thread, so a run is independent of how fast the host renders.
    """

    def __init__(self, config: Optional[AquariumConfig] = None, fps: int = 30,
                 video_filename: Optional[str] = None, snapshot_filename: Optional[str] = None,
                 rng=random):
        """
        Initialize the recorder.

        Args:
            config: Aquarium configuration (uses defaults if None)
            fps: Simulated frames per second
            video_filename: MP4 output path, or None to skip video
            snapshot_filename: PNG path for the final frame, or None
            rng: Random source shared by generation, behavior and rendering
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")

        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        self.rng = rng
        if self.config.seed is not None:
            self.rng.seed(self.config.seed)

        width = self.config.screenWidth or DEFAULT_RECORD_SIZE[0]
        height = self.config.screenHeight or DEFAULT_RECORD_SIZE[1]

        self.surface = pygame.Surface((width, height))
        self.canvas = PygameCanvas(self.surface, self.config.curveSegments)
        self.state = build_state(width, height, self.config, rng=self.rng)

        self.fps = fps
        self.frame_ms = 1000.0 / fps
        self.now_ms = 0.0
        self.next_behavior_ms = float(self.config.behaviorIntervalMs)
        self.frame_count = 0
        self.behavior_ticks = 0
        self.start_time = time.time()

        self.snapshot_filename = snapshot_filename
        self.video_filename = video_filename
        self.video_writer = None

        if self.video_filename:
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(self.video_filename, fourcc, fps, (width, height))
            print(f"  Recording video to: {self.video_filename}")

    def step(self) -> None:
        """Advance the simulated clock by one frame and render it."""
        self.now_ms += self.frame_ms

        while self.next_behavior_ms <= self.now_ms:
            behavior_tick(self.state, self.config, self.rng)
            self.behavior_ticks += 1
            self.next_behavior_ms += self.config.behaviorIntervalMs

        render_frame(self.state, self.canvas, self.now_ms, self.config, self.rng)
        self.frame_count += 1

        if self.video_writer:
            self._capture_frame()

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run for a number of frames.

        Args:
            max_frames: Frames to simulate

        Returns:
            Summary dictionary
        """
        print(f"Recording aquarium for {max_frames} frames...")

        # First frame establishes the clock reference
        self.state.last_frame_time = self.now_ms

        while self.frame_count < max_frames:
            self.step()

            if self.frame_count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed, {len(self.state.bubbles)} bubbles)")

        if self.video_writer:
            self.video_writer.release()
            print("  Video saved successfully!")

        if self.snapshot_filename:
            pygame.image.save(self.surface, self.snapshot_filename)
            print(f"  Snapshot saved to: {self.snapshot_filename}")

        return self.get_results()

    def _capture_frame(self) -> None:
        """Capture frame to video."""
        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """Summary of the run so far."""
        return {
            "frames": self.frame_count,
            "simulated_ms": self.now_ms,
            "elapsed_time_seconds": time.time() - self.start_time,
            "behavior_ticks": self.behavior_ticks,
            "fish_count": len(self.state.fishes),
            "weed_count": len(self.state.weeds),
            "live_bubbles": len(self.state.bubbles),
            "bubbles_emitted": self.state.bubbles_emitted,
            "bubbles_culled": self.state.bubbles_culled,
        }
