"""
Configuration classes and defaults for the aquarium.
"""

import json
from dataclasses import dataclass, fields
from typing import Optional


class ConfigError(ValueError):
    """Raised for unreadable or invalid aquarium configuration."""


@dataclass
class AquariumConfig:
    """Configuration for the aquarium scene."""

    # Screen settings (0 = use the host display size)
    screenWidth: int = 0
    screenHeight: int = 0

    # Population
    fishCount: int = 5
    weedCount: int = 20

    # Behavior tick
    behaviorIntervalMs: int = 300
    headingChangeProbability: float = 0.05
    gazeChangeProbability: float = 0.6
    bubbleProbability: float = 0.3

    # Bubble motion
    bubbleRiseFactor: float = 0.03
    bubbleSwayAmplitude: float = 0.2
    bubbleSwayFrequency: float = 0.1
    bubbleSwayReferenceMs: float = 16.0

    # Anchor placement
    anchorLength: int = 380
    anchorRise: int = 500

    # Rendering
    fpsTarget: int = 0  # 0 = uncapped
    curveSegments: int = 12

    seed: Optional[int] = None

    def validate(self) -> "AquariumConfig":
        """
        Check value ranges.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: If any field has the wrong type or is out of range
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "seed" and value is None:
                continue
            expected = "number" if f.type is float else "integer"
            allowed = (int, float) if f.type is float else (int,)
            # bool is an int subclass but never a valid count or rate
            if isinstance(value, bool) or not isinstance(value, allowed):
                raise ConfigError(f"{f.name} must be an {expected}, got {value!r}")
        for name in ("screenWidth", "screenHeight", "fishCount", "weedCount", "fpsTarget"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        for name in ("headingChangeProbability", "gazeChangeProbability", "bubbleProbability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")
        if self.behaviorIntervalMs <= 0:
            raise ConfigError(f"behaviorIntervalMs must be positive, got {self.behaviorIntervalMs}")
        if self.bubbleSwayReferenceMs <= 0:
            raise ConfigError(f"bubbleSwayReferenceMs must be positive, got {self.bubbleSwayReferenceMs}")
        if self.curveSegments <= 0:
            raise ConfigError(f"curveSegments must be positive, got {self.curveSegments}")
        return self

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "fishCount": self.fishCount,
            "weedCount": self.weedCount,
            "behaviorIntervalMs": self.behaviorIntervalMs,
            "headingChangeProbability": self.headingChangeProbability,
            "gazeChangeProbability": self.gazeChangeProbability,
            "bubbleProbability": self.bubbleProbability,
            "bubbleRiseFactor": self.bubbleRiseFactor,
            "bubbleSwayAmplitude": self.bubbleSwayAmplitude,
            "bubbleSwayFrequency": self.bubbleSwayFrequency,
            "bubbleSwayReferenceMs": self.bubbleSwayReferenceMs,
            "anchorLength": self.anchorLength,
            "anchorRise": self.anchorRise,
            "fpsTarget": self.fpsTarget,
            "curveSegments": self.curveSegments,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AquariumConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


def load_config(path: str) -> AquariumConfig:
    """
    Load a config from a JSON file.

    Args:
        path: Path to a JSON object with AquariumConfig field names

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is missing, malformed or out of range
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    return AquariumConfig.from_dict(data).validate()


# Default configuration
DEFAULT_CONFIG = AquariumConfig()

# Fixed scene geometry
BACKGROUND_GREEN_PERIOD_MS = 3000.0
BACKGROUND_GREEN_PHASE = 10.0
BACKGROUND_BLUE_PERIOD_MS = 2000.0
BACKGROUND_AMPLITUDE = 30.0
BACKGROUND_BLUE_OFFSET = 20.0

ANCHOR_TILT = 1.0 / 20.0  # fraction of pi
ANCHOR_SHAFT_WIDTH = 33
ANCHOR_PLANK_LENGTH = 180
ANCHOR_PLANK_WIDTH = 25
ANCHOR_PLANK_OFFSET = 80
ANCHOR_RING_OFFSET = 45
ANCHOR_RING_OUTER = 50
ANCHOR_RING_INNER = 30
ANCHOR_SHOULDER_WIDTH = 180
ANCHOR_SHOULDER_HEIGHT = 120
ANCHOR_FLUKE_HEIGHT = 50
ANCHOR_COLOR = "#00000044"

FISH_LINE_WIDTH = 10
FISH_OUTLINE_COLOR = "#FFFFFF25"
FISH_SCLERA_COLOR = "#FFFFFF88"
FISH_PUPIL_COLOR = "#001242"

BUBBLE_STROKE_COLOR = "#FFFFFF44"
BUBBLE_LINE_WIDTH = 4
BUBBLE_MAX_STRETCH = 0.5

WEED_BOTTOM_MARGIN = 50
WEED_SWAY_DIVISOR = 50.0
WEED_JITTER = 10.0
