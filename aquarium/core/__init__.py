"""
Core module containing configuration, vector math, colours and entities.
"""

from .config import AquariumConfig, ConfigError, DEFAULT_CONFIG, load_config
from .color import RGBColor
from .entities import FISH_KINDS, Bubble, Fish, FishKind, Weed
from .state import SimulationState
from .vector import DegenerateVectorError, Vector2

__all__ = [
    'AquariumConfig', 'ConfigError', 'DEFAULT_CONFIG', 'load_config',
    'RGBColor',
    'FISH_KINDS', 'Bubble', 'Fish', 'FishKind', 'Weed',
    'SimulationState',
    'DegenerateVectorError', 'Vector2',
]
