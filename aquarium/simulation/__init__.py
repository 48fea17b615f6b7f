"""
Simulation module: the behavior tick and the controllers that schedule it.
"""

from .behavior import behavior_tick, cull_bubbles, random_gaze, turn_back

__all__ = ['behavior_tick', 'cull_bubbles', 'random_gaze', 'turn_back']
