"""
Procedural generation of fish, weeds and bubbles.
"""

from .generators import (
    generate_bubble, generate_fish, generate_weeds, rand_in_range, rand_int_in_range, random_color,
)

__all__ = [
    'generate_bubble', 'generate_fish', 'generate_weeds',
    'rand_in_range', 'rand_int_in_range', 'random_color',
]
