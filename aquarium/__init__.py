"""
Procedurally generated, continuously animated aquarium scene.

Fish swim and change heading, bubbles rise and sway until they leave the
surface, kelp sways in parallax layers and an anchor rests in the back.
"""

__version__ = "0.1.0"
