"""
Rendering module: canvas adapters, layer transforms and the scene renderer.
"""

from .canvas import Canvas, RecordingCanvas
from .layers import apply_layer_transform, group_by_layer
from .scene import render_frame

__all__ = ['Canvas', 'RecordingCanvas', 'apply_layer_transform', 'group_by_layer', 'render_frame']
