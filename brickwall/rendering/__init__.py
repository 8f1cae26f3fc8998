# brickwall/rendering/__init__.py
from brickwall.rendering.canvas import Canvas, SurfaceCanvas
from brickwall.rendering.mortar import (
    Mortar,
    MortarEdge,
    MortarSegment,
    mortar_segments,
)
from brickwall.rendering.renderer import brick_bounds, draw_brick_wall

__all__ = [
    "Canvas",
    "SurfaceCanvas",
    "Mortar",
    "MortarEdge",
    "MortarSegment",
    "mortar_segments",
    "brick_bounds",
    "draw_brick_wall",
]
