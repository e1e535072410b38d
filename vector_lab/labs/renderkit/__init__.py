from .canvas import SurfaceCanvas
from .primitives import VISUAL_SCALE, clear, create_surface, draw_vector
from . import primitives

__all__ = [
    "SurfaceCanvas",
    "VISUAL_SCALE",
    "clear",
    "create_surface",
    "draw_vector",
    "primitives",
]
