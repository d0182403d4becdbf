"""Open/Closed: area computation that new shapes extend without modification."""

from solid_demo.ocp.after import Circle, Rectangle, compute_area
from solid_demo.ocp.protocol import Shape

__all__ = [
    "Shape",
    "Rectangle",
    "Circle",
    "compute_area",
]
