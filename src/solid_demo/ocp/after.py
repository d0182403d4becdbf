"""Shapes compute their own area; compute_area never inspects the variant.

Usage:
    compute_area(Rectangle(width=3, height=4))  # 12.0
    compute_area(Circle(radius=2))  # 12.566...

New shapes only need a calculate_area() method:

    @dataclass
    class Triangle:
        base: float
        height: float

        def calculate_area(self) -> float:
            return 0.5 * self.base * self.height

    compute_area(Triangle(3, 4))  # 6.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from solid_demo.ocp.protocol import Shape


@dataclass
class Rectangle(Shape):
    """Axis-aligned rectangle. Negative dimensions are not rejected."""

    width: float = 0.0
    height: float = 0.0

    def calculate_area(self) -> float:
        return self.width * self.height


@dataclass
class Circle(Shape):
    """Circle. Negative radius is not rejected."""

    radius: float = 0.0

    def calculate_area(self) -> float:
        return math.pi * self.radius * self.radius


def compute_area(shape: Shape) -> float:
    """Compute the area of any shape.

    Args:
        shape: Object implementing the Shape protocol.

    Returns:
        The shape's area as a float.

    Raises:
        TypeError: If shape doesn't implement Shape.
    """
    if not isinstance(shape, Shape):
        raise TypeError(f"{type(shape).__name__} does not implement Shape protocol")
    return float(shape.calculate_area())
