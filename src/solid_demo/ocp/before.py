"""Area computation closed to extension.

AreaCalculator only understands rectangles. Supporting a circle means editing
calculate_area and every caller that depends on its signature.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float = 0.0
    height: float = 0.0


class AreaCalculator:
    def calculate_area(self, rectangle: Rectangle) -> float:
        return rectangle.width * rectangle.height
