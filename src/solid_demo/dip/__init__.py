"""Dependency Inversion: Switch depends on Switchable, not on LightBulb."""

from solid_demo.dip.after import LightBulb, Switch
from solid_demo.dip.protocol import Switchable

__all__ = [
    "Switchable",
    "LightBulb",
    "Switch",
]
