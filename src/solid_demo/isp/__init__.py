"""Interface Segregation: narrow capabilities implemented independently."""

from solid_demo.isp.after import Manager, Robot
from solid_demo.isp.protocol import Eatable, Workable

__all__ = [
    "Workable",
    "Eatable",
    "Manager",
    "Robot",
]
