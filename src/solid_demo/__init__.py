"""SOLID Demo: the five SOLID principles as before/after class designs.

Usage:
    from solid_demo import Circle, LightBulb, Rectangle, Switch, compute_area

    compute_area(Rectangle(width=3, height=4))  # 12.0
    compute_area(Circle(radius=2))  # 12.566...

    Switch(LightBulb()).toggle()
    # Toggling the switch.
    # Light is On!

Each principle lives in its own subpackage (srp, ocp, lsp, isp, dip) with
a `before` module showing the violation and an `after` module showing the fix.
The names exported here are the corrected designs.
"""

__version__ = "0.1.0"

# Configuration
from solid_demo.config import DemoSettings, Principle

# Dependency Inversion
from solid_demo.dip import LightBulb, Switch, Switchable

# Interface Segregation
from solid_demo.isp import Eatable, Manager, Robot, Workable

# Liskov Substitution
from solid_demo.lsp import Bird, Flyable, Penguin

# Open/Closed
from solid_demo.ocp import Circle, Rectangle, Shape, compute_area

# Single Responsibility
from solid_demo.srp import ReportGenerator, ReportSaver

__all__ = [
    # Version
    "__version__",
    # Config
    "DemoSettings",
    "Principle",
    # SRP
    "ReportGenerator",
    "ReportSaver",
    # OCP
    "Shape",
    "Rectangle",
    "Circle",
    "compute_area",
    # LSP
    "Flyable",
    "Bird",
    "Penguin",
    # ISP
    "Workable",
    "Eatable",
    "Manager",
    "Robot",
    # DIP
    "Switchable",
    "LightBulb",
    "Switch",
]
