"""Configuration module using Pydantic Settings.

Provides typed defaults for the command-line walkthrough with environment
variable support.

Usage:
    from solid_demo.config import DemoSettings, Principle

    settings = DemoSettings(principles=[Principle.DIP], show_violations=True)
"""

from solid_demo.config.settings import DemoSettings, Principle

__all__ = [
    "DemoSettings",
    "Principle",
]
