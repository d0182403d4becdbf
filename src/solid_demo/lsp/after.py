"""Independent Flyable implementers with no shared base behavior.

Usage:
    for flyer in (Bird(), Penguin()):
        flyer.fly()
"""

from __future__ import annotations

from solid_demo.lsp.protocol import Flyable


class Bird(Flyable):
    def fly(self) -> None:
        print("Flying!")


class Penguin(Flyable):
    def fly(self) -> None:
        print("Penguins can't fly, so this method does nothing.")
