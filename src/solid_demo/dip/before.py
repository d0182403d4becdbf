"""High-level Switch bound to a concrete low-level LightBulb."""

from __future__ import annotations


class LightBulb:
    def turn_on(self) -> None:
        print("Light is On!")

    def turn_off(self) -> None:
        print("Light is Off!")


class Switch:
    def __init__(self, bulb: LightBulb) -> None:
        self._bulb = bulb

    def toggle(self) -> None:
        print("Toggling the switch.")
        self._bulb.turn_on()
