"""Switch controls any Switchable device injected by the caller.

Usage:
    switch = Switch(LightBulb())
    switch.toggle()
    # Toggling the switch.
    # Light is On!
"""

from __future__ import annotations

import warnings

from solid_demo.dip.protocol import Switchable


class LightBulb(Switchable):
    def turn_on(self) -> None:
        print("Light is On!")

    def turn_off(self) -> None:
        print("Light is Off!")


class Switch:
    """Controller over an injected device.

    The switch holds a reference to the device but does not own it: the
    caller creates the device and decides its lifetime.
    """

    def __init__(self, device: Switchable) -> None:
        if not isinstance(device, Switchable):
            warnings.warn(
                f"Switch received {type(device).__name__}, which does not implement "
                f"Switchable. toggle() will fail if turn_on is missing.",
                stacklevel=2,
            )
        self._device = device

    @property
    def device(self) -> Switchable:
        """The injected device (read-only)."""
        return self._device

    def toggle(self) -> None:
        print("Toggling the switch.")
        self._device.turn_on()
