"""Switchable device protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Switchable(Protocol):
    """Device that a controller can turn on and off."""

    def turn_on(self) -> None: ...
    def turn_off(self) -> None: ...
