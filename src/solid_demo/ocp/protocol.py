"""Shape protocol: the one capability area computation relies on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """Anything that knows its own area."""

    def calculate_area(self) -> float: ...
