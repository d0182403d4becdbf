"""Flight capability."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Flyable(Protocol):
    """Callers may invoke fly() on any implementer and expect it to return normally."""

    def fly(self) -> None: ...
