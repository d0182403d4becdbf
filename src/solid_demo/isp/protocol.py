"""Worker capability protocols.

Worker is the broad interface the "before" design forces on every
implementer. Workable and Eatable are its segregated replacements.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Worker(Protocol):
    """Broad capability set: work and eat together."""

    def work(self) -> None: ...
    def eat(self) -> None: ...


@runtime_checkable
class Workable(Protocol):
    def work(self) -> None: ...


@runtime_checkable
class Eatable(Protocol):
    def eat(self) -> None: ...
