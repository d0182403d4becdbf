"""Liskov Substitution: every Flyable honors fly() without raising."""

from solid_demo.lsp.after import Bird, Penguin
from solid_demo.lsp.protocol import Flyable

__all__ = [
    "Flyable",
    "Bird",
    "Penguin",
]
