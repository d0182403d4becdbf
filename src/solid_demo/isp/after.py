"""Implementers pick only the capabilities they support.

Manager declares Workable and Eatable; Robot declares Workable only.
"""

from __future__ import annotations

from solid_demo.isp.protocol import Eatable, Workable


class Manager(Workable, Eatable):
    def work(self) -> None:
        print("Managing!")

    def eat(self) -> None:
        print("Eating!")


class Robot(Workable):
    def work(self) -> None:
        print("Working!")
