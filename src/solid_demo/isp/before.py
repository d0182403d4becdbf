"""Robot forced to stub an operation it cannot honor.

Both classes declare Worker, so isinstance checks cannot tell callers that
Robot.eat() will fail.
"""

from __future__ import annotations

from solid_demo.isp.protocol import Worker


class Manager(Worker):
    def work(self) -> None:
        print("Managing!")

    def eat(self) -> None:
        print("Eating!")


class Robot(Worker):
    def work(self) -> None:
        print("Working!")

    def eat(self) -> None:
        raise NotImplementedError("Robots can't eat!")
