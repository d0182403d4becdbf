"""Subclass that breaks its base class contract.

Code written against Bird cannot be handed a Penguin: the override raises
where Bird.fly() always succeeds.
"""


class Bird:
    def fly(self) -> None:
        print("Flying!")


class Penguin(Bird):
    def fly(self) -> None:
        raise NotImplementedError("Penguins can't fly!")
