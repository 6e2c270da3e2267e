"""Mediator pattern: personnel talk to each other through a mediator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Mediator(ABC):
    @abstractmethod
    def say(self, sender: "Personnel", msg: str) -> None:
        """Route a message from the sender."""


class Personnel:
    """Someone who speaks through a mediator and can be notified."""

    name = ""

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def say(self, msg: str) -> None:
        print(f"{self.name} say {msg}")
        self.mediator.say(self, msg)

    def notify(self, msg: str) -> None:
        print(f"{self.name} get {msg}")


class PM(Personnel):
    name = "A"


class RD(Personnel):
    name = "B"


@dataclass
class UIMediator(Mediator):
    """Delivers every message from a known participant to the RD."""

    a: PM | None = None
    b: RD | None = None

    def say(self, sender: Personnel, msg: str) -> None:
        if self.b is None:
            return
        if sender is self.a or sender is self.b:
            self.b.notify(msg)