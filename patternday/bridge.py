"""Bridge pattern: phones of different brands running different software."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Soft(ABC):
    """An application that can be run on a phone."""

    @abstractmethod
    def run(self) -> None:
        """Run the application."""


def _announce_run(kind: str) -> str:
    message = f"Run {kind} Application"
    print(message)
    return message


@dataclass
class Game(Soft):
    kind: str = "Game"

    def run(self) -> str:
        """Run the game and return the reported line."""
        return _announce_run(self.kind)


@dataclass
class Directory(Soft):
    kind: str = "Directory"

    def run(self) -> str:
        """Run the directory and return the reported line."""
        return _announce_run(self.kind)


class PC:
    """A device of some brand that can install and run one application."""

    brand = ""

    def __init__(self) -> None:
        self.app: Soft | None = None

    def install(self, soft: Soft) -> None:
        print(f"{self.brand} Mobile Install")
        self.app = soft

    def run(self) -> None:
        if self.app is None:
            raise RuntimeError(f"no application installed on {self.brand}")
        self.app.run()


class Asus(PC):
    brand = "ASUS"


class Nokia(PC):
    brand = "NOKIA"