"""Simple factory pattern: phones chosen by name."""

from abc import ABC, abstractmethod


class Phone(ABC):
    @abstractmethod
    def os(self) -> str:
        """Operating system of the phone."""

    @abstractmethod
    def price(self) -> int:
        """Price of the phone."""


class Iphone(Phone):
    def os(self) -> str:
        return "IOS"

    def price(self) -> int:
        return 30000


class Android(Phone):
    def os(self) -> str:
        return "Android"

    def price(self) -> int:
        return 20000


def new_phone(name: str) -> Phone:
    """Return an iPhone for "iphone" and an Android phone for anything else."""
    if name == "iphone":
        return Iphone()
    return Android()