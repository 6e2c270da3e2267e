"""Decorator pattern: drinks wrapped with extras that add cost."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Drink(ABC):
    @abstractmethod
    def cost(self) -> int:
        """Price of the drink."""

    @abstractmethod
    def description(self) -> str:
        """Description of the drink."""


@dataclass(frozen=True)
class Coffee(Drink):
    label: str

    def cost(self) -> int:
        return 100

    def description(self) -> str:
        return self.label


@dataclass(frozen=True)
class Milk(Drink):
    drink: Drink
    label: str

    def cost(self) -> int:
        return self.drink.cost() + 10

    def description(self) -> str:
        return f"{self.drink.description()}, {self.label}"


@dataclass(frozen=True)
class BlackTea(Drink):
    drink: Drink
    label: str

    def cost(self) -> int:
        return self.drink.cost() + 5

    def description(self) -> str:
        return f"{self.drink.description()}, {self.label}"