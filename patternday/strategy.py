"""Strategy pattern: umbrella pricing that depends on the weather."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class Umbrella(ABC):
    @abstractmethod
    def price(self, count: int) -> float:
        """Total price for a number of umbrellas."""


@dataclass(frozen=True)
class Rain(Umbrella):
    cost: float

    def price(self, count: int) -> float:
        return self.cost * count * 1


@dataclass(frozen=True)
class Sun(Umbrella):
    cost: float

    def price(self, count: int) -> float:
        return self.cost * count * 0.5


class WeatherKind(IntEnum):
    SUN = 0
    RAIN = 1


_UMBRELLAS = {
    WeatherKind.SUN: Sun,
    WeatherKind.RAIN: Rain,
}


class Weather:
    """Sells umbrellas using the pricing strategy for the given weather."""

    def __init__(self, kind: WeatherKind) -> None:
        try:
            strategy = _UMBRELLAS[WeatherKind(kind)]
        except ValueError:
            raise ValueError(f"unknown weather kind: {kind!r}") from None
        self.kind = WeatherKind(kind)
        self.umbrella: Umbrella = strategy(cost=10)

    def sell(self, count: int) -> float:
        return self.umbrella.price(count)