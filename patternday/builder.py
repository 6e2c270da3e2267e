"""Builder pattern: fluent construction of vehicles."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class TransportType(IntEnum):
    AUTO = 0
    MOTORCYCLE = 1


@dataclass
class Transportation(ABC):
    """A vehicle configured through chained setters."""

    brand: str = ""
    color: Any = None
    kind: TransportType = TransportType.AUTO
    wheel: int = 0

    def set_type(self, kind: TransportType) -> "Transportation":
        self.kind = kind
        return self

    def set_color(self, color: Any) -> "Transportation":
        self.color = color
        return self

    def set_brand(self, brand: str) -> "Transportation":
        self.brand = brand
        return self

    @abstractmethod
    def wheel_count(self) -> "Transportation":
        """Set the number of wheels for this kind of vehicle."""


@dataclass
class Car(Transportation):
    def wheel_count(self) -> "Transportation":
        self.wheel = 4
        return self


@dataclass
class Scooter(Transportation):
    def wheel_count(self) -> "Transportation":
        self.wheel = 2
        return self