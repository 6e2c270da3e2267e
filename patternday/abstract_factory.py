"""Abstract factory pattern: sports brands that make matching shoes and shirts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Shoe:
    logo: str
    size: int


@dataclass
class Shirt:
    logo: str
    size: int


class SportsFactory(ABC):
    @abstractmethod
    def make_shoe(self) -> Shoe:
        """Make a shoe of this brand."""

    @abstractmethod
    def make_shirt(self) -> Shirt:
        """Make a shirt of this brand."""


class Adidas(SportsFactory):
    def make_shoe(self) -> Shoe:
        return Shoe(logo="adidas", size=14)

    def make_shirt(self) -> Shirt:
        return Shirt(logo="adidas", size=14)


class Nike(SportsFactory):
    def make_shoe(self) -> Shoe:
        return Shoe(logo="nike", size=14)

    def make_shirt(self) -> Shirt:
        return Shirt(logo="nike", size=14)


_BRANDS = {"adidas": Adidas, "nike": Nike}


def get_sports_factory(brand: str) -> SportsFactory:
    """Return the factory for a brand name."""
    try:
        return _BRANDS[brand]()
    except KeyError:
        raise ValueError("Wrong brand type passed") from None