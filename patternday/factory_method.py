"""Factory method pattern: phone factories for each brand and origin."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class Phone(ABC):
    @abstractmethod
    def market(self) -> str:
        """Describe where the phone was made."""


@dataclass(frozen=True)
class HTC(Phone):
    origin: str

    def market(self) -> str:
        return f"Your HTC Phone made in {self.origin}"


@dataclass(frozen=True)
class ASUS(Phone):
    origin: str

    def market(self) -> str:
        return f"Your ASUS Phone made in {self.origin}"


class PhoneKind(IntEnum):
    HTC_TAIWAN = 0
    HTC_CHINA = 1
    ASUS_TAIWAN = 2
    ASUS_CHINA = 3


class PhoneFactory(ABC):
    @abstractmethod
    def create(self) -> Phone:
        """Make a phone."""


class HTCTaiwanFactory(PhoneFactory):
    def create(self) -> Phone:
        return HTC(origin="Taiwan")


class HTCChinaFactory(PhoneFactory):
    def create(self) -> Phone:
        return HTC(origin="China")


class ASUSTaiwanFactory(PhoneFactory):
    def create(self) -> Phone:
        return ASUS(origin="Taiwan")


class ASUSChinaFactory(PhoneFactory):
    def create(self) -> Phone:
        return ASUS(origin="China")


_FACTORIES: dict[int, type[PhoneFactory]] = {
    PhoneKind.HTC_TAIWAN: HTCTaiwanFactory,
    PhoneKind.HTC_CHINA: HTCChinaFactory,
    PhoneKind.ASUS_TAIWAN: ASUSTaiwanFactory,
    PhoneKind.ASUS_CHINA: ASUSChinaFactory,
}


def create_factory(kind: PhoneKind) -> PhoneFactory:
    """Return the factory for a kind; unknown kinds get the HTC Taiwan factory."""
    return _FACTORIES.get(kind, HTCTaiwanFactory)()