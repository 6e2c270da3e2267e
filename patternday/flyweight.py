"""Flyweight pattern: roles share equipment objects through a factory."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

SABER_TYPE = "saber"
ARCHER_TYPE = "archer"


class Equipment(ABC):
    @property
    @abstractmethod
    def color(self) -> str:
        """Colour of the equipment."""


@dataclass(frozen=True)
class Saber(Equipment):
    color: str = "red"


@dataclass(frozen=True)
class Archer(Equipment):
    color: str = "green"


_KINDS = {SABER_TYPE: Saber, ARCHER_TYPE: Archer}


@dataclass
class EquipmentFactory:
    """Creates each kind of equipment once and hands out the shared instance."""

    equipment: dict[str, Equipment] = field(default_factory=dict)

    def get_equipment(self, dress_type: str) -> Equipment:
        if dress_type in self.equipment:
            return self.equipment[dress_type]
        try:
            kind = _KINDS[dress_type]
        except KeyError:
            raise ValueError("Wrong dress type passed") from None
        item = self.equipment[dress_type] = kind()
        return item


_FACTORY = EquipmentFactory()


def get_equipment_factory() -> EquipmentFactory:
    """Return the process-wide equipment factory."""
    return _FACTORY


@dataclass
class Role:
    equipment: Equipment
    role_type: str


def new_role(role_type: str, equipment_type: str) -> Role:
    equipment = get_equipment_factory().get_equipment(equipment_type)
    return Role(equipment=equipment, role_type=role_type)


@dataclass
class Game:
    sabers: list[Role] = field(default_factory=list)
    archers: list[Role] = field(default_factory=list)

    def add_saber(self) -> None:
        self.sabers.append(new_role("T", SABER_TYPE))

    def add_archer(self) -> None:
        self.archers.append(new_role("CT", ARCHER_TYPE))