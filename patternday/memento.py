"""Memento pattern: saving and restoring a game role's state."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Memento:
    state: str


@dataclass
class Role:
    state: str = ""

    def save(self) -> Memento:
        return Memento(self.state)

    def load(self, memento: Memento) -> None:
        self.state = memento.state


@dataclass
class Caretaker:
    mementos: list[Memento] = field(default_factory=list)

    def save(self, memento: Memento) -> None:
        self.mementos.append(memento)

    def load(self, index: int) -> Memento:
        return self.mementos[index]