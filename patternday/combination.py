"""Composite pattern: files and folders displayed as a tree."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Component(ABC):
    @abstractmethod
    def display(self) -> None:
        """Print this component."""


@dataclass
class File(Component):
    name: str

    def display(self) -> None:
        print(f"File: {self.name} ")


@dataclass
class Folder(Component):
    name: str
    components: list[Component] = field(default_factory=list)

    def add(self, component: Component) -> None:
        self.components.append(component)

    def display(self) -> None:
        print(f"folder: {self.name} ")
        for component in self.components:
            component.display()