"""Visitor pattern: environments visited through an element."""

from abc import ABC, abstractmethod


class Visitor(ABC):
    @abstractmethod
    def visit(self) -> str:
        """Visit and return the environment's name."""


class Dev(Visitor):
    def visit(self) -> str:
        print("Env Dev")
        return "dev"


class Prod(Visitor):
    def visit(self) -> str:
        print("Env Prod")
        return "prod"


class Qa(Visitor):
    def visit(self) -> str:
        print("Env Qa")
        return "qa"


class Element:
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit()


class Env(Element):
    def print(self, visitor: Visitor) -> str:
        """Let the visitor visit this environment and return its answer."""
        return self.accept(visitor)