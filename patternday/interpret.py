"""Interpreter pattern: boolean expressions over sets of words."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: str) -> bool:
        """Evaluate the expression against a word."""


@dataclass
class Operate(Expression):
    """True when the word is one of the known words."""

    data: list[str] = field(default_factory=list)

    def interpret(self, context: str) -> bool:
        return context in self.data


@dataclass
class AndOperate(Expression):
    expr1: Expression
    expr2: Expression

    def interpret(self, context: str) -> bool:
        return self.expr1.interpret(context) and self.expr2.interpret(context)


@dataclass
class OrOperate(Expression):
    expr1: Expression
    expr2: Expression

    def interpret(self, context: str) -> bool:
        return self.expr1.interpret(context) or self.expr2.interpret(context)