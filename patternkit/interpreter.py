"""Interpreter: a small expression tree that can be rendered and evaluated."""

from __future__ import annotations

from abc import ABC, abstractmethod


class UnassignedVariableError(ValueError):
    """Raised when a variable is evaluated before it has been given a value."""


def _format_number(value: float) -> str:
    return format(value, "g")


class AbstractExpression(ABC):
    @abstractmethod
    def render(self) -> str:
        """Return the expression as text."""

    @abstractmethod
    def evaluate(self) -> float:
        """Return the expression's value."""

    def __str__(self) -> str:
        return self.render()


class Number(AbstractExpression):
    def __init__(self, value: float) -> None:
        self.value = value

    def render(self) -> str:
        return _format_number(self.value)

    def evaluate(self) -> float:
        return self.value


class Variable(AbstractExpression):
    """A named variable whose value is assigned later."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.value: float | None = None

    def assign(self, value: float) -> None:
        self.value = value

    def render(self) -> str:
        return self.name

    def evaluate(self) -> float:
        if self.value is None:
            raise UnassignedVariableError(f"variable {self.name!r} has no value")
        return self.value


class _Binary(AbstractExpression):
    symbol = ""

    def __init__(self, left: AbstractExpression, right: AbstractExpression) -> None:
        self.left = left
        self.right = right

    def render(self) -> str:
        return f"({self.left.render()} {self.symbol} {self.right.render()})"


class Plus(_Binary):
    symbol = "+"

    def evaluate(self) -> float:
        return self.left.evaluate() + self.right.evaluate()


class Minus(_Binary):
    symbol = "-"

    def evaluate(self) -> float:
        return self.left.evaluate() - self.right.evaluate()