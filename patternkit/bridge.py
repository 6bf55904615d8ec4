"""Bridge: abstractions and implementations that vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractImplementor(ABC):
    @abstractmethod
    def implement(self) -> str:
        """Return the implementation's part of the work."""


class ConcreteImplementor1(AbstractImplementor):
    def implement(self) -> str:
        return "Concrete implementation 1 to "


class ConcreteImplementor2(AbstractImplementor):
    def implement(self) -> str:
        return "Concrete implementation 2 to "


class Abstraction(ABC):
    """An abstraction that delegates part of its work to an implementor."""

    def __init__(self, implementor: AbstractImplementor) -> None:
        self.implementor = implementor

    @abstractmethod
    def operation(self) -> str:
        """Return the combined result of the abstraction and its implementor."""


class RefinedAbstraction1(Abstraction):
    def operation(self) -> str:
        return self.implementor.implement() + "Abstraction 1."


class RefinedAbstraction2(Abstraction):
    def operation(self) -> str:
        return self.implementor.implement() + "Abstraction 2."