"""Template method: a fixed algorithm whose steps subclasses supply."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractClass(ABC):
    def template_method(self) -> str:
        """Combine the two primitive operations into the final result."""
        return f"{self.primitive_operation1()} vs. {self.primitive_operation2()}"

    @abstractmethod
    def primitive_operation1(self) -> str: ...

    @abstractmethod
    def primitive_operation2(self) -> str: ...


class ConcreteClass1(AbstractClass):
    def primitive_operation1(self) -> str:
        return "Moshe"

    def primitive_operation2(self) -> str:
        return "Danny"


class ConcreteClass2(AbstractClass):
    def primitive_operation1(self) -> str:
        return "Jilbert"

    def primitive_operation2(self) -> str:
        return "Putin"


def client_code(obj: AbstractClass) -> str:
    """Run the template method of any AbstractClass."""
    return obj.template_method()