"""Factory method: products created by name through a registry of constructors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable


class Product(ABC):
    """A product that exposes two operations."""

    description: str = ""

    @abstractmethod
    def operation1(self) -> str:
        """Return the result of the first operation."""

    @abstractmethod
    def operation2(self) -> str:
        """Return the result of the second operation."""


class ConcreteProduct1(Product):
    description = "ConcreteProduct1"

    def operation1(self) -> str:
        return "CP1-operation1"

    def operation2(self) -> str:
        return "CP1-operation2"


class ConcreteProduct2(Product):
    description = "ConcreteProduct2"

    def operation1(self) -> str:
        return "CP2-operation1"

    def operation2(self) -> str:
        return "CP2-operation2"


class ConcreteProduct3(Product):
    description = "ConcreteProduct3"

    def operation1(self) -> str:
        return "CP3-operation1"

    def operation2(self) -> str:
        return "CP3-operation2"


class UnknownProductError(KeyError):
    """Raised when no product is registered under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"no product registered under {self.key!r}"


class Creator:
    """Creates products by name, looking the constructor up in a registry."""

    def __init__(self) -> None:
        self._registry: dict[str, Callable[[], Product]] = {
            "ConcreteProduct1": ConcreteProduct1,
            "ConcreteProduct2": ConcreteProduct2,
            "ConcreteProduct3": ConcreteProduct3,
        }

    def register(self, key: str, factory: Callable[[], Product]) -> None:
        """Register (or replace) the constructor used for ``key``."""
        self._registry[key] = factory

    def create(self, key: str) -> Product:
        """Build a new product for ``key``; raise UnknownProductError if none is registered."""
        try:
            factory = self._registry[key]
        except KeyError:
            raise UnknownProductError(key) from None
        return factory()

    def __contains__(self, key: object) -> bool:
        return key in self._registry