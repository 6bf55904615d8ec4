"""Abstract factory: families of related products created by one factory."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    @abstractmethod
    def useful_function_a(self) -> str:
        """Return a label identifying this product."""


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "A1 "


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "A2 "


class AbstractProductB(ABC):
    @abstractmethod
    def useful_function_b(self) -> str:
        """Return a label identifying this product."""


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "B1 "


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "B2 "


class AbstractFactory(ABC):
    """Creates one product of each kind from a single family."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """Create the family's A product."""

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """Create the family's B product."""


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()