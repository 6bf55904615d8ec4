"""Decorator: stack behaviours around a component at run time."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractComponent(ABC):
    """Something with a numeric state (such as a price) and a description."""

    @abstractmethod
    def numeric_state(self) -> int:
        """Return the component's numeric state."""

    @abstractmethod
    def description(self) -> str:
        """Return the component's description."""


class ConcreteComponentA(AbstractComponent):
    def numeric_state(self) -> int:
        return 10

    def description(self) -> str:
        return "ConcreteComponentA "


class ConcreteComponentB(AbstractComponent):
    def numeric_state(self) -> int:
        return 5

    def description(self) -> str:
        return "ConcreteComponentB "


class ComponentDecorator(AbstractComponent):
    """Wraps a component, adding to its numeric state and description."""

    increment: int = 0
    suffix: str = ""

    def __init__(self, component: AbstractComponent) -> None:
        self.component = component

    def numeric_state(self) -> int:
        return self.component.numeric_state() + self.increment

    def description(self) -> str:
        return self.component.description() + self.suffix


class ConcreteComponentDecoratorA(ComponentDecorator):
    increment = 3
    suffix = "+ DecoratorA added behaviour "


class ConcreteComponentDecoratorB(ComponentDecorator):
    increment = 2
    suffix = "+ DecoratorB added behaviour "


class ConcreteComponentDecoratorC(ComponentDecorator):
    increment = 1
    suffix = "+ DecoratorC added behaviour "