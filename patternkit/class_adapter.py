"""Class adapter: adapt an incompatible class to a target interface by inheritance."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Adaptee:
    """A class with a useful operation but the wrong interface."""

    def operation(self) -> str:
        return "Adaptee operation"


class Target(ABC):
    """The interface clients expect."""

    @abstractmethod
    def request(self) -> str:
        """Perform the client's request."""


class Adapter(Target, Adaptee):
    """Exposes the Adaptee's operation through the Target interface."""

    def request(self) -> str:
        return self.operation()