"""Object adapter: adapt any of several adaptees to a target interface by composition."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractAdaptee(ABC):
    @abstractmethod
    def specific_request(self) -> str:
        """Perform the adaptee's own operation."""


class ConcreteAdaptee1(AbstractAdaptee):
    def specific_request(self) -> str:
        return "ConcreteAdaptee1 operation."


class ConcreteAdaptee2(AbstractAdaptee):
    def specific_request(self) -> str:
        return "ConcreteAdaptee2 operation."


class ObjTarget(ABC):
    """The interface clients expect."""

    @abstractmethod
    def request(self) -> str:
        """Perform the client's request."""


class ObjAdapter(ObjTarget):
    """Wraps an adaptee and exposes it through the ObjTarget interface."""

    def __init__(self, adaptee: AbstractAdaptee) -> None:
        self.adaptee = adaptee

    def request(self) -> str:
        return self.adaptee.specific_request()