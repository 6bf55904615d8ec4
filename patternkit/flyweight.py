"""Flyweight: share one object per key instead of storing the key in every user."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Flyweight(ABC):
    """A shared object identified by an integer key."""

    def __init__(self, key: int = 0) -> None:
        self.key = key

    @abstractmethod
    def describe(self, row: int, col: int) -> str:
        """Describe this flyweight placed at the given position."""

    def _describe_as(self, name: str, row: int, col: int) -> str:
        return f"{name} {id(self):#x} is at [{row}, {col}] with key = {self.key}"


class ConcreteFW1(Flyweight):
    def describe(self, row: int, col: int) -> str:
        return self._describe_as("ConcreteFW1", row, col)


class ConcreteFW2(Flyweight):
    def describe(self, row: int, col: int) -> str:
        return self._describe_as("ConcreteFW2", row, col)


class FlyweightFactory(ABC):
    """Hands out one shared flyweight per key, creating it on first request."""

    def __init__(self) -> None:
        self._flyweights: list[Flyweight] = []

    @abstractmethod
    def _new_flyweight(self, key: int) -> Flyweight:
        """Create a new flyweight for ``key``."""

    def get_flyweight(self, key: int) -> Flyweight:
        """Return the flyweight whose key is ``key``, creating it if none exists."""
        existing = next((fw for fw in self._flyweights if fw.key == key), None)
        if existing is not None:
            return existing
        created = self._new_flyweight(key)
        self._flyweights.append(created)
        return created

    def __len__(self) -> int:
        return len(self._flyweights)


class FW1Factory(FlyweightFactory):
    def _new_flyweight(self, key: int) -> Flyweight:
        return ConcreteFW1(key)


class FW2Factory(FlyweightFactory):
    def _new_flyweight(self, key: int) -> Flyweight:
        return ConcreteFW2(key)