"""Prototype: objects that can copy themselves without the caller knowing their class."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import ClassVar


class Prototype(ABC):
    """An object able to produce an independent copy of itself."""

    description: ClassVar[str] = ""

    @abstractmethod
    def clone(self) -> Prototype:
        """Return a new object equal to this one."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description of the object's state."""


@dataclasses.dataclass
class ConcretePrototype1(Prototype):
    description: ClassVar[str] = "ConcretePrototype1"

    data1: int = 0
    data2: int = 0
    data3: int = 0

    def clone(self) -> ConcretePrototype1:
        return dataclasses.replace(self)

    def describe(self) -> str:
        return f"{self.description}: {self.data1}, {self.data2}, {self.data3}. "


@dataclasses.dataclass
class ConcretePrototype2(Prototype):
    description: ClassVar[str] = "ConcretePrototype2"

    data4: int = 0
    data5: int = 0

    def clone(self) -> ConcretePrototype2:
        return dataclasses.replace(self)

    def describe(self) -> str:
        return f"{self.description}: {self.data4}, {self.data5}. "