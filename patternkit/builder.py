"""Builder: assemble a product step by step, with a director choosing the order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexProduct:
    """A product made of four optional components."""

    component1: bool
    component2: bool
    component3: bool
    component4: bool

    def describe(self) -> str:
        """Return a multi-line report of which components are present."""
        lines = ["ComplexProduct states:"]
        for index, present in enumerate(
            (self.component1, self.component2, self.component3, self.component4), start=1
        ):
            lines.append(f" * component{index}: {'+' if present else '-'}")
        return "\n".join(lines)


class ComplexBuilder:
    """Builder whose steps return the builder itself so calls can be chained."""

    def __init__(self) -> None:
        self._parts = [False, False, False, False]

    def _build(self, index: int) -> ComplexBuilder:
        self._parts[index] = True
        return self

    def build_part1(self) -> ComplexBuilder:
        return self._build(0)

    def build_part2(self) -> ComplexBuilder:
        return self._build(1)

    def build_part3(self) -> ComplexBuilder:
        return self._build(2)

    def build_part4(self) -> ComplexBuilder:
        return self._build(3)

    def get_product(self) -> ComplexProduct:
        return ComplexProduct(*self._parts)


class Director:
    """Drives a chaining builder through a fixed build order."""

    def __init__(self, builder: ComplexBuilder) -> None:
        self.builder = builder

    def construct(self) -> ComplexProduct:
        return self.builder.build_part3().build_part1().build_part4().build_part2().get_product()


class Builder(ABC):
    """Builder interface whose steps mutate the builder and return nothing."""

    @abstractmethod
    def build_part1(self) -> None: ...

    @abstractmethod
    def build_part2(self) -> None: ...

    @abstractmethod
    def build_part3(self) -> None: ...

    @abstractmethod
    def build_part4(self) -> None: ...

    @abstractmethod
    def get_product(self) -> ComplexProduct: ...


class ConcreteBuilder(Builder):
    def __init__(self) -> None:
        self.component1 = False
        self.component2 = False
        self.component3 = False
        self.component4 = False

    def build_part1(self) -> None:
        self.component1 = True

    def build_part2(self) -> None:
        self.component2 = True

    def build_part3(self) -> None:
        self.component3 = True

    def build_part4(self) -> None:
        self.component4 = True

    def get_product(self) -> ComplexProduct:
        return ComplexProduct(self.component1, self.component2, self.component3, self.component4)


class Director2:
    """Drives any Builder through a fixed build order."""

    def construct(self, builder: Builder) -> None:
        builder.build_part3()
        builder.build_part1()
        builder.build_part4()
        builder.build_part2()