"""Composite: a tree of leaves that do work and composites that hold children."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class CompositeCycleError(ValueError):
    """Raised when adding a component would make the tree contain itself."""


class Component(ABC):
    """A node of the tree."""

    def __init__(self, description: str) -> None:
        self.description = description
        self.parent: Component | None = None

    @abstractmethod
    def operation(self) -> list[str]:
        """Perform the operation over this subtree and return the lines it produced."""

    @abstractmethod
    def add(self, component: Component) -> None:
        """Add a child component."""

    @abstractmethod
    def remove(self, component: Component) -> None:
        """Remove a child component."""

    def is_composite(self) -> bool:
        return False

    def _subtree(self) -> Iterator[Component]:
        yield self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class Leaf(Component):
    """A node with no children; it does the actual work."""

    def operation(self) -> list[str]:
        return [f"leaf {self.description} doing operation"]

    def add(self, component: Component) -> None:
        """Leaves have no children: adding does nothing."""

    def remove(self, component: Component) -> None:
        """Leaves have no children: removing does nothing."""


class Composite(Component):
    """A node holding an ordered list of child components."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self._children: list[Component] = []

    def operation(self) -> list[str]:
        return [line for child in self._children for line in child.operation()]

    def add(self, component: Component) -> None:
        if any(node is self for node in component._subtree()):
            raise CompositeCycleError(
                f"adding {component!r} to {self!r} would create a cycle"
            )
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        """Remove every occurrence of ``component``; absent components are ignored."""
        self._children = [child for child in self._children if child is not component]
        if component.parent is self:
            component.parent = None

    def is_composite(self) -> bool:
        return True

    def _subtree(self) -> Iterator[Component]:
        yield self
        for child in self._children:
            yield from child._subtree()

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._children))