"""Iterator: walk a container's items without exposing how it stores them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class ContainerIterator(Generic[T]):
    """Walks the items of a Container from first to last."""

    def __init__(self, container: Container[T]) -> None:
        self._items = container._items
        self._position = 0

    def __iter__(self) -> ContainerIterator[T]:
        return self

    def __next__(self) -> T:
        if self._position >= len(self._items):
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item


class Container(Generic[T]):
    """An ordered collection of items."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def create_iterator(self) -> ContainerIterator[T]:
        return ContainerIterator(self)

    def __iter__(self) -> Iterator[T]:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class Data:
    """A simple value holder."""

    data: int = 0