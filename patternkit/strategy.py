"""Strategy: interchangeable algorithms selected at run time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

_SAMPLE_DATA = ("a", "e", "c", "b", "d")


class Strategy(ABC):
    @abstractmethod
    def do_algorithm(self, data: Sequence[str]) -> str:
        """Combine ``data`` into one string."""


class NoStrategyError(RuntimeError):
    """Raised when a context is asked to work without a strategy."""


class StrategyContext:
    """Delegates its work to whichever strategy it currently holds."""

    def __init__(self, strategy: Strategy | None = None) -> None:
        self.strategy = strategy

    def do_context_logic(self) -> str:
        if self.strategy is None:
            raise NoStrategyError("no strategy has been set")
        return self.strategy.do_algorithm(list(_SAMPLE_DATA))


class ConcreteStrategyA(Strategy):
    """Concatenate and sort the characters in ascending order."""

    def do_algorithm(self, data: Sequence[str]) -> str:
        return "".join(sorted("".join(data)))


class ConcreteStrategyB(Strategy):
    """Concatenate and sort the characters in descending order."""

    def do_algorithm(self, data: Sequence[str]) -> str:
        return "".join(sorted("".join(data), reverse=True))