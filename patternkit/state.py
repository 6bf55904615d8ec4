"""State: behaviour chosen by the state object a context is given."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    @abstractmethod
    def handle(self) -> str:
        """Perform this state's behaviour and return its report."""


class Walker(State):
    def handle(self) -> str:
        return "Walking..."


class Driver(State):
    def handle(self) -> str:
        return "Driving..."


class Pilot(State):
    def handle(self) -> str:
        return "Fly away..."


class Context:
    """Holds a state and runs its behaviour as soon as it is created."""

    def __init__(self, state: State) -> None:
        self.state = state
        self.result = state.handle()