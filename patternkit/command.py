"""Command: requests turned into objects that can be stored and run later."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Invoker:
    """The object on whose behalf commands are run."""

    def __init__(self, description: str) -> None:
        self.description = description

    def operation1(self) -> str:
        return f"{self.description} doing operation1"

    def operation2(self) -> str:
        return f"{self.description} doing operation2"


class Command(ABC):
    def __init__(self, invoker: Invoker) -> None:
        self.invoker = invoker

    @abstractmethod
    def execute(self) -> str:
        """Run the command and return its report."""


class ConcreteCommand1(Command):
    def execute(self) -> str:
        return f"{self.invoker.description} execute command 1"


class ConcreteCommand2(Command):
    def execute(self) -> str:
        return f"{self.invoker.description} execute command 2"


class Receiver:
    """Holds the commands bound to an invoker and runs them on request."""

    def __init__(self, invoker: Invoker) -> None:
        self.commands: list[Command] = [ConcreteCommand1(invoker), ConcreteCommand2(invoker)]

    def execute_command1(self) -> str:
        return self.commands[0].execute()

    def execute_command2(self) -> str:
        return self.commands[1].execute()