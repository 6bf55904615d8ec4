"""Facade: one simple interface in front of several subsystems."""

from __future__ import annotations


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_m(self) -> str:
        return "Subsystem2: Fire!\n"


class Facade:
    """Delegates client requests to the subsystems it owns."""

    def __init__(
        self,
        subsystem1: Subsystem1 | None = None,
        subsystem2: Subsystem2 | None = None,
    ) -> None:
        self.subsystem1 = subsystem1 if subsystem1 is not None else Subsystem1()
        self.subsystem2 = subsystem2 if subsystem2 is not None else Subsystem2()

    def start(self) -> str:
        """Initialise both subsystems and return their combined report."""
        return (
            "Facade initializes subsystems:\n"
            + self.subsystem1.operation1()
            + self.subsystem2.operation1()
        )

    def work(self) -> str:
        """Have both subsystems perform their action and return the report."""
        return (
            "Facade orders subsystems to perform the action:\n"
            + self.subsystem1.operation_n()
            + self.subsystem2.operation_m()
        )