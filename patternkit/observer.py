"""Observer: subjects that notify their subscribed observers of changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    @abstractmethod
    def update(self, subject: Subject) -> str | None:
        """React to a change in ``subject``; may return a message."""


class Subject:
    """Keeps a list of observers and notifies them in subscription order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every subscription of ``observer``."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self) -> list[str]:
        """Update every observer and return the messages they produced."""
        messages = []
        for observer in list(self._observers):
            message = observer.update(self)
            if message is not None:
                messages.append(message)
        return messages


class ConcreteSubject(Subject):
    """A subject holding a string state; setting it notifies the observers."""

    def __init__(self) -> None:
        super().__init__()
        self._state = ""
        self.last_notifications: list[str] = []

    @property
    def state(self) -> str:
        return self._state

    @state.setter
    def state(self, new_state: str) -> None:
        self._state = new_state
        self.last_notifications = self.notify()


class ConcreteObserver(Observer):
    """Subscribes to a subject on creation and copies its state on every update."""

    def __init__(self, subject: ConcreteSubject) -> None:
        self.subject = subject
        self.observer_state = ""
        subject.attach(self)

    def update(self, subject: Subject) -> str:
        self.observer_state = self.subject.state
        return "Observer Updated!"