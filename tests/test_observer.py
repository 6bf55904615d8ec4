import pytest

from patternkit.observer import ConcreteObserver, ConcreteSubject, Observer, Subject


def test_state_change_without_observers_notifies_nobody():
    subject = ConcreteSubject()
    subject.state = "State 1"
    assert subject.state == "State 1"
    assert subject.last_notifications == []


def test_observer_receives_later_changes():
    subject = ConcreteSubject()
    subject.state = "State 1"
    observer = ConcreteObserver(subject)
    assert observer.observer_state == ""
    subject.state = "State 2"
    assert observer.observer_state == "State 2"
    assert subject.last_notifications == ["Observer Updated!"]


def test_every_observer_is_notified():
    subject = ConcreteSubject()
    observers = [ConcreteObserver(subject) for _ in range(3)]
    subject.state = "x"
    assert [o.observer_state for o in observers] == ["x", "x", "x"]
    assert len(subject.last_notifications) == 3


def test_detach_stops_updates():
    subject = ConcreteSubject()
    observer = ConcreteObserver(subject)
    subject.detach(observer)
    subject.state = "ignored"
    assert observer.observer_state == ""
    assert subject.last_notifications == []


def test_notify_order_and_messages():
    seen = []

    class Recording(Observer):
        def __init__(self, name):
            self.name = name

        def update(self, subject):
            seen.append(self.name)
            return None if self.name == "quiet" else self.name

    subject = Subject()
    for name in ("a", "quiet", "b"):
        subject.attach(Recording(name))
    assert subject.notify() == ["a", "b"]
    assert seen == ["a", "quiet", "b"]


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()