"""Observer pattern: a subject notifies attached observers of state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear about a subject's changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a change in the observed subject."""


class Subject:
    """Keeps a list of observers and notifies them in attach order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of the observer; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update()


class ConcreteSubject(Subject):
    """A subject holding an integer state; setting it notifies observers."""

    def __init__(self, state: int = 0) -> None:
        super().__init__()
        self._state = state

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value
        self.notify()


class ConcreteObserver(Observer):
    """Copies the subject's state whenever it is notified."""

    def __init__(self, subject: ConcreteSubject) -> None:
        self.subject = subject
        self.state: int | None = None

    def update(self) -> None:
        self.state = self.subject.state
        print(f"Observer State Updated: {self.state}")


def main(argv: list[str] | None = None) -> int:
    """Attach two observers, change state, detach one, change state again."""
    subject = ConcreteSubject()
    observer1 = ConcreteObserver(subject)
    observer2 = ConcreteObserver(subject)
    subject.attach(observer1)
    subject.attach(observer2)
    subject.state = 10
    subject.state = 20
    subject.detach(observer1)
    subject.state = 30
    return 0