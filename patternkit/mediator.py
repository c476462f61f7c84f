"""Mediator pattern: colleagues talk to each other only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Mediator(ABC):
    """Routes messages between colleagues."""

    @abstractmethod
    def send_message(self, message: str, sender: Colleague) -> None:
        """Deliver a message sent by one colleague."""


class Colleague(ABC):
    """A participant that sends through, and receives from, a mediator."""

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def send_message(self, message: str) -> None:
        self.mediator.send_message(message, self)

    @abstractmethod
    def receive_message(self, message: str) -> None:
        """Handle a message delivered by the mediator."""


class ConcreteColleague1(Colleague):
    def receive_message(self, message: str) -> None:
        print(f"Colleague1 received: {message}")


class ConcreteColleague2(Colleague):
    def receive_message(self, message: str) -> None:
        print(f"Colleague2 received: {message}")


class ConcreteMediator(Mediator):
    """Broadcasts each message to every registered colleague but the sender."""

    def __init__(self) -> None:
        self._colleagues: list[Colleague] = []

    def add_colleague(self, colleague: Colleague) -> None:
        self._colleagues.append(colleague)

    def send_message(self, message: str, sender: Colleague) -> None:
        for colleague in self._colleagues:
            if colleague is not sender:
                colleague.receive_message(message)


def main(argv: list[str] | None = None) -> int:
    """Exchange one message each way between two colleagues."""
    mediator = ConcreteMediator()
    colleague1 = ConcreteColleague1(mediator)
    colleague2 = ConcreteColleague2(mediator)
    mediator.add_colleague(colleague1)
    mediator.add_colleague(colleague2)
    colleague1.send_message("Hello from Colleague1")
    colleague2.send_message("Hello from Colleague2")
    return 0