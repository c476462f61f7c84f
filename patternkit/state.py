"""State pattern: a context whose behaviour changes with its current state."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """One state of a context."""

    @abstractmethod
    def handle(self, context: Context) -> None:
        """Handle a request made to the context."""


class ConcreteStateA(State):
    """Handles a request and moves the context to state B."""

    def handle(self, context: Context) -> None:
        print("Handling request in ConcreteStateA.")
        context.state = ConcreteStateB()


class ConcreteStateB(State):
    """Handles a request and moves the context to state A."""

    def handle(self, context: Context) -> None:
        print("Handling request in ConcreteStateB.")
        context.state = ConcreteStateA()


class Context:
    """Delegates requests to its current state, if it has one."""

    def __init__(self, state: State | None) -> None:
        self.state = state

    def request(self) -> None:
        if self.state is not None:
            self.state.handle(self)


def main(argv: list[str] | None = None) -> int:
    """Move a context from A to B and back again."""
    context = Context(ConcreteStateA())
    context.request()
    context.request()
    return 0