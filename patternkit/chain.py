"""Chain of responsibility: requests pass along handlers until one takes them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Handler(ABC):
    """A link in the chain with an optional successor."""

    def __init__(self, successor: Handler | None = None) -> None:
        self.successor = successor

    @abstractmethod
    def handle_request(self, request: int) -> None:
        """Handle the request or pass it on to the successor."""


class ConcreteHandler1(Handler):
    """Handles requests below 10."""

    def handle_request(self, request: int) -> None:
        if request < 10:
            print(f"ConcreteHandler1 handled request {request}")
        elif self.successor is not None:
            self.successor.handle_request(request)


class ConcreteHandler2(Handler):
    """Handles requests of 10 and above."""

    def handle_request(self, request: int) -> None:
        if request >= 10:
            print(f"ConcreteHandler2 handled request {request}")
        elif self.successor is not None:
            self.successor.handle_request(request)


def main(argv: list[str] | None = None) -> int:
    """Send a few requests through a two-handler chain."""
    handler1 = ConcreteHandler1(successor=ConcreteHandler2())
    for request in (5, 20, 15, 2, 8):
        handler1.handle_request(request)
    return 0