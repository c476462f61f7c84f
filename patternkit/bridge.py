"""Bridge pattern: an abstraction delegates its work to a separate implementor."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementor(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def operation_impl(self) -> None:
        """Do the implementation-specific work."""


def _announce(implementor: Implementor) -> str:
    line = f"{type(implementor).__name__} OperationImpl executed."
    print(line)
    return line


class ConcreteImplementorA(Implementor):
    def operation_impl(self) -> str:
        return _announce(self)


class ConcreteImplementorB(Implementor):
    def operation_impl(self) -> str:
        return _announce(self)


class Abstraction:
    """The abstraction side of the bridge, holding an implementor."""

    def __init__(self, implementor: Implementor) -> None:
        self.implementor = implementor

    def operation(self) -> None:
        self.implementor.operation_impl()


class RefinedAbstraction(Abstraction):
    """An abstraction that announces itself before delegating."""

    def operation(self) -> None:
        print("RefinedAbstraction Operation executed.")
        self.implementor.operation_impl()


def main(argv: list[str] | None = None) -> int:
    """Run one refined abstraction over each implementor."""
    abstraction_a: Abstraction = RefinedAbstraction(ConcreteImplementorA())
    abstraction_b: Abstraction = RefinedAbstraction(ConcreteImplementorB())
    abstraction_a.operation()
    abstraction_b.operation()
    return 0