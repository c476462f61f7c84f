"""Decorator pattern: behaviour layered onto a component by wrapping it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """The interface shared by components and their decorators."""

    @abstractmethod
    def operation(self) -> None:
        """Perform the component's operation."""


class ConcreteComponent(Component):
    def operation(self) -> None:
        print("ConcreteComponent Operation")


class Decorator(Component):
    """Wraps a component and forwards to it, if there is one."""

    def __init__(self, component: Component | None) -> None:
        self.component = component

    def operation(self) -> None:
        if self.component is not None:
            self.component.operation()


class ConcreteDecoratorA(Decorator):
    """Adds state to the wrapped component's operation."""

    def __init__(self, component: Component | None) -> None:
        super().__init__(component)
        self.added_state = "Added State A"

    def operation(self) -> None:
        super().operation()
        print(f"ConcreteDecoratorA Operation with {self.added_state}")


class ConcreteDecoratorB(Decorator):
    """Adds behaviour after the wrapped component's operation."""

    def operation(self) -> None:
        super().operation()
        self.added_behavior()

    def added_behavior(self) -> str:
        """Perform the extra behaviour, print its report and return it."""
        line = f"{type(self).__name__} Added Behavior"
        print(line)
        return line


def main(argv: list[str] | None = None) -> int:
    """Wrap a component in decorator A, then in decorator B, and run it."""
    component: Component = ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))
    component.operation()
    return 0