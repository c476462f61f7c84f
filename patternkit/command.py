"""Command pattern: requests wrapped as objects and run by an invoker."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """An action that can be stored and executed later."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""


class Receiver:
    """The object that knows how to perform the actual work."""

    message = "Receiver: Performing an action."

    def action(self) -> str:
        """Perform the action, report it on standard output and return the report."""
        report = self.message
        print(report)
        return report


class ConcreteCommand(Command):
    """A command that forwards to a receiver's action."""

    def __init__(self, receiver: Receiver) -> None:
        self.receiver = receiver

    def execute(self) -> None:
        self.receiver.action()


class Invoker:
    """Holds commands and executes them in the order they were added."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        self._commands.append(command)

    def invoke(self) -> None:
        for command in self._commands:
            command.execute()


def main(argv: list[str] | None = None) -> int:
    """Run a single command through an invoker."""
    receiver = Receiver()
    invoker = Invoker()
    invoker.add_command(ConcreteCommand(receiver))
    invoker.invoke()
    return 0