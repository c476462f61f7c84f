"""Facade pattern: one simple entry point over several subsystems."""

from __future__ import annotations

from dataclasses import dataclass, field


def _report(message: str) -> str:
    print(message)
    return message


class SubsystemA:
    def operation_a(self) -> str:
        """Perform subsystem A's operation and return its report line."""
        return _report("Subsystem A operation")


class SubsystemB:
    def operation_b(self) -> str:
        """Perform subsystem B's operation and return its report line."""
        return _report("Subsystem B operation")


class SubsystemC:
    def operation_c(self) -> str:
        """Perform subsystem C's operation and return its report line."""
        return _report("Subsystem C operation")


@dataclass
class Facade:
    """Runs the operations of subsystems A, B and C in that order."""

    subsystem_a: SubsystemA = field(default_factory=SubsystemA)
    subsystem_b: SubsystemB = field(default_factory=SubsystemB)
    subsystem_c: SubsystemC = field(default_factory=SubsystemC)

    def operation(self) -> list[str]:
        """Run every subsystem operation and return their report lines."""
        return [
            self.subsystem_a.operation_a(),
            self.subsystem_b.operation_b(),
            self.subsystem_c.operation_c(),
        ]


def main(argv: list[str] | None = None) -> int:
    """Run the facade's combined operation."""
    Facade().operation()
    return 0