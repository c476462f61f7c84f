"""Memento pattern: capture an object's state and restore it later."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Memento:
    """An immutable snapshot of an originator's state."""

    state: str


class Originator:
    """Holds a state that can be saved to and restored from mementos."""

    def __init__(self, state: str = "") -> None:
        self.state = state

    def create_memento(self) -> Memento:
        return Memento(self.state)

    def restore(self, memento: Memento | None) -> None:
        """Restore the state from a memento; None leaves the state as is."""
        if memento is not None:
            self.state = memento.state


class Caretaker:
    """Keeps the most recently saved memento."""

    def __init__(self) -> None:
        self._memento: Memento | None = None

    @property
    def memento(self) -> Memento | None:
        """The last saved memento, or None if nothing has been saved."""
        return self._memento

    def save_memento(self, memento: Memento) -> None:
        """Store a memento, replacing any earlier one."""
        self._memento = memento


def main(argv: list[str] | None = None) -> int:
    """Save a state, change it, then restore the saved one."""
    originator = Originator()
    caretaker = Caretaker()

    originator.state = "State1"
    print(f"Originator State: {originator.state}")
    caretaker.save_memento(originator.create_memento())

    originator.state = "State2"
    print(f"Originator State: {originator.state}")

    originator.restore(caretaker.memento)
    print(f"Restored Originator State: {originator.state}")
    return 0