"""Composite pattern: leaves and composites treated through one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A node in a tree; child management is ignored unless overridden."""

    @abstractmethod
    def operation(self) -> None:
        """Perform this node's operation."""

    def add(self, component: Component) -> None:
        """Add a child; nodes without children ignore this."""
        return None

    def remove(self, component: Component) -> None:
        """Remove a child; nodes without children ignore this."""
        return None

    def get_child(self, index: int) -> Component | None:
        """Return the child at index, or None if there is none."""
        return None


class Composite(Component):
    """A node that holds children and runs their operations after its own."""

    def __init__(self) -> None:
        self._children: list[Component] = []

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self):
        return iter(self._children)

    def operation(self) -> None:
        print("Composite operation")
        for child in self._children:
            child.operation()

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Remove every occurrence of the component."""
        self._children = [c for c in self._children if c is not component]

    def get_child(self, index: int) -> Component | None:
        if 0 <= index < len(self._children):
            return self._children[index]
        return None


class Leaf(Component):
    """A node with no children."""

    def operation(self) -> None:
        print("Leaf operation")


def main(argv: list[str] | None = None) -> int:
    """Build a small tree and run its operation."""
    root = Composite()
    root.add(Leaf())
    root.add(Leaf())
    subtree = Composite()
    subtree.add(Leaf())
    subtree.add(Leaf())
    root.add(subtree)
    root.operation()
    return 0