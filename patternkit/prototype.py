"""Prototype pattern: new objects made by cloning existing ones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


class Prototype(ABC):
    """An object that can produce a copy of itself."""

    @abstractmethod
    def clone(self) -> Prototype:
        """Return an independent copy of this object."""


@dataclass
class ConcretePrototype(Prototype):
    field1: int

    def clone(self) -> ConcretePrototype:
        return replace(self)


@dataclass
class SubclassPrototype(Prototype):
    field2: int

    def clone(self) -> SubclassPrototype:
        return replace(self)


def client_code(prototype: Prototype) -> Prototype:
    """Work with a copy of the prototype and hand that copy back."""
    return prototype.clone()


def main(argv: list[str] | None = None) -> int:
    """Clone one prototype of each kind."""
    client_code(ConcretePrototype(10))
    client_code(SubclassPrototype(20))
    return 0