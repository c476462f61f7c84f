"""Visitor pattern: operations on elements kept apart from the elements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Visitor(ABC):
    """An operation with one method per concrete element type."""

    @abstractmethod
    def visit_element_a(self, element: ConcreteElementA) -> None:
        """Visit an element of type A."""

    @abstractmethod
    def visit_element_b(self, element: ConcreteElementB) -> None:
        """Visit an element of type B."""


class Element(ABC):
    """Something a visitor can visit."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the visitor method for this element's type."""


class ConcreteElementA(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_element_a(self)

    def operation_a(self) -> str:
        """Operation specific to elements of type A."""
        return "operation_a"


class ConcreteElementB(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_element_b(self)

    def operation_b(self) -> str:
        """Operation specific to elements of type B."""
        return "operation_b"


def _report(visitor: Visitor, element: Element) -> str:
    line = f"{type(visitor).__name__}: Visiting {type(element).__name__}"
    print(line)
    return line


class ConcreteVisitor1(Visitor):
    def visit_element_a(self, element: ConcreteElementA) -> str:
        return _report(self, element)

    def visit_element_b(self, element: ConcreteElementB) -> str:
        return _report(self, element)


class ConcreteVisitor2(Visitor):
    def visit_element_a(self, element: ConcreteElementA) -> str:
        return _report(self, element)

    def visit_element_b(self, element: ConcreteElementB) -> str:
        return _report(self, element)


class ObjectStructure:
    """A collection of elements that a visitor walks in insertion order."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add_element(self, element: Element) -> None:
        self._elements.append(element)

    def accept(self, visitor: Visitor) -> None:
        for element in self._elements:
            element.accept(visitor)


def main(argv: list[str] | None = None) -> int:
    """Walk two elements with two different visitors."""
    structure = ObjectStructure()
    structure.add_element(ConcreteElementA())
    structure.add_element(ConcreteElementB())
    structure.accept(ConcreteVisitor1())
    structure.accept(ConcreteVisitor2())
    return 0