"""Builder pattern: a director assembles a product step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Product:
    """The object under construction; parts are kept space-terminated."""

    parts: str = ""

    def add_part(self, part: str) -> None:
        self.parts += part + " "


class Builder(ABC):
    """Knows how to build the parts of a product."""

    @abstractmethod
    def build_part(self) -> None:
        """Add one part to the product under construction."""


class ConcreteBuilder(Builder):
    """Builds a Product made of generic parts."""

    def __init__(self) -> None:
        self._product = Product()

    def build_part(self) -> None:
        self._product.add_part("Part")

    def get_result(self) -> Product:
        return self._product


class Director:
    """Drives a builder through the construction steps."""

    def construct(self, builder: Builder) -> None:
        builder.build_part()


def main(argv: list[str] | None = None) -> int:
    """Build a product and print its parts."""
    builder = ConcreteBuilder()
    Director().construct(builder)
    print(f"Product parts: {builder.get_result().parts}")
    return 0