"""Factory method pattern: subclasses decide which product to create."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """What the factory method produces."""

    @abstractmethod
    def use(self) -> str:
        """Use the product and return a description of the use."""


class ConcreteProduct(Product):
    def use(self) -> str:
        message = f"Using {type(self).__name__}"
        print(message)
        return message


class Creator(ABC):
    """Defines the factory method and an operation built on it."""

    @abstractmethod
    def factory_method(self) -> Product:
        """Create a new product."""

    def an_operation(self) -> Product:
        """Create a product, use it and return it."""
        product = self.factory_method()
        product.use()
        return product


class ConcreteCreator(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct()


def main(argv: list[str] | None = None) -> int:
    """Create and use a product through a concrete creator."""
    creator: Creator = ConcreteCreator()
    creator.an_operation()
    return 0