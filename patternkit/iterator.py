"""Iterator pattern: a collection hands out cursors over its items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class IterableCollection(ABC):
    """A collection that can produce iterators over itself."""

    @abstractmethod
    def create_iterator(self) -> Iterator[int]:
        """Return a fresh iterator positioned at the first item."""

    def __iter__(self) -> Iterator[int]:
        return self.create_iterator()


class ConcreteCollection(IterableCollection):
    """A fixed collection of the integers one to five."""

    def __init__(self) -> None:
        self._items = [1, 2, 3, 4, 5]

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def create_iterator(self) -> ConcreteIterator:
        return ConcreteIterator(self)


class ConcreteIterator(Iterator[int]):
    """Walks a ConcreteCollection from the first item to the last."""

    def __init__(self, collection: ConcreteCollection) -> None:
        self._collection = collection
        self._position = 0

    def has_more(self) -> bool:
        return self._position < len(self._collection)

    def __next__(self) -> int:
        if not self.has_more():
            raise StopIteration
        item = self._collection[self._position]
        self._position += 1
        return item


def main(argv: list[str] | None = None) -> int:
    """Print every item of the collection on one line."""
    collection = ConcreteCollection()
    print("".join(f"{item} " for item in collection.create_iterator()))
    return 0