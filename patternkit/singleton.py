"""Singleton pattern: one lazily created, thread-safe shared instance."""

from __future__ import annotations

import threading
from typing import ClassVar


class Singleton:
    """A class with exactly one instance, obtained through get_instance()."""

    _instance: ClassVar[Singleton | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _data: int

    def __init__(self) -> None:
        raise TypeError("Singleton cannot be instantiated directly; use Singleton.get_instance()")

    @classmethod
    def get_instance(cls) -> Singleton:
        """Return the single instance, creating it on first call."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = object.__new__(cls)
                    instance._data = 0
                    cls._instance = instance
        return cls._instance

    def __copy__(self) -> Singleton:
        # Copying never produces a second instance.
        return type(self).get_instance()

    def __deepcopy__(self, memo: dict) -> Singleton:
        instance = type(self).get_instance()
        memo[id(self)] = instance
        return instance

    @property
    def data(self) -> int:
        return self._data

    def singleton_operation(self) -> int:
        """Example operation on the shared instance; returns its data unchanged."""
        return self._data


def main(argv: list[str] | None = None) -> int:
    """Fetch the instance, use it and print its data."""
    instance = Singleton.get_instance()
    instance.singleton_operation()
    print(f"Singleton data: {instance.data}")
    return 0