"""Flyweight pattern: shared objects for intrinsic state, looked up by key."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Flyweight(ABC):
    """An object whose operation takes the extrinsic state from outside."""

    @abstractmethod
    def operation(self, extrinsic_state: str) -> None:
        """Act using the given extrinsic state."""


class ConcreteFlyweight(Flyweight):
    """A shareable flyweight that stores only intrinsic state."""

    def __init__(self, intrinsic_state: str) -> None:
        self.intrinsic_state = intrinsic_state

    def operation(self, extrinsic_state: str) -> None:
        print(
            f"ConcreteFlyweight: Intrinsic [{self.intrinsic_state}] "
            f"Extrinsic [{extrinsic_state}]"
        )


class UnsharedConcreteFlyweight(Flyweight):
    """A flyweight that is not shared and keeps all its state."""

    def __init__(self, all_state: str) -> None:
        self.all_state = all_state

    def operation(self, extrinsic_state: str) -> None:
        print(
            f"UnsharedConcreteFlyweight: AllState [{self.all_state}] "
            f"Extrinsic [{extrinsic_state}]"
        )


class FlyweightFactory:
    """Creates flyweights on demand and returns the cached one for a known key."""

    def __init__(self) -> None:
        self._flyweights: dict[str, Flyweight] = {}

    def __len__(self) -> int:
        return len(self._flyweights)

    def __contains__(self, key: object) -> bool:
        return key in self._flyweights

    def get_flyweight(self, key: str) -> Flyweight:
        flyweight = self._flyweights.get(key)
        if flyweight is None:
            flyweight = self._flyweights[key] = ConcreteFlyweight(key)
        return flyweight


def main(argv: list[str] | None = None) -> int:
    """Share flyweights through a factory and use an unshared one."""
    factory = FlyweightFactory()
    factory.get_flyweight("State1").operation("Extrinsic1")
    factory.get_flyweight("State2").operation("Extrinsic2")
    factory.get_flyweight("State1").operation("Extrinsic3")
    UnsharedConcreteFlyweight("AllState").operation("Extrinsic4")
    return 0