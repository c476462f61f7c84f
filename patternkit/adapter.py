"""Adapter pattern: an incompatible object made to fit a target interface."""

from __future__ import annotations


class Target:
    """The interface clients expect."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """An existing class whose interface does not match the target."""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """Presents an adaptee as a target by reversing its answer."""

    def __init__(self, adaptee: Adaptee) -> None:
        self.adaptee = adaptee

    def request(self) -> str:
        return self.adaptee.specific_request()[::-1]


def main(argv: list[str] | None = None) -> int:
    """Show the adaptee's raw answer next to the adapted one."""
    adaptee = Adaptee()
    target: Target = Adapter(adaptee)
    print(f"Adaptee: {adaptee.specific_request()}")
    print(f"Adapter: {target.request()}")
    return 0