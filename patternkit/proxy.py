"""Proxy pattern: a stand-in that creates the real subject on first use."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject(ABC):
    """The interface shared by the real subject and its proxy."""

    @abstractmethod
    def request(self) -> None:
        """Handle a request."""


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    """Delegates to a RealSubject that it creates lazily."""

    def __init__(self) -> None:
        self._real_subject: RealSubject | None = None

    @property
    def real_subject(self) -> RealSubject | None:
        """The real subject, or None before the first request."""
        return self._real_subject

    def request(self) -> None:
        if self._real_subject is None:
            self._real_subject = RealSubject()
        print("Proxy: Delegating request to RealSubject.")
        self._real_subject.request()


def main(argv: list[str] | None = None) -> int:
    """Send one request through a proxy."""
    Proxy().request()
    return 0