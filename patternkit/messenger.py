"""Messenger built on a bridge: business variants over platform implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessagerImp(ABC):
    """Platform-specific primitives a messenger relies on."""

    platform = ""

    @abstractmethod
    def play_sound(self) -> None:
        """Play a notification sound."""

    @abstractmethod
    def draw_shape(self) -> None:
        """Draw a shape on screen."""

    @abstractmethod
    def write_text(self) -> None:
        """Write text on screen."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the network."""

    def _emit(self, activity: str) -> str:
        line = f"{activity} on {self.platform}"
        print(line)
        return line


class PCMessagerImp(MessagerImp):
    platform = "PC"

    def play_sound(self) -> str:
        return self._emit("Playing sound")

    def draw_shape(self) -> str:
        return self._emit("Drawing shape")

    def write_text(self) -> str:
        return self._emit("Writing text")

    def connect(self) -> str:
        return self._emit("Connecting")


class MobileMessagerImp(MessagerImp):
    platform = "Mobile"

    def play_sound(self) -> str:
        return self._emit("Playing sound")

    def draw_shape(self) -> str:
        return self._emit("Drawing shape")

    def write_text(self) -> str:
        return self._emit("Writing text")

    def connect(self) -> str:
        return self._emit("Connecting")


class Messager(ABC):
    """Messenger business logic, independent of the platform."""

    def __init__(self, imp: MessagerImp) -> None:
        self.imp = imp

    @abstractmethod
    def login(self, username: str, password: str) -> None:
        """Log in as the given user."""

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Send a text message."""

    @abstractmethod
    def send_picture(self, image: str) -> None:
        """Send a picture."""


class MessagerLite(Messager):
    """A minimal messenger without sound effects."""

    def login(self, username: str, password: str) -> None:
        self.imp.connect()
        print(f"Login in Lite mode with username: {username}")

    def send_message(self, message: str) -> None:
        self.imp.write_text()
        print(f"Sending message in Lite mode: {message}")

    def send_picture(self, image: str) -> None:
        self.imp.draw_shape()
        print(f"Sending picture in Lite mode: {image}")


class MessagerPerfect(Messager):
    """A full messenger that plays a sound before every action."""

    def login(self, username: str, password: str) -> None:
        self.imp.play_sound()
        self.imp.connect()
        print(f"Login in Perfect mode with username: {username}")

    def send_message(self, message: str) -> None:
        self.imp.play_sound()
        self.imp.write_text()
        print(f"Sending message in Perfect mode: {message}")

    def send_picture(self, image: str) -> None:
        self.imp.play_sound()
        self.imp.draw_shape()
        print(f"Sending picture in Perfect mode: {image}")


def main(argv: list[str] | None = None) -> int:
    """Use a full messenger on the PC platform."""
    password = "password"
    messager: Messager = MessagerPerfect(PCMessagerImp())
    messager.login("user", password)
    messager.send_message("Hello, World!")
    messager.send_picture("Image.png")
    return 0