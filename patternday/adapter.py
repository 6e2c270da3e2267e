"""Adapter pattern: plugging a Lightning connector into a USB-only machine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Computer(ABC):
    """A machine that accepts a Lightning connector."""

    @abstractmethod
    def insert_into_lightning_port(self) -> None:
        """Accept a Lightning connector."""


class Client:
    """Someone holding a Lightning connector."""

    def insert_lightning_connector_into_computer(self, computer: Computer) -> None:
        print("Client inserts Lightning connector into computer.")
        computer.insert_into_lightning_port()


class Mac(Computer):
    """A machine with a native Lightning port."""

    def insert_into_lightning_port(self) -> None:
        print("Lightning connector is plugged into mac machine.")


class Windows:
    """A machine that only has a USB port."""

    def insert_into_usb_port(self) -> str:
        """Report the USB connection and return the reported line."""
        message = "USB connector is plugged into windows machine."
        print(message)
        return message


@dataclass
class Adapter(Computer):
    """Lets a Windows machine accept a Lightning connector."""

    windows: Windows

    def insert_into_lightning_port(self) -> None:
        print("Adapter converts Lightning signal to USB.")
        self.windows.insert_into_usb_port()