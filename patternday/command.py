"""Command pattern: buttons switching a device on and off."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Device(ABC):
    @abstractmethod
    def on(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def off(self) -> None:
        """Switch the device off."""


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""


@dataclass
class OnCommand(Command):
    device: Device

    def execute(self) -> None:
        self.device.on()


@dataclass
class OffCommand(Command):
    device: Device

    def execute(self) -> None:
        self.device.off()


@dataclass
class Button:
    command: Command

    def press(self) -> None:
        self.command.execute()


@dataclass
class Control(Device):
    power_on: bool = False

    def on(self) -> None:
        self.power_on = True

    def off(self) -> None:
        self.power_on = False