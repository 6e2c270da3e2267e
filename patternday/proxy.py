"""Proxy pattern: a proxy that lazily creates the real server."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Server(ABC):
    @abstractmethod
    def echo(self) -> str:
        """Answer a ping."""


@dataclass
class JPServer(Server):
    address: str

    def echo(self) -> str:
        return f"Echo form: {self.address}"


@dataclass
class Proxy(Server):
    """Forwards to a JPServer created on first connect."""

    address: str
    server: JPServer | None = None

    def connect(self) -> None:
        if self.server is None:
            self.server = JPServer(self.address)

    def echo(self) -> str:
        if self.server is None:
            raise RuntimeError("proxy is not connected to a server")
        return self.server.echo()