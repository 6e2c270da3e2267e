"""Chain of responsibility: requests escalate from director to general manager."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Request:
    count: int
    director_allow: bool = False
    general_manager_allow: bool = False
    manager_allow: bool = False


class Approver(ABC):
    """A link in the approval chain."""

    def __init__(self, manager: "Approver | None" = None) -> None:
        self.manager = manager

    def set_manager(self, manager: "Approver") -> None:
        self.manager = manager

    @abstractmethod
    def allow(self, request: Request) -> None:
        """Approve the request or pass it along."""

    def _escalate(self, request: Request) -> None:
        if self.manager is None:
            raise RuntimeError(f"{type(self).__name__} has no manager to escalate to")
        self.manager.allow(request)


class Director(Approver):
    def allow(self, request: Request) -> None:
        if request.count < 5:
            print("Director Allow Request", end="")
            print("Your Reques is Allow", end="")
            request.director_allow = True
        else:
            self._escalate(request)


class Manager(Approver):
    def allow(self, request: Request) -> None:
        if request.count < 10:
            print("Manager Allow Request", end="")
            request.manager_allow = True
        else:
            self._escalate(request)


class GeneralManager(Approver):
    def allow(self, request: Request) -> None:
        print("General Manager Allow Request", end="")
        request.general_manager_allow = True