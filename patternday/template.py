"""Template method pattern: every strategy game is played in the same steps."""

from abc import ABC, abstractmethod


class RealTimeStrategyGame(ABC):
    @abstractmethod
    def initialize(self) -> None:
        """Prepare the game."""

    @abstractmethod
    def start(self) -> None:
        """Start the game."""

    @abstractmethod
    def end(self) -> None:
        """Finish the game."""


def _step(name: str) -> str:
    print(name)
    return name


class AgeOfEmpires(RealTimeStrategyGame):
    def initialize(self) -> str:
        return _step("initialize")

    def start(self) -> str:
        return _step("start")

    def end(self) -> str:
        return _step("end")


class Starcraft(RealTimeStrategyGame):
    def initialize(self) -> str:
        return _step("initialize")

    def start(self) -> str:
        return _step("start")

    def end(self) -> str:
        return _step("end")


def play(game: RealTimeStrategyGame) -> None:
    """Run a game through its fixed sequence of steps."""
    game.initialize()
    game.start()
    game.end()