"""State pattern: classifying months by their number of days."""

from dataclasses import dataclass
from enum import IntEnum


class MonthState(IntEnum):
    SOLAR = 0
    LUNAR = 1
    LEAP = 2
    NONLEAP = 3


@dataclass
class Month:
    name: str
    day: int
    status: MonthState = MonthState.SOLAR

    def solar(self) -> bool:
        return self.day == 31

    def lunar(self) -> bool:
        return self.day == 30

    def leap(self) -> bool:
        return self.day == 28

    def non_leap(self) -> bool:
        return self.day == 29