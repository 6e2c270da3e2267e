"""Iterator pattern: walking through a list of students."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Student:
    name: str


@dataclass
class StudentIterator(Iterator):
    """Yields the students in order, tracking the position reached."""

    users: list[Student] = field(default_factory=list)
    index: int = 0

    def first(self) -> Student | None:
        return self.users[0] if self.users else None

    def has_next(self) -> bool:
        return self.index < len(self.users)

    def __iter__(self) -> "StudentIterator":
        return self

    def __next__(self) -> Student:
        if not self.has_next():
            raise StopIteration
        student = self.users[self.index]
        self.index += 1
        return student