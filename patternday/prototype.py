"""Prototype pattern: resumes copied from a template."""

from dataclasses import dataclass, replace


@dataclass
class Basic:
    name: str = ""
    age: int = 0
    resume_type: str = ""

    def clone(self) -> "Basic":
        """Return an independent copy of this resume."""
        return replace(self)

    def copy(self) -> "Basic":
        """Return an independent copy of this resume."""
        return replace(self)