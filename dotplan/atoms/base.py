"""The atom interface: the smallest unit of planned, idempotent work."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

__all__ = ["Outcome", "Atom", "FileAtom", "Echo"]


@dataclass
class Outcome:
    """The result of planning an atom."""

    should_run: bool
    side_effects: list = field(default_factory=list)


class Atom(ABC):
    """A unit of work that can tell whether it needs to run and then run."""

    @abstractmethod
    def plan(self) -> Outcome:
        """Determine whether this atom needs to run."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the change."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the change this atom makes."""

    def output_string(self) -> str:
        return ""

    def error_message(self) -> str:
        return ""

    def status_code(self) -> int:
        return 0


class FileAtom(Atom, ABC):
    """An atom that works on a file."""


@dataclass
class Echo(Atom):
    """An atom that always runs, does nothing, and reports its message as output."""

    message: str

    def plan(self) -> Outcome:
        return Outcome(should_run=True)

    def execute(self) -> None:
        return None

    def output_string(self) -> str:
        return self.message

    def __str__(self) -> str:
        return f"Echo: {self.message}"