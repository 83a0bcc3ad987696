"""Atom that creates an empty file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

__all__ = ["Create"]


@dataclass
class Create(FileAtom):
    """Create a file if it does not exist."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))

    def plan(self) -> Outcome:
        return Outcome(should_run=not self.path.exists())

    def execute(self) -> None:
        with self.path.open("wb"):
            pass

    def __str__(self) -> str:
        return f"The file {self.path} needs to be created"