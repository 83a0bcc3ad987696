"""Atoms that work on directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import Atom, Outcome

__all__ = ["Create"]


@dataclass
class Create(Atom):
    """Create a directory and any missing parents."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))

    def plan(self) -> Outcome:
        return Outcome(should_run=not self.path.exists())

    def execute(self) -> None:
        self.path.mkdir(parents=True, exist_ok=True)

    def __str__(self) -> str:
        return f"The directory {self.path} needs to be created"