"""Initializers decide, before an atom runs, whether it should run at all."""

from __future__ import annotations

import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "Initializer",
    "FlowControl",
    "Ensure",
    "SkipIf",
    "CommandFound",
    "FileExists",
]


class Initializer(ABC):
    """A check run before an atom."""

    @abstractmethod
    def initialize(self) -> bool:
        """Return the result of the check."""


@dataclass
class Ensure:
    """Run the atom only when the initializer answers true."""

    initializer: Initializer


@dataclass
class SkipIf:
    """Skip the atom when the initializer answers true."""

    initializer: Initializer


FlowControl = Ensure | SkipIf


@dataclass
class CommandFound(Initializer):
    """True when the command can be found on the search path."""

    command: str

    def initialize(self) -> bool:
        return shutil.which(self.command) is not None


@dataclass
class FileExists(Initializer):
    """True when the path exists."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))

    def initialize(self) -> bool:
        return self.path.exists()