"""Atom that sets the permission bits of a file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

__all__ = ["Chmod"]

logger = logging.getLogger(__name__)

# File-type bits of a regular file, which users leave out when they write 644 or 755.
_REGULAR_FILE = 0o100000


@dataclass
class Chmod(FileAtom):
    """Set the permissions of a file, given as chmod would take them (for example 0o644)."""

    path: Path
    mode: int

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))

    def plan(self) -> Outcome:
        if os.name != "posix":
            return Outcome(should_run=False)

        # A missing file is assumed to be provided by another atom.
        if not self.path.exists():
            return Outcome(should_run=True)

        try:
            current = self.path.stat().st_mode
        except OSError as err:
            logger.error("Couldn't get metadata for %s, rejecting atom: %s", self.path, err)
            return Outcome(should_run=False)

        return Outcome(should_run=_REGULAR_FILE + self.mode != current)

    def execute(self) -> None:
        if os.name != "posix":
            return
        os.chmod(self.path, self.mode)

    def __str__(self) -> str:
        return f"The permissions on {self.path} need to be set to {self.mode:o}"