"""Atom that sets the contents of a file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

__all__ = ["SetContents"]

logger = logging.getLogger(__name__)


@dataclass
class SetContents(FileAtom):
    """Make a file hold exactly the given bytes."""

    path: Path
    contents: bytes

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))
        self.contents = bytes(self.contents)

    def plan(self) -> Outcome:
        # A missing file is assumed to be provided by another atom.
        if not self.path.exists():
            return Outcome(should_run=True)
        try:
            current = self.path.read_bytes()
        except OSError as err:
            logger.error(
                "Failed to read contents of %s for diff because %s. Skipping", self.path, err
            )
            return Outcome(should_run=False)
        return Outcome(should_run=current != self.contents)

    def execute(self) -> None:
        self.path.write_bytes(self.contents)

    def __str__(self) -> str:
        return f"The file {self.path} contents need to be set"