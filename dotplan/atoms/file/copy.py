"""Atom that copies a file over another."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

__all__ = ["Copy"]

logger = logging.getLogger(__name__)

_CHUNK = 64 * 1024


def _same_contents(first: Path, second: Path) -> bool:
    """Whether both files can be read and hold the same bytes."""
    try:
        with first.open("rb") as a, second.open("rb") as b:
            if os.fstat(a.fileno()).st_size != os.fstat(b.fileno()).st_size:
                return False
            while True:
                chunk_a = a.read(_CHUNK)
                chunk_b = b.read(_CHUNK)
                if chunk_a != chunk_b:
                    return False
                if not chunk_a:
                    return True
    except OSError:
        return False


@dataclass
class Copy(FileAtom):
    """Copy the contents (and permission bits) of ``from_`` onto the file ``to``."""

    from_: Path
    to: Path

    def __post_init__(self) -> None:
        self.from_ = Path(os.fspath(self.from_))
        self.to = Path(os.fspath(self.to))

    def plan(self) -> Outcome:
        if not self.to.is_file():
            logger.error("Cannot plan: target isn't a file: %s", self.to)
            return Outcome(should_run=False)
        return Outcome(should_run=not _same_contents(self.from_, self.to))

    def execute(self) -> None:
        shutil.copyfile(self.from_, self.to)
        shutil.copymode(self.from_, self.to)

    def __str__(self) -> str:
        return f"The file {self.to} contents needs to be copied from {self.from_}"