"""Atom that creates a symbolic link."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

__all__ = ["Link"]

logger = logging.getLogger(__name__)

_VERBATIM_PREFIX = "\\\\?\\"


@dataclass
class Link(FileAtom):
    """Make ``target`` a symbolic link pointing at ``source``."""

    source: Path
    target: Path

    def __post_init__(self) -> None:
        self.source = Path(os.fspath(self.source))
        self.target = Path(os.fspath(self.target))

    def plan(self) -> Outcome:
        if not self.source.exists():
            logger.error("Cannot plan: source file is missing: %s", self.source)
            return Outcome(should_run=False)

        if not self.target.exists():
            return Outcome(should_run=True)

        # An existing target may only be replaced if it is itself a link.
        try:
            link = Path(os.readlink(self.target))
        except OSError as err:
            logger.warning(
                "Cannot plan: target already exists and isn't a link: %s", self.target
            )
            logger.debug("Cannot plan: %s", err)
            return Outcome(should_run=False)

        source = self.source
        if os.name == "nt":
            source = Path(str(self.source).replace(_VERBATIM_PREFIX, ""))

        return Outcome(should_run=link != source)

    def execute(self) -> None:
        if os.name == "nt":
            os.symlink(self.source, self.target, target_is_directory=self.target.is_dir())
        else:
            os.symlink(self.source, self.target)

    def __str__(self) -> str:
        return f"The file {self.target} contents needs to be linked from {self.source}"