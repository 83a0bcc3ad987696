"""Atoms that work on Git repositories."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import Atom, Outcome

__all__ = ["Clone"]

logger = logging.getLogger(__name__)


@dataclass
class Clone(Atom):
    """Clone a repository into a directory that does not exist yet."""

    repository: str = ""
    directory: Path = Path()
    reference: str | None = None

    def __post_init__(self) -> None:
        self.directory = Path(os.fspath(self.directory))

    def plan(self) -> Outcome:
        return Outcome(should_run=not self.directory.exists())

    def execute(self) -> None:
        command = ["git", "clone"]
        if self.reference is not None:
            command += ["--branch", self.reference]
        command += [self.repository, str(self.directory)]

        logger.info("Cloning %s", self)
        try:
            completed = subprocess.run(command, capture_output=True, text=True)
        except OSError as err:
            raise RuntimeError(f"Failed to run git: {err}") from err
        if completed.returncode != 0:
            raise RuntimeError(
                f"Failed to clone {self.repository}: {completed.stderr.strip()}"
            )

    def __str__(self) -> str:
        reference = self.reference if self.reference is not None else "main"
        return f'GitClone {self.repository}#{reference} to "{self.directory}"'