"""Atom that checks the owner and group of a file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import FileAtom, Outcome

try:
    import grp
    import pwd
except ImportError:  # not a POSIX system
    grp = None
    pwd = None

__all__ = ["Chown"]

logger = logging.getLogger(__name__)


@dataclass
class Chown(FileAtom):
    """Ensure a file belongs to the given owner and group."""

    path: Path
    owner: str
    group: str

    def __post_init__(self) -> None:
        self.path = Path(os.fspath(self.path))

    def plan(self) -> Outcome:
        if pwd is None or grp is None:
            return Outcome(should_run=False)

        # A missing file is assumed to be provided by another atom.
        if not self.path.exists():
            return Outcome(should_run=True)

        try:
            metadata = self.path.stat()
        except OSError as err:
            logger.error("Couldn't get metadata for %s, rejecting atom: %s", self.path, err)
            return Outcome(should_run=False)

        try:
            current_owner = pwd.getpwuid(metadata.st_uid)
            current_group = grp.getgrgid(metadata.st_gid)
        except KeyError:
            return Outcome(should_run=False)

        try:
            requested_owner = pwd.getpwnam(self.owner)
        except KeyError:
            logger.error("Skipping chown as requested owner, %s, does not exist", self.owner)
            return Outcome(should_run=False)

        try:
            requested_group = grp.getgrnam(self.group)
        except KeyError:
            logger.error("Skipping chown as requested group, %s, does not exist", self.group)
            return Outcome(should_run=False)

        if current_owner.pw_uid != requested_owner.pw_uid:
            return Outcome(should_run=True)
        if current_group.gr_gid != requested_group.gr_gid:
            return Outcome(should_run=True)
        return Outcome(should_run=False)

    def execute(self) -> None:
        return None

    def __str__(self) -> str:
        return (
            f"The owner and group on {self.path} need to be set to "
            f"{self.owner}:{self.group}"
        )