"""Atoms that work over HTTP."""

from __future__ import annotations

import os
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path

from dotplan.atoms.base import Atom, Outcome

__all__ = ["HttpAtom", "Download"]


class HttpAtom(Atom):
    """An atom that talks HTTP."""


@dataclass
class Download(HttpAtom):
    """Download a URL to a local file, if the file is not already there."""

    url: str
    to: Path

    def __post_init__(self) -> None:
        self.to = Path(os.fspath(self.to))

    def plan(self) -> Outcome:
        return Outcome(should_run=not self.to.exists())

    def execute(self) -> None:
        try:
            with urllib.request.urlopen(self.url) as response:
                content = response.read()
        except urllib.error.HTTPError as err:
            # An error status still carries a body; it is saved as is.
            with err:
                content = err.read()
        self.to.write_bytes(content)

    def __str__(self) -> str:
        return f"HttpDownload from {self.url} to {self.to}"