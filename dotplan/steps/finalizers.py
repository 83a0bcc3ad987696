"""Finalizers inspect an atom after it ran and may stop what follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from dotplan.atoms.base import Atom

__all__ = ["Finalizer", "FlowControl", "StopIf", "OutputContains"]


class Finalizer(ABC):
    """A check run against an atom after it has executed."""

    @abstractmethod
    def finalize(self, atom: Atom) -> bool:
        """Return the result of the check."""


@dataclass
class StopIf:
    """Stop further execution when the finalizer answers true."""

    finalizer: Finalizer


FlowControl = StopIf


@dataclass
class OutputContains(Finalizer):
    """True when the atom's output contains the given text."""

    text: str

    def finalize(self, atom: Atom) -> bool:
        return self.text in atom.output_string()