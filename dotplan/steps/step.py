"""A step: an atom together with the checks around it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dotplan.atoms.base import Atom
from dotplan.steps import finalizers, initializers

__all__ = ["Step"]

logger = logging.getLogger(__name__)


def _initializer_allows(flow: initializers.FlowControl) -> bool:
    try:
        result = flow.initializer.initialize()
    except Exception as err:  # an initializer that fails cannot vouch for the atom
        logger.error("Failed to run initializer: %s", err)
        return False
    if isinstance(flow, initializers.SkipIf):
        return not result
    return bool(result)


def _finalizer_allows(flow: finalizers.FlowControl, atom: Atom) -> bool:
    try:
        result = flow.finalizer.finalize(atom)
    except Exception as err:
        logger.error("Failed to run finalizer: %s", err)
        return False
    return not result


@dataclass
class Step:
    """An atom with the initializers and finalizers that govern it."""

    atom: Atom
    initializers: list = field(default_factory=list)
    finalizers: list = field(default_factory=list)

    def do_initializers_allow_us_to_run(self) -> bool:
        """Consult every initializer; the last one consulted decides."""
        verdict = True
        for flow in self.initializers:
            verdict = _initializer_allows(flow)
        return verdict

    def do_finalizers_allow_us_to_continue(self) -> bool:
        """Consult every finalizer; the last one consulted decides."""
        verdict = True
        for flow in self.finalizers:
            verdict = _finalizer_allows(flow, self.atom)
        return verdict