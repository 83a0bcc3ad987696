"""Context provider for variables set in the configuration."""

from __future__ import annotations

from dataclasses import dataclass

from dotplan.config import Config
from dotplan.contexts.provider import Context, ContextProvider, KeyValueContext
from dotplan.values import Value

__all__ = ["VariablesContextProvider"]


@dataclass
class VariablesContextProvider(ContextProvider):
    """The configuration's variables, in key order, under the prefix ``variables``."""

    config: Config
    prefix = "variables"

    def get_contexts(self) -> list[Context]:
        return [
            KeyValueContext(key, Value.string(value))
            for key, value in sorted(self.config.variables.items())
        ]