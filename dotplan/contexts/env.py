"""Context provider for the process environment."""

from __future__ import annotations

import os

from dotplan.contexts.provider import Context, ContextProvider, KeyValueContext
from dotplan.values import Value

__all__ = ["EnvContextProvider"]


class EnvContextProvider(ContextProvider):
    """Every environment variable, under the prefix ``env``."""

    prefix = "env"

    def get_contexts(self) -> list[Context]:
        return [KeyValueContext(key, Value.string(value)) for key, value in os.environ.items()]