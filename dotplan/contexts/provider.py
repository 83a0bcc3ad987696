"""Context entries and the interface of the providers that produce them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dotplan.values import Value

__all__ = ["Contexts", "KeyValueContext", "ListContext", "Context", "ContextProvider"]

Contexts = dict[str, dict[str, Value]]


@dataclass
class KeyValueContext:
    """A single named value."""

    key: str
    value: Value

    def __post_init__(self) -> None:
        self.value = Value.from_python(self.value)


@dataclass
class ListContext:
    """A named list of values."""

    key: str
    values: tuple[Value, ...]

    def __init__(self, key: str, values: Any) -> None:
        self.key = key
        self.values = tuple(Value.from_python(item) for item in values)


Context = KeyValueContext | ListContext


class ContextProvider(ABC):
    """A source of context entries, all filed under one prefix."""

    prefix: str = ""

    @abstractmethod
    def get_contexts(self) -> list[Context]:
        """Return the entries this provider knows about."""