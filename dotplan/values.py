"""Context values: null, strings, numbers and lists of values."""

from __future__ import annotations

import math
import os
from decimal import Decimal
from enum import IntEnum
from typing import Any

__all__ = ["Number", "Value", "ValueKind"]

_I64_MIN = -(2**63)
_U64_MAX = 2**64 - 1


def _format_float(number: float) -> str:
    """Format a float the way a plain decimal display does: never in exponent form."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        text = str(int(number))
        if text == "0" and math.copysign(1.0, number) < 0:
            return "-0"
        return text
    return format(Decimal(repr(number)), "f")


def _compare_floats(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    # At least one side is NaN; NaN sorts last.
    if not math.isnan(a):
        return -1
    if not math.isnan(b):
        return 1
    return 0


def _debug_str(text: str) -> str:
    escapes = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "\\": "\\\\", '"': '\\"', "\0": "\\0"}
    parts = []
    for char in text:
        if char in escapes:
            parts.append(escapes[char])
        elif char.isprintable():
            parts.append(char)
        else:
            parts.append(f"\\u{{{ord(char):x}}}")
    return '"' + "".join(parts) + '"'


class Number:
    """A signed or unsigned 64-bit integer, or a float."""

    __slots__ = ("_value",)

    def __init__(self, value: int | float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"a number must be an int or a float, not {type(value).__name__}")
        if isinstance(value, int) and not _I64_MIN <= value <= _U64_MAX:
            raise OverflowError(f"integer {value} does not fit in 64 bits")
        self._value = value

    @property
    def value(self) -> int | float:
        return self._value

    def __str__(self) -> str:
        if isinstance(self._value, int):
            return str(self._value)
        return _format_float(self._value)

    def __repr__(self) -> str:
        return f"Number({self})"

    def _compare(self, other: Number) -> int:
        a, b = self._value, other._value
        if isinstance(a, int) and isinstance(b, int):
            return (a > b) - (a < b)
        return _compare_floats(float(a), float(b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        a, b = self._value, other._value
        if isinstance(a, int) and isinstance(b, int):
            return a == b
        return float(a) == float(b)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._compare(other) >= 0


class ValueKind(IntEnum):
    """The variants of a value, in their sort order."""

    NULL = 0
    STRING = 1
    NUMBER = 2
    LIST = 3


class Value:
    """A context value: null, a string, a number or a list of values."""

    __slots__ = ("_kind", "_data")

    def __init__(self, kind: ValueKind, data: Any = None) -> None:
        kind = ValueKind(kind)
        if kind is ValueKind.NULL:
            if data is not None:
                raise ValueError("a null value carries no data")
        elif kind is ValueKind.STRING:
            if not isinstance(data, str):
                raise TypeError("a string value needs a str")
        elif kind is ValueKind.NUMBER:
            if not isinstance(data, Number):
                data = Number(data)
        else:
            data = tuple(Value.from_python(item) for item in data)
        self._kind = kind
        self._data = data

    @classmethod
    def null(cls) -> Value:
        return cls(ValueKind.NULL)

    @classmethod
    def string(cls, text: str) -> Value:
        return cls(ValueKind.STRING, text)

    @classmethod
    def number(cls, number: int | float | Number) -> Value:
        return cls(ValueKind.NUMBER, number)

    @classmethod
    def list_of(cls, items) -> Value:
        return cls(ValueKind.LIST, items)

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def data(self) -> None | str | Number | tuple[Value, ...]:
        return self._data

    @classmethod
    def from_python(cls, obj: Any) -> Value:
        """Build a value from a plain Python object such as one loaded from YAML."""
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return cls.null()
        if isinstance(obj, bool):
            raise TypeError("booleans are not context values")
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, (Number, int, float)):
            return cls.number(obj)
        if isinstance(obj, (bytes, bytearray)):
            try:
                return cls.string(bytes(obj).decode("utf-8"))
            except UnicodeDecodeError:
                return cls.string("unknown")
        if isinstance(obj, os.PathLike):
            path = os.fspath(obj)
            return cls.from_python(path) if isinstance(path, bytes) else cls.string(path)
        if isinstance(obj, (list, tuple)):
            return cls.list_of(obj)
        raise TypeError(f"cannot make a context value from {type(obj).__name__}")

    def to_python(self) -> Any:
        """Return the plain Python form: None, str, int, float or list."""
        if self._kind is ValueKind.NULL:
            return None
        if self._kind is ValueKind.STRING:
            return self._data
        if self._kind is ValueKind.NUMBER:
            return self._data.value
        return [item.to_python() for item in self._data]

    def __str__(self) -> str:
        if self._kind is ValueKind.NULL:
            return "null"
        if self._kind is ValueKind.STRING:
            return self._data
        if self._kind is ValueKind.NUMBER:
            return str(self._data)
        return ",".join(str(item) for item in self._data)

    def __repr__(self) -> str:
        if self._kind is ValueKind.NULL:
            return "Null"
        if self._kind is ValueKind.STRING:
            return f"String({_debug_str(self._data)})"
        if self._kind is ValueKind.NUMBER:
            return f"Number({self._data})"
        return "List [" + ", ".join(repr(item) for item in self._data) + "]"

    def _compare(self, other: Value) -> int:
        if self._kind is not other._kind:
            return (self._kind > other._kind) - (self._kind < other._kind)
        if self._kind is ValueKind.NULL:
            return 0
        if self._kind is ValueKind.STRING:
            return (self._data > other._data) - (self._data < other._data)
        if self._kind is ValueKind.NUMBER:
            return self._data._compare(other._data)
        for mine, theirs in zip(self._data, other._data):
            result = mine._compare(theirs)
            if result:
                return result
        return (len(self._data) > len(other._data)) - (len(self._data) < len(other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._kind is not other._kind:
            return False
        if self._kind is ValueKind.LIST:
            return len(self._data) == len(other._data) and all(
                mine == theirs for mine, theirs in zip(self._data, other._data)
            )
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) >= 0