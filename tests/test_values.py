import math
from pathlib import Path

import pytest

from dotplan.values import Number, Value, ValueKind


class _EmptyPath:
    def __fspath__(self):
        return ""


def num(n):
    return Value.number(Number(n))


def test_from_string():
    assert Value.from_python("John Sheppard") == Value.string("John Sheppard")
    assert Value.from_python("Elizabeth Weir") == Value.string("Elizabeth Weir")
    assert Value.from_python(_EmptyPath()) == Value.string("")
    assert Value.from_python("Samantha Carter") == Value.string("Samantha Carter")
    assert Value.from_python(b"Jennifer Keller") == Value.string("Jennifer Keller")


def test_from_path_and_invalid_bytes():
    assert Value.from_python(Path("somewhere")) == Value.string("somewhere")
    assert Value.from_python(b"\xff\xfe") == Value.string("unknown")


def test_from_vec():
    assert Value.from_python(["Aiden Ford", "Rodney McKay", "Ronon Dex"]) == Value.list_of(
        [
            Value.string("Aiden Ford"),
            Value.string("Rodney McKay"),
            Value.string("Ronon Dex"),
        ]
    )


@pytest.mark.parametrize(
    "small, large",
    [(2, 3), (2.0, 3.0), (2, 3.0), (2.0, 3), (-3, 2), (-3, 2.0)],
)
def test_number_compare(small, large):
    assert num(small) == num(small)
    assert num(large) > num(small)
    assert num(small) < num(large)
    assert num(small) <= num(large)
    assert num(large) >= num(small)


@pytest.mark.parametrize("a, b", [(2, 2), (2, 2.0), (2.0, 2), (2.0, 2.0)])
def test_number_equal_across_variants(a, b):
    assert num(a) == num(b)
    assert not num(a) < num(b)
    assert not num(a) > num(b)


def test_nan_sorts_last_and_is_not_equal():
    nan = num(float("nan"))
    assert nan > num(1.0)
    assert nan > num(5)
    assert num(5) < nan
    assert not nan == nan
    assert nan <= nan
    assert not nan < nan


def test_debug():
    assert repr(Value.null()) == "Null"
    assert repr(Value.string("Richard Woolsey")) == 'String("Richard Woolsey")'
    assert (
        repr(Value.from_python(["Aiden Ford", "Rodney McKay", "Ronon Dex"]))
        == 'List [String("Aiden Ford"), String("Rodney McKay"), String("Ronon Dex")]'
    )
    assert repr(num(2)) == "Number(2)"
    assert repr(num(2.0)) == "Number(2)"
    assert repr(Number(2)) == "Number(2)"


def test_debug_escapes_quotes():
    assert repr(Value.string('say "hi"\n')) == 'String("say \\"hi\\"\\n")'


def test_to_string():
    assert str(Value.null()) == "null"
    assert str(Value.string("Thor")) == "Thor"
    assert str(num(2)) == "2"
    assert str(num(2.5)) == "2.5"
    assert str(Value.from_python(["a", 1, None])) == "a,1,null"


def test_float_display_never_uses_exponent():
    assert str(Number(1e-7)) == "0.0000001"
    assert str(Number(1e20)) == "100000000000000000000"
    assert str(Number(float("nan"))) == "NaN"
    assert str(Number(float("inf"))) == "inf"
    assert str(Number(float("-inf"))) == "-inf"


def test_ordering_between_kinds():
    assert Value.null() < Value.string("")
    assert Value.string("zzz") < num(0)
    assert num(10**6) < Value.list_of([])
    assert Value.null() == Value.null()


def test_list_ordering_is_lexicographic():
    assert Value.from_python([1, 2]) < Value.from_python([1, 3])
    assert Value.from_python([1]) < Value.from_python([1, 0])
    assert Value.from_python(["b"]) > Value.from_python(["a", "z"])


@pytest.mark.parametrize("obj", [None, "text", 7, -7, 2.5, ["a", [1, None]], []])
def test_round_trip(obj):
    assert Value.from_python(obj).to_python() == obj


def test_kind_reported():
    assert Value.from_python(None).kind is ValueKind.NULL
    assert Value.from_python([1]).kind is ValueKind.LIST


def test_rejects_booleans_and_mappings():
    with pytest.raises(TypeError):
        Value.from_python(True)
    with pytest.raises(TypeError):
        Value.from_python({"a": 1})
    with pytest.raises(TypeError):
        Number("1")


def test_rejects_integers_outside_64_bits():
    with pytest.raises(OverflowError):
        Number(2**64)
    with pytest.raises(OverflowError):
        Number(-(2**63) - 1)
    assert Number(2**64 - 1).value == 2**64 - 1


def test_negative_zero_display():
    assert str(Number(-0.0)) == "-0"
    assert math.copysign(1.0, Number(-0.0).value) < 0