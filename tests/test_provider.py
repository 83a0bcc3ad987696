import pytest

from dotplan.contexts.provider import ContextProvider, KeyValueContext, ListContext
from dotplan.values import Value


def test_key_value_context_coerces_plain_values():
    context = KeyValueContext("username", "rawkode")
    assert context.key == "username"
    assert context.value == Value.string("rawkode")


def test_key_value_context_keeps_values():
    value = Value.number(7)
    assert KeyValueContext("count", value).value is value


def test_list_context_coerces_items():
    context = ListContext("crew", ["Aiden Ford", "Rodney McKay"])
    assert context.values == (Value.string("Aiden Ford"), Value.string("Rodney McKay"))


def test_contexts_compare_by_content():
    assert KeyValueContext("a", "b") == KeyValueContext("a", Value.string("b"))
    assert ListContext("a", ["b"]) == ListContext("a", [Value.string("b")])
    assert KeyValueContext("a", "b") != KeyValueContext("a", "c")


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        ContextProvider()


def test_concrete_provider():
    class Fixed(ContextProvider):
        prefix = "fixed"

        def get_contexts(self):
            return [KeyValueContext("k", "v")]

    provider = Fixed()
    assert provider.prefix == "fixed"
    assert provider.get_contexts() == [KeyValueContext("k", "v")]