"""Assembling the contexts from every provider."""

from __future__ import annotations

import logging
from typing import Any

from dotplan.config import Config
from dotplan.contexts.env import EnvContextProvider
from dotplan.contexts.provider import ContextProvider, Contexts, KeyValueContext
from dotplan.contexts.system import OSContextProvider
from dotplan.contexts.user import UserContextProvider
from dotplan.contexts.variable_include import VariableIncludeContextProvider
from dotplan.contexts.variables import VariablesContextProvider
from dotplan.values import Value

__all__ = ["build_contexts", "to_template_context"]

logger = logging.getLogger(__name__)


def _collect(provider: ContextProvider) -> dict[str, Value]:
    try:
        contexts = provider.get_contexts()
    except Exception as err:  # a failing provider contributes nothing
        logger.warning(
            "Error getting contexts from provider: %s -> %s", provider.prefix, err
        )
        contexts = []

    values: dict[str, Value] = {}
    for context in contexts:
        if isinstance(context, KeyValueContext):
            logger.debug("context %s: %s = %s", provider.prefix, context.key, context.value)
            values[context.key] = context.value
        else:
            logger.debug("context %s: %s = %r", provider.prefix, context.key, context.values)
            values[context.key] = Value.list_of(context.values)
    return dict(sorted(values.items()))


def build_contexts(config: Config) -> Contexts:
    """Gather every provider's values, keyed by prefix and then by name."""
    providers: list[ContextProvider] = [
        UserContextProvider(),
        OSContextProvider(),
        EnvContextProvider(),
        VariablesContextProvider(config),
        VariableIncludeContextProvider(config),
    ]
    contexts = {provider.prefix: _collect(provider) for provider in providers}
    return dict(sorted(contexts.items()))


def to_template_context(contexts: Contexts) -> dict[str, dict[str, Any]]:
    """Turn contexts into plain data for rendering templates."""
    return {
        prefix: {key: value.to_python() for key, value in values.items()}
        for prefix, values in contexts.items()
    }