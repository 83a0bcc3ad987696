"""Context provider for variables included from files and DNS TXT records."""

from __future__ import annotations

import datetime
import json
import logging
import math
import re
import tomllib
from dataclasses import dataclass
from typing import Any
from urllib.parse import SplitResult, urlsplit

import dns.resolver
import yaml

from dotplan.config import Config
from dotplan.contexts.provider import Context, ContextProvider, KeyValueContext
from dotplan.values import Value

__all__ = [
    "VariableIncludeContextProvider",
    "txt_record_values",
    "toml_values",
    "yaml_values",
]

logger = logging.getLogger(__name__)

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _parse_url(url: str) -> SplitResult:
    parts = urlsplit(url)
    if not parts.scheme:
        raise ValueError(f"relative URL without a base: {url}")
    return parts


def _toml_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else json.dumps(key, ensure_ascii=False)


def _toml_text(value: Any) -> str:
    """Render a value as TOML writes it."""
    if value is None:
        raise ValueError("null has no TOML representation")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_toml_text(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        pairs = ", ".join(
            f"{_toml_key(str(key))} = {_toml_text(item)}" for key, item in value.items()
        )
        return "{ " + pairs + " }"
    raise ValueError(f"cannot represent {type(value).__name__} in TOML")


def _flatten(values: Any) -> dict[str, str]:
    if not isinstance(values, dict) or not all(isinstance(key, str) for key in values):
        raise ValueError("included variables must be a mapping with string keys")
    return {key: _toml_text(value) for key, value in values.items()}


def txt_record_values(url: str) -> dict[str, str]:
    """Read ``key=value`` pairs from the TXT records of the URL's host."""
    host = _parse_url(url).hostname
    if not host:
        raise ValueError("Failed to parse host")

    values: dict[str, str] = {}
    for record in dns.resolver.resolve(host, "TXT"):
        text = b"".join(record.strings).decode("utf-8", errors="replace")
        key, separator, value = text.partition("=")
        if separator:
            values[key] = value
    return values


def toml_values(url: str) -> dict[str, str]:
    """Read the top-level keys of the TOML file at the URL's path."""
    path = _parse_url(url).path
    with open(path, encoding="utf-8") as handle:
        return _flatten(tomllib.loads(handle.read()))


def yaml_values(url: str) -> dict[str, str]:
    """Read the top-level keys of the YAML file at the URL's path."""
    path = _parse_url(url).path
    with open(path, encoding="utf-8") as handle:
        return _flatten(yaml.safe_load(handle.read()))


_READERS = {
    "dns+txt": txt_record_values,
    "file+toml": toml_values,
    "file+yaml": yaml_values,
}


@dataclass
class VariableIncludeContextProvider(ContextProvider):
    """Variables from the configured includes, under the prefix ``include_variables``."""

    config: Config
    prefix = "include_variables"

    def get_contexts(self) -> list[Context]:
        values: dict[str, str] = {}
        for include in self.config.include_variables or []:
            scheme = _parse_url(include).scheme
            reader = _READERS.get(scheme)
            if reader is None:
                raise ValueError(f"Unknown variable include scheme: {scheme}")
            values.update(reader(include))

        return [
            KeyValueContext(key, Value.string(value)) for key, value in sorted(values.items())
        ]