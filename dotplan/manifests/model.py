"""Manifests: named, labelled groups of actions, and how they are found."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any

from dotplan.manifests.providers import ManifestProviderError, register_providers

__all__ = ["Manifest", "ManifestError", "resolve", "get_manifest_name"]

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """A manifest document does not have the expected shape."""


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ManifestError(f"'{key}' must be a string")
    return value


def _str_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ManifestError(f"'{key}' must be a list of strings")
    return list(value)


@dataclass
class Manifest:
    """A manifest as read from a file."""

    where: str | None = None
    name: str | None = None
    labels: list[str] = field(default_factory=list)
    depends: list[str] = field(default_factory=list)
    actions: list[Any] = field(default_factory=list)
    root_dir: Path | None = None
    dag_index: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        """Build a manifest from a parsed document; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ManifestError("a manifest must be a mapping")
        actions = data.get("actions")
        if actions is None:
            actions = []
        elif not isinstance(actions, list):
            raise ManifestError("'actions' must be a list")
        return cls(
            where=_optional_str(data, "where"),
            name=_optional_str(data, "name"),
            labels=_str_list(data, "labels"),
            depends=_str_list(data, "depends"),
            actions=list(actions),
        )


def resolve(uri: str) -> Path:
    """Find the manifest directory for a location using the first provider that can."""
    for provider in register_providers():
        if not provider.looks_familiar(uri):
            continue
        try:
            directory = provider.resolve(uri)
        except ManifestProviderError:
            continue
        return directory.resolve(strict=True)

    logger.error("Failed to find manifests at %s", uri)
    raise ManifestProviderError(f"Failed to find manifests at {uri}")


def _trim_end(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def get_manifest_name(manifest_directory, location) -> str:
    """Name a manifest by its path below the manifest directory, joined with dots."""
    if not isinstance(location, PurePath):
        location = Path(location)
    if not isinstance(manifest_directory, PurePath):
        manifest_directory = Path(manifest_directory)

    local_name = location.relative_to(manifest_directory)
    name = ".".join(local_name.parts)
    name = _trim_end(name, ".yaml")
    name = _trim_end(name, ".yml")
    return _trim_end(name, ".main")