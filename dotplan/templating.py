"""Template rendering for manifests, with the helper functions they may call."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jinja2

__all__ = ["read_file_contents", "register_functions", "render_string"]


def read_file_contents(path: Any = None) -> str:
    """Return the contents of a file with surrounding whitespace removed."""
    if path is None:
        raise ValueError("Argument 'path' not set")
    if not isinstance(path, str):
        raise TypeError(f"Path: '{path}'. Error: Cannot convert argument 'path' to str")
    with open(path, encoding="utf-8") as handle:
        return handle.read().strip()


def register_functions(environment: jinja2.Environment) -> None:
    """Make the helper functions available to templates of the environment."""
    environment.globals["read_file_contents"] = read_file_contents


def render_string(template: str, context: Mapping[str, Any]) -> str:
    """Render a template string against a context; undefined names are errors."""
    environment = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    register_functions(environment)
    return environment.from_string(template).render(dict(context))