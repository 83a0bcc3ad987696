"""Finding, rendering and parsing the manifests below a directory."""

from __future__ import annotations

import fnmatch
import logging
import os
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from dotplan.contexts.build import to_template_context
from dotplan.contexts.provider import Contexts
from dotplan.manifests.model import Manifest, ManifestError, get_manifest_name
from dotplan.templating import render_string

__all__ = ["load"]

logger = logging.getLogger(__name__)

_MAX_DEPTH = 9
_EXTENSIONS = (".yaml", ".yml", ".toml")


@dataclass(frozen=True)
class _Rule:
    base: Path
    pattern: str
    negate: bool
    dir_only: bool
    anchored: bool

    def matches(self, path: Path) -> bool:
        target = path.relative_to(self.base).as_posix() if self.anchored else path.name
        if fnmatch.fnmatchcase(target, self.pattern):
            return True
        if self.pattern.startswith("**/"):
            return fnmatch.fnmatchcase(path.name, self.pattern[3:])
        return False


def _parse_rule(base: Path, line: str) -> _Rule | None:
    line = line.rstrip("\r\n ")
    if not line or line.startswith("#"):
        return None
    negate = line.startswith("!")
    if negate:
        line = line[1:]
    elif line.startswith("\\"):
        line = line[1:]
    dir_only = line.endswith("/")
    line = line.rstrip("/")
    if not line:
        return None
    anchored = "/" in line
    return _Rule(base, line.lstrip("/"), negate, dir_only, anchored)


def _read_rules(directory: Path, use_gitignore: bool) -> list[_Rule]:
    names = [".gitignore", ".ignore"] if use_gitignore else [".ignore"]
    rules: list[_Rule] = []
    for name in names:
        try:
            text = (directory / name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        rules.extend(rule for rule in map(lambda l: _parse_rule(directory, l), text.splitlines()) if rule)
    return rules


def _ignored(path: Path, is_dir: bool, rules: list[_Rule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.dir_only and not is_dir:
            continue
        if rule.matches(path):
            ignored = not rule.negate
    return ignored


def _in_git_repository(directory: Path) -> bool:
    return any((candidate / ".git").exists() for candidate in (directory, *directory.parents))


def _walk_dir(
    directory: Path, depth: int, device: int, rules: list[_Rule], use_gitignore: bool
) -> Iterator[Path]:
    rules = rules + _read_rules(directory, use_gitignore)
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError as err:
        logger.debug("Cannot read directory %s: %s", directory, err)
        return

    child_depth = depth + 1
    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if _ignored(path, is_dir, rules):
            continue
        if not is_dir:
            yield path
            continue
        if child_depth >= _MAX_DEPTH:
            continue
        try:
            if entry.stat(follow_symlinks=False).st_dev != device:
                continue
        except OSError:
            continue
        yield from _walk_dir(path, child_depth, device, rules, use_gitignore)


def _candidate_files(root: Path) -> Iterator[Path]:
    if not root.is_dir():
        if root.exists():
            yield root
        return
    device = root.stat().st_dev
    yield from _walk_dir(root, 0, device, [], _in_git_repository(root.absolute()))


def _is_manifest_file(path: Path) -> bool:
    return path.name.endswith(_EXTENSIONS) and path.parent.name != "files"


def _parse(entry: Path, text: str) -> Any:
    if entry.suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return tomllib.loads(text)


def _load_one(entry: Path, contexts: Contexts) -> Manifest | None:
    try:
        contents = entry.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        contents = ""

    try:
        rendered = render_string(contents, to_template_context(contexts))
    except Exception as err:  # any template failure means the manifest is skipped
        logger.error("Failed to render manifest %s: %s", entry, err)
        return None

    if entry.suffix not in _EXTENSIONS:
        logger.error("Unrecognized file extension for manifest")
        return None

    try:
        return Manifest.from_dict(_parse(entry, rendered))
    except (yaml.YAMLError, tomllib.TOMLDecodeError, ManifestError) as err:
        logger.error("Failed to parse manifest %s: %s", entry, err)
        return None


def load(manifest_path, contexts: Contexts) -> dict[str, Manifest]:
    """Render and parse every manifest below a directory, keyed by manifest name."""
    manifest_path = Path(os.fspath(manifest_path))
    manifests: dict[str, Manifest] = {}

    for path in _candidate_files(manifest_path):
        if not _is_manifest_file(path):
            continue
        logger.info("Loading manifest %s", path.name)
        try:
            entry = path.resolve(strict=True)
        except (OSError, RuntimeError) as err:
            logger.error("Cannot resolve manifest %s: %s", path, err)
            continue

        manifest = _load_one(entry, contexts)
        if manifest is None:
            continue

        name = get_manifest_name(manifest_path, entry)
        manifest.root_dir = entry.parent
        manifest.name = name
        manifests[name] = manifest

    return manifests