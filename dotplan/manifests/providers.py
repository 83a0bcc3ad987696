"""Manifest providers turn a location string into a local directory of manifests."""

from __future__ import annotations

import logging
import re
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import platformdirs

__all__ = [
    "ManifestProviderError",
    "ManifestProvider",
    "GitConfig",
    "GitManifestProvider",
    "LocalManifestProvider",
    "register_providers",
]

logger = logging.getLogger(__name__)

_GIT_URL = re.compile(r"^(https|git|ssh)://")


class ManifestProviderError(Exception):
    """A provider could not resolve a location to a directory."""

    def __init__(self, message: str = "no resolution") -> None:
        super().__init__(message)


class ManifestProvider(ABC):
    """Takes a location and returns the directory holding the manifests."""

    @abstractmethod
    def looks_familiar(self, url: str) -> bool:
        """Whether this provider might be able to resolve the location."""

    @abstractmethod
    def resolve(self, url: str) -> Path:
        """Return the directory with the manifests, or raise ManifestProviderError."""


@dataclass(frozen=True)
class GitConfig:
    """A repository location split into repository, branch and sub-path."""

    repository: str
    branch: str | None = None
    path: str | None = None


def _git(*args: str) -> bool:
    try:
        completed = subprocess.run(["git", *args], capture_output=True, text=True)
    except OSError as err:
        logger.error("Failed to run git: %s", err)
        return False
    if completed.returncode != 0:
        logger.error("git %s failed: %s", args[0], (completed.stderr or "").strip())
        return False
    return True


class GitManifestProvider(ManifestProvider):
    """Clones or updates a Git repository in the user's cache directory."""

    def looks_familiar(self, url: str) -> bool:
        return _GIT_URL.match(url) is not None

    def resolve(self, url: str) -> Path:
        config = self.parse_config_url(url)
        cache_root = platformdirs.user_cache_dir()
        if not cache_root:
            raise ManifestProviderError()
        cache_path = (
            Path(cache_root)
            / "comtrya"
            / "manifests"
            / "git"
            / self.clean_git_url(config.repository)
        )

        logger.info("Syncing Git repository %s to %s", url, cache_path)

        if not (cache_path / ".git").exists():
            clone = ["clone"]
            if config.branch is not None:
                clone += ["--branch", config.branch]
            clone += [config.repository, str(cache_path)]
            if not _git(*clone):
                logger.error("Failed to bootstrap repository %s", config.repository)
                raise ManifestProviderError()

        if not _git("-C", str(cache_path), "pull", "--ff-only"):
            logger.error("Failed to sync repository %s", config.repository)
            raise ManifestProviderError()

        return cache_path / (config.path or "")

    def parse_config_url(self, uri: str) -> GitConfig:
        """Split ``repo#branch:path`` into its parts; branch and path are optional."""
        repository, hash_sign, parts = uri.partition("#")
        if not hash_sign:
            return GitConfig(repository=uri)

        reference, colon, path = parts.partition(":")
        if not colon:
            return GitConfig(repository=repository, branch=parts)
        return GitConfig(
            repository=repository,
            branch=reference or None,
            path=path or None,
        )

    def clean_git_url(self, uri: str) -> str:
        """Turn a repository URL into a name usable as a directory."""
        cleaned = uri.replace("https", "").replace("http", "")
        for char in ":./":
            cleaned = cleaned.replace(char, "")
        return cleaned


class LocalManifestProvider(ManifestProvider):
    """The last resort: treats the location as a path on this machine."""

    def looks_familiar(self, url: str) -> bool:
        return True

    def resolve(self, url: str) -> Path:
        try:
            return Path(url).resolve(strict=True)
        except (OSError, RuntimeError) as err:
            raise ManifestProviderError() from err


def register_providers() -> list[ManifestProvider]:
    """Every provider, in the order they are consulted."""
    return [GitManifestProvider(), LocalManifestProvider()]