"""Context provider describing the operating system."""

from __future__ import annotations

import os
import platform
import socket
import struct
import sys

from dotplan.contexts.provider import Context, ContextProvider, KeyValueContext
from dotplan.values import Value

__all__ = ["OSContextProvider"]

_NAMES = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
}

_BSDS = ("freebsd", "openbsd", "netbsd", "dragonfly")

_DISTRIBUTIONS = {
    "macos": "Mac OS",
    "windows": "Windows",
    "freebsd": "FreeBSD",
    "openbsd": "OpenBSD",
    "netbsd": "NetBSD",
    "dragonfly": "DragonFly BSD",
}


def _os_name(platform_id: str) -> str:
    if platform_id.startswith("linux"):
        return "linux"
    if platform_id in _NAMES:
        return _NAMES[platform_id]
    for bsd in _BSDS:
        if platform_id.startswith(bsd):
            return bsd
    return platform_id


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def _describe(name: str) -> tuple[str, str, str, str]:
    """Return distribution, codename, version and edition."""
    if name == "linux":
        release = _os_release()
        return (
            release.get("NAME") or "Linux",
            release.get("VERSION_CODENAME") or "unknown",
            release.get("VERSION_ID") or "Unknown",
            release.get("VARIANT") or "unknown",
        )
    if name == "macos":
        version = platform.mac_ver()[0] or "Unknown"
        return _DISTRIBUTIONS[name], "unknown", version, "unknown"
    if name == "windows":
        edition = platform.win32_edition() or "unknown"
        return _DISTRIBUTIONS[name], "unknown", platform.version() or "Unknown", edition
    return (
        _DISTRIBUTIONS.get(name, "Unknown"),
        "unknown",
        platform.release() or "Unknown",
        "unknown",
    )


def _bitness() -> str:
    bits = struct.calcsize("P") * 8
    return f"{bits}-bit" if bits in (32, 64) else "unknown bitness"


class OSContextProvider(ContextProvider):
    """Host name, operating system and release facts, under the prefix ``os``."""

    prefix = "os"

    def get_contexts(self) -> list[Context]:
        name = _os_name(sys.platform)
        distribution, codename, version, edition = _describe(name)
        facts = {
            "hostname": socket.gethostname(),
            "family": "windows" if os.name == "nt" else "unix",
            "name": name,
            "distribution": distribution,
            "codename": codename,
            "bitness": _bitness(),
            "version": version,
            "edition": edition,
        }
        return [KeyValueContext(key, Value.string(value)) for key, value in facts.items()]