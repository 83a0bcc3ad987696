"""Context provider describing the user running the program."""

from __future__ import annotations

import getpass
import os
from collections.abc import Callable
from pathlib import Path

import platformdirs

from dotplan.contexts.provider import Context, ContextProvider, KeyValueContext
from dotplan.values import Value

try:
    import pwd
except ImportError:  # not a POSIX system
    pwd = None

__all__ = ["UserContextProvider"]

_UNKNOWN = "unknown"


def _uid() -> int:
    getuid = getattr(os, "getuid", None)
    return getuid() if getuid is not None else 0


def _username() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return _UNKNOWN


def _real_name(username: str) -> str:
    if pwd is not None:
        try:
            gecos = pwd.getpwuid(_uid()).pw_gecos
        except KeyError:
            gecos = ""
        full_name = gecos.split(",")[0].strip()
        if full_name:
            return full_name
    return username


def _directory(lookup: Callable[[], object]) -> str:
    try:
        found = lookup()
    except Exception:  # any failure to determine a directory means it is unknown
        return _UNKNOWN
    return str(found) if found else _UNKNOWN


class UserContextProvider(ContextProvider):
    """Identity and standard directories of the current user, under the prefix ``user``."""

    prefix = "user"

    def get_contexts(self) -> list[Context]:
        username = _username()
        facts = {
            "id": str(_uid()),
            "name": _real_name(username),
            "username": username,
            "home_dir": _directory(Path.home),
            "config_dir": _directory(platformdirs.user_config_dir),
            "data_dir": _directory(lambda: platformdirs.user_data_dir(roaming=True)),
            "data_local_dir": _directory(lambda: platformdirs.user_data_dir(roaming=False)),
            "document_dir": _directory(platformdirs.user_documents_dir),
        }
        return [KeyValueContext(key, Value.string(value)) for key, value in facts.items()]