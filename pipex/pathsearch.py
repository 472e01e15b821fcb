"""Locating commands through the PATH variable of an environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.textutil import split


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be located on the search path."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"command not found: {command!r}")


def find_path_variable(env: Mapping[str, str]) -> str | None:
    """Return the search path from ``env``.

    Any variable whose name begins with ``PATH`` is accepted; when several
    match, the last one in the mapping wins. Returns None if none match.
    """
    value = None
    for name, setting in env.items():
        if name.startswith("PATH"):
            value = setting
    return value


def search_path(directories: Iterable[str], command: str) -> str | None:
    """Return the first ``directory/command`` that exists, or None."""
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str]) -> str:
    """Resolve the program named by the first word of ``command``.

    The name is always looked up in the search directories of ``env``.
    Raises CommandNotFoundError when it cannot be found.
    """
    words = split(command, " ")
    if not words:
        raise CommandNotFoundError(command)
    path_value = find_path_variable(env)
    if path_value is None:
        raise CommandNotFoundError(words[0])
    found = search_path(split(path_value, ":"), words[0])
    if found is None:
        raise CommandNotFoundError(words[0])
    return found