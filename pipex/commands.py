"""Finding a command on the search path and building its argument list."""

from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional, Tuple

__all__ = [
    "PipexError",
    "check_environment",
    "path_directories",
    "search_path",
    "build_argv",
]


class PipexError(Exception):
    """A failure that stops a pipeline stage."""


def check_environment(env: Mapping[str, str]) -> None:
    """Raise ``PipexError`` unless ``env`` is non-empty and defines ``PATH``."""
    if not env:
        raise PipexError("Error: No environment variables")
    if "PATH" not in env:
        raise PipexError("Error: No PATH variable")


def path_directories(env: Mapping[str, str]) -> List[str]:
    """Return the directories named by ``PATH``, skipping empty entries."""
    try:
        value = env["PATH"]
    except KeyError:
        raise PipexError("Error: No PATH variable") from None
    return [entry for entry in value.split(":") if entry]


def search_path(directories: Iterable[str], command: str) -> Optional[str]:
    """Return ``directory/command`` for the first directory where it is executable."""
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def build_argv(command: str, env: Mapping[str, str]) -> Tuple[str, List[str]]:
    """Split ``command`` on spaces and locate its program on ``PATH``.

    Returns the program's path and the argument list, whose first item is
    the command name as written.
    """
    arguments = [word for word in command.split(" ") if word]
    if not arguments:
        raise PipexError("Error: Failed splitting the command into arguments")
    path = search_path(path_directories(env), arguments[0])
    if path is None:
        raise PipexError("Error: Invalid path")
    return path, arguments