"""Locate executables on the search path and prepare their argument lists."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Optional

from pipex.textops import split


class PathNotFoundError(LookupError):
    """Raised when the environment has no PATH variable."""


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be resolved to an executable file."""


def get_path(env: Mapping[str, str]) -> str:
    """Return the value of PATH from ``env``."""
    try:
        return env["PATH"]
    except KeyError:
        raise PathNotFoundError("PATH not found") from None


def check_cmd(paths: Iterable[str], cmd: str) -> Optional[str]:
    """Return the first ``directory/cmd`` that is executable, or None."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def find_path(cmd: str, env: Mapping[str, str]) -> Optional[str]:
    """Resolve ``cmd`` to an executable path.

    Names starting with ``/`` or ``.`` are checked as given; any other name
    is looked up in the directories listed in PATH. Returns None when no
    executable is found and raises PathNotFoundError when PATH is missing.
    """
    if cmd.startswith(("/", ".")):
        return cmd if os.access(cmd, os.F_OK | os.X_OK) else None
    return check_cmd(split(get_path(env), ":"), cmd)


def resolve_command(cmd: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split a command line on spaces and resolve its program.

    Returns the executable path and the argument list, whose first item is
    the program name as written.
    """
    args = split(cmd, " ")
    if not args:
        raise CommandNotFoundError(f"empty command: {cmd!r}")
    path = find_path(args[0], env)
    if path is None:
        raise CommandNotFoundError(args[0])
    return path, args