"""Locating the executable for a command line argument."""

from __future__ import annotations

import os
from typing import Iterable, Mapping

from .errors import CommandNotFoundError
from .textutils import split_words


def search_dirs(env: Mapping[str, str] | None) -> list[str]:
    """Return the directories listed in the PATH variable of ``env``."""
    environment = os.environ if env is None else env
    value = environment.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def find_executable(dirs: Iterable[str], name: str) -> str:
    """Return the first ``dir/name`` that is executable.

    Raises CommandNotFoundError when no directory holds one.
    """
    if name:
        for directory in dirs:
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
    raise CommandNotFoundError(name)


def parse_command(arg: str) -> list[str]:
    """Split a command argument into words on spaces.

    Raises CommandNotFoundError when the argument holds no word.
    """
    words = split_words(arg, " ")
    if not words:
        raise CommandNotFoundError("")
    return words


def resolve_command(arg: str, env: Mapping[str, str] | None) -> tuple[str, list[str]]:
    """Return the program path and argument vector for a command argument.

    An argument containing a slash anywhere names its program directly;
    otherwise the program is looked up on the PATH of ``env``.
    """
    argv = parse_command(arg)
    if "/" in arg:
        return argv[0], argv
    return find_executable(search_dirs(env), argv[0]), argv