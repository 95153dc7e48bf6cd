"""Error types and messages reported on standard error."""

from __future__ import annotations

import sys
from typing import IO

INVALID_ARGUMENTS = "Invalid arguments. "
USAGE_MANDATORY = "Ex: ./pipex infile cmd1 cmd2 outfile"
USAGE_BONUS = "Ex: ./pipex infile cmd ... cmd outfile"
USAGE_HERE_DOC = "Ex: ./pipex here_doc LIMITER cmd cmd file"
COMMAND_NOT_FOUND = "command not found : "


class PipexError(Exception):
    """Base error; ``exit_status`` is the status the program exits with."""

    exit_status = 1


class UsageError(PipexError):
    """The command line does not have the expected shape."""

    def __init__(self, usage: str = USAGE_MANDATORY) -> None:
        self.usage = usage
        super().__init__(format_message(INVALID_ARGUMENTS, usage))


class CommandNotFoundError(PipexError):
    """A command could not be located on the search path."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(format_message(COMMAND_NOT_FOUND, command))


def format_message(prefix: str | None, detail: str | None) -> str:
    """Join two message parts; a missing part gives an empty message."""
    if prefix is None or detail is None:
        return ""
    return prefix + detail


def print_msg(prefix: str | None, detail: str | None, stream: IO[str] | None = None) -> None:
    """Write the joined message and a newline to ``stream`` (standard error by default)."""
    out = sys.stderr if stream is None else stream
    out.write(format_message(prefix, detail) + "\n")
    out.flush()