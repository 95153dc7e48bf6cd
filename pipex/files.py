"""Opening the pipeline's input and output files and reading here-documents."""

from __future__ import annotations

import os
import sys
from typing import IO, Sequence

from .errors import USAGE_HERE_DOC, UsageError

HERE_DOC = "here_doc"
DEFAULT_PROMPT = "pipe heredoc> "
OUTFILE_MODE = 0o644


def detect_here_doc(argv: Sequence[str]) -> bool:
    """Tell whether the arguments (program name excluded) ask for a here-document.

    A here-document needs a limiter, at least two commands and an outfile;
    fewer arguments raise UsageError.
    """
    if not argv or argv[0] != HERE_DOC:
        return False
    if len(argv) < 5:
        raise UsageError(USAGE_HERE_DOC)
    return True


def _is_limiter(line: str, limiter: str) -> bool:
    return len(line) == len(limiter) + 1 and line.startswith(limiter)


def collect_here_doc(
    limiter: str,
    source: IO[str] | None = None,
    prompt: str | None = DEFAULT_PROMPT,
) -> str:
    """Read lines from ``source`` until the limiter line and return them joined.

    The limiter line itself is not included. Before each line the prompt,
    if any, is written to standard output. End of input also ends the text.
    """
    stream = sys.stdin if source is None else source
    lines: list[str] = []
    while True:
        if prompt:
            sys.stdout.write(prompt)
            sys.stdout.flush()
        line = stream.readline()
        if not line or _is_limiter(line, limiter):
            break
        lines.append(line)
    return "".join(lines)


def open_infile(path: str | os.PathLike[str]) -> IO[bytes]:
    """Open the pipeline's input file for reading; OSError if it cannot be opened."""
    return open(path, "rb")


def open_outfile(path: str | os.PathLike[str], append: bool = False) -> IO[bytes]:
    """Open (creating it with mode 0644) the pipeline's output file.

    The file is truncated unless ``append`` is true. OSError if it cannot be opened.
    """
    flags = os.O_CREAT | os.O_RDWR | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(path, flags, OUTFILE_MODE)
    return os.fdopen(fd, "wb")