"""Running a chain of commands connected by pipes, from an infile to an outfile."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from typing import IO, Callable, Iterable, Mapping, Sequence

from .errors import (
    COMMAND_NOT_FOUND,
    INVALID_ARGUMENTS,
    USAGE_BONUS,
    USAGE_MANDATORY,
    CommandNotFoundError,
    UsageError,
    print_msg,
)
from .files import DEFAULT_PROMPT, collect_here_doc, detect_here_doc, open_infile, open_outfile
from .paths import resolve_command

HERE_DOC_LABEL = "here_doc_tmp"


def _report(label: object, exc: OSError) -> None:
    sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    sys.stderr.flush()


def _spawn(
    arg: str,
    stdin: object,
    stdout: object,
    env: Mapping[str, str] | None,
) -> subprocess.Popen | None:
    try:
        program, argv = resolve_command(arg, env)
    except CommandNotFoundError as exc:
        print_msg(COMMAND_NOT_FOUND, exc.command or " ")
        return None
    try:
        return subprocess.Popen(
            argv,
            executable=program,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        _report(argv[0] if "/" in arg else "Execve", exc)
        return None


def _execute(
    open_input: Callable[[], IO[bytes]],
    input_label: object,
    commands: Iterable[str],
    outfile: str | os.PathLike[str],
    append: bool,
    env: Mapping[str, str] | None,
) -> list[int]:
    commands = list(commands)
    if not commands:
        raise ValueError("at least one command is required")
    last = len(commands) - 1
    procs: list[subprocess.Popen | None] = []
    upstream: IO[bytes] | None = None
    for index, arg in enumerate(commands):
        with ExitStack() as stack:
            stdin: object = subprocess.DEVNULL
            if upstream is not None:
                stdin = upstream
                stack.callback(upstream.close)
            stdout: object = subprocess.PIPE
            ready = True
            if index == 0:
                try:
                    stdin = stack.enter_context(open_input())
                except OSError as exc:
                    _report(input_label, exc)
                    ready = False
            if index == last:
                try:
                    stdout = stack.enter_context(open_outfile(outfile, append))
                except OSError as exc:
                    _report(outfile, exc)
                    ready = False
            proc = _spawn(arg, stdin, stdout, env) if ready else None
        procs.append(proc)
        upstream = proc.stdout if proc is not None and index != last else None
    return [1 if proc is None else proc.wait() for proc in procs]


def run_pipeline(
    infile: str | os.PathLike[str],
    commands: Iterable[str],
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Run ``commands`` piped together, reading ``infile`` and truncating ``outfile``.

    Returns the exit status of each command; a command that could not be
    started counts as status 1 and its successor reads empty input.
    """
    return _execute(lambda: open_infile(infile), infile, commands, outfile, False, env)


def run_here_doc(
    limiter: str,
    commands: Iterable[str],
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
    source: IO[str] | None = None,
    prompt: str | None = DEFAULT_PROMPT,
) -> list[int]:
    """Run ``commands`` on a here-document ended by ``limiter``, appending to ``outfile``.

    Returns the exit status of each command.
    """
    text = collect_here_doc(limiter, source, prompt)

    def open_input() -> IO[bytes]:
        handle = tempfile.TemporaryFile()
        handle.write(text.encode())
        handle.seek(0)
        return handle

    return _execute(open_input, HERE_DOC_LABEL, commands, outfile, True, env)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print_msg(INVALID_ARGUMENTS, USAGE_MANDATORY)
        return 0
    run_pipeline(args[0], args[1:3], args[3])
    return 0


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd ... cmd outfile`` or ``here_doc LIMITER cmd ... cmd outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print_msg(INVALID_ARGUMENTS, USAGE_BONUS)
        return 0
    try:
        here_doc = detect_here_doc(args)
    except UsageError as exc:
        print_msg(INVALID_ARGUMENTS, exc.usage)
        return exc.exit_status
    if here_doc:
        run_here_doc(args[1], args[2:-1], args[-1])
    else:
        run_pipeline(args[0], args[1:-1], args[-1])
    return 0