"""Run two shell-style commands joined by a pipe, between an input file and
an output file, as in ``< infile first | second > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Mapping, Optional, Sequence, Tuple

from .strutil import split

__all__ = ["PipexError", "find_path", "split_command", "run_pipeline", "read_line", "main"]

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o777


class PipexError(Exception):
    """Raised when a pipeline cannot be set up or its last command cannot run."""


def _environment(env: Optional[Mapping[str, str]]) -> dict:
    return dict(os.environ if env is None else env)


def find_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Locate *cmd* in the directories listed by the ``PATH`` of *env*.

    Each directory is tried in order by joining it, a slash and *cmd*; the
    first candidate that exists is returned. Returns None if none exists.
    Raises PipexError when the environment has no ``PATH``.
    """
    environment = _environment(env)
    if "PATH" not in environment:
        raise PipexError("PATH is not set")
    for directory in split(environment["PATH"], ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def split_command(command: str) -> list[str]:
    """Split a command line into words on spaces, without any quoting."""
    return split(command, " ")


def _resolve(command: str, env: dict) -> Tuple[list[str], str]:
    words = split_command(command)
    if not words:
        raise PipexError("empty command")
    path = find_path(words[0], env)
    if path is None:
        raise PipexError(f"command not found: {words[0]}")
    return words, path


def _report(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _run_first(infile: str, command: str, env: dict) -> bytes:
    """Run the first command on *infile* and return what it wrote.

    Failures are reported on standard error and yield no output, so that
    the second command still runs, on empty input.
    """
    try:
        with open(infile, "rb") as source:
            words, path = _resolve(command, env)
            result = subprocess.run(
                words,
                executable=path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=env,
                check=False,
            )
    except OSError as exc:
        _report(exc.strerror or str(exc))
        return b""
    except PipexError as exc:
        _report(str(exc))
        return b""
    return result.stdout


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``< infile first | second > outfile`` and return the exit status
    of *second*.

    A failure on the side of *first* (unreadable input file, unknown or
    unrunnable command) is reported on standard error and *second* runs on
    empty input. A failure on the side of *second* raises PipexError.
    """
    environment = _environment(env)
    data = _run_first(infile, first, environment)
    try:
        descriptor = os.open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError as exc:
        raise PipexError(exc.strerror or str(exc)) from exc
    with os.fdopen(descriptor, "wb") as sink:
        words, path = _resolve(second, environment)
        try:
            result = subprocess.run(
                words,
                executable=path,
                input=data,
                stdout=sink,
                env=environment,
                check=False,
            )
        except OSError as exc:
            raise PipexError(exc.strerror or str(exc)) from exc
    return result.returncode


def read_line(stream: Optional[IO[str]] = None) -> Tuple[str, bool]:
    """Read one line from *stream*, standard input by default.

    Reading stops at a newline, a NUL character or the end of input. The
    text read is returned with a newline appended, together with True when
    a terminator was read and False when the input ran out.
    """
    source = sys.stdin if stream is None else stream
    pieces = []
    while True:
        ch = source.read(1)
        if not ch:
            return "".join(pieces) + "\n", False
        if ch in ("\n", "\0"):
            return "".join(pieces) + "\n", True
        pieces.append(ch)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Error: Bad arguments")
        return 0
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile)
    except PipexError as exc:
        _report(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())