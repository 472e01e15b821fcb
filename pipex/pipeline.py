"""Run ``infile < cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import BinaryIO

from pipex.pathsearch import CommandNotFoundError, resolve_command
from pipex.textutil import split

USAGE = "Invalid argument call: ./pipex infile cmd1 cmd2 outfile"
FAILURE_STATUS = 255


class UsageError(ValueError):
    """Raised when the program is called with the wrong arguments."""


def open_input(path: str) -> BinaryIO:
    """Open ``path`` for reading."""
    return open(path, "rb")


def open_output(path: str) -> BinaryIO:
    """Open ``path`` for writing, creating or truncating it."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    return os.fdopen(fd, "wb")


def _report(context: str, error: OSError) -> None:
    print(f"{context}: {error.strerror or error}", file=sys.stderr)


def _launch(command, env, *, stdin, stdout) -> subprocess.Popen | None:
    try:
        program = resolve_command(command, env)
    except CommandNotFoundError as exc:
        print(f"Path is empty: {exc}", file=sys.stderr)
        return None
    try:
        return subprocess.Popen(
            split(command, " "),
            executable=program,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        _report("execute problem", exc)
        return None


def _first_stage(infile, command, pipe_write, env) -> subprocess.Popen | None:
    try:
        source = open_input(infile)
    except OSError as exc:
        _report("Open file error", exc)
        return None
    with source:
        return _launch(command, env, stdin=source, stdout=pipe_write)


def _second_stage(outfile, command, pipe_read, env) -> subprocess.Popen | None:
    try:
        target = open_output(outfile)
    except OSError as exc:
        _report("Open file error", exc)
        return None
    with target:
        return _launch(command, env, stdin=pipe_read, stdout=target)


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Mapping[str, str],
) -> tuple[int, int]:
    """Feed ``infile`` through both commands into ``outfile``.

    Each stage is started independently, so one failing does not stop the
    other. Returns the exit status of each stage; a stage that could not be
    started reports FAILURE_STATUS.
    """
    read_end, write_end = os.pipe()
    try:
        first = _first_stage(infile, first_command, write_end, env)
        second = _second_stage(outfile, second_command, read_end, env)
    finally:
        os.close(read_end)
        os.close(write_end)
    first_status = FAILURE_STATUS if first is None else first.wait()
    second_status = FAILURE_STATUS if second is None else second.wait()
    return first_status, second_status


def _parse_arguments(args: Sequence[str]) -> tuple[str, str, str, str]:
    if len(args) != 4:
        raise UsageError(USAGE)
    infile, first_command, second_command, outfile = args
    return infile, first_command, second_command, outfile


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, first_command, second_command, outfile = _parse_arguments(args)
    except UsageError as exc:
        sys.stderr.write(str(exc))
        return 0
    try:
        run_pipeline(infile, first_command, second_command, outfile, os.environ)
    except OSError as exc:
        _report("pipex", exc)
        return FAILURE_STATUS
    return 0


if __name__ == "__main__":
    sys.exit(main())