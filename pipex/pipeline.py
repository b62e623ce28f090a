"""Run ``cmd1 < infile | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import BinaryIO, Optional

from pipex.command import CommandNotFoundError, PathNotFoundError, resolve_command

USAGE = "Usage: ./pipex infile cmd1 cmd2 outfile\n"
EXIT_NOT_FOUND = 127
EXIT_EXEC_FAILED = 1


def open_files(inpath: str, outpath: str) -> tuple[BinaryIO, BinaryIO]:
    """Open the input for reading and create or truncate the output.

    The output is created with mode 0644. Errors are raised as OSError whose
    message names the file that failed.
    """
    try:
        infile = open(inpath, "rb")
    except OSError as err:
        raise type(err)(err.errno, f"infile error: {err.strerror}", inpath) from err
    try:
        fd = os.open(outpath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as err:
        infile.close()
        raise type(err)(err.errno, f"outfile error: {err.strerror}", outpath) from err
    return infile, os.fdopen(fd, "wb")


def _start(
    cmd: str, env: Mapping[str, str], stdin: int, stdout: int
) -> tuple[Optional[subprocess.Popen], int]:
    try:
        path, args = resolve_command(cmd, env)
    except (CommandNotFoundError, PathNotFoundError) as err:
        sys.stderr.write(f"Command not found: {err}\n")
        return None, EXIT_NOT_FOUND
    try:
        proc = subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as err:
        sys.stderr.write(f"execve: {err}\n")
        return None, EXIT_EXEC_FAILED
    return proc, 0


def run_pipeline(
    inpath: str,
    cmd1: str,
    cmd2: str,
    outpath: str,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Feed ``inpath`` through ``cmd1`` into ``cmd2`` and write to ``outpath``.

    Returns the exit statuses of both commands; a command that cannot be
    found yields 127.
    """
    if env is None:
        env = os.environ
    infile, outfile = open_files(inpath, outpath)
    with infile, outfile:
        read_end, write_end = os.pipe()
        try:
            first, first_code = _start(cmd1, env, infile.fileno(), write_end)
        finally:
            os.close(write_end)
        try:
            second, second_code = _start(cmd2, env, read_end, outfile.fileno())
        finally:
            os.close(read_end)
        if first is not None:
            first_code = first.wait()
        if second is not None:
            second_code = second.wait()
    return first_code, second_code


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 4:
        sys.stderr.write(USAGE)
        return 1
    inpath, cmd1, cmd2, outpath = argv
    try:
        run_pipeline(inpath, cmd1, cmd2, outpath)
    except OSError as err:
        sys.stderr.write(f"{err}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())