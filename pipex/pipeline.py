"""Run ``cmd1 < infile | cmd2 > outfile`` and the command that starts it."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence

from pipex.commands import PipexError, build_argv, check_environment

__all__ = ["run_pipeline", "main"]

_USAGE = "\n\tUsage: pipex file1 cmd1 cmd2 file2\n\n"


def _with_reason(message: str, error: OSError) -> str:
    return f"{message}: {error.strerror}" if error.strerror else message


def _run_first(infile: str, command: str, env: Mapping[str, str]) -> bytes:
    """Run the first command on ``infile`` and return what it wrote."""
    try:
        source = open(infile, "rb")
    except OSError as error:
        raise PipexError(_with_reason("Error: Failed to open file", error)) from error
    with source:
        path, arguments = build_argv(command, env)
        try:
            finished = subprocess.run(
                arguments,
                executable=path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=dict(env),
                check=False,
            )
        except OSError as error:
            raise PipexError(_with_reason("Error: execve failed", error)) from error
    return finished.stdout


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` through both commands into ``outfile``.

    A failure of the first stage is reported on standard error and the
    second command then reads empty input. Returns the exit status of the
    second command; failures of the second stage raise ``PipexError``.
    """
    environment = dict(os.environ) if env is None else env
    check_environment(environment)
    try:
        piped = _run_first(infile, first_command, environment)
    except PipexError as error:
        print(error, file=sys.stderr)
        piped = b""
    try:
        target = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as error:
        raise PipexError(
            _with_reason("Error: Failed to create or open file", error)
        ) from error
    try:
        path, arguments = build_argv(second_command, environment)
        try:
            finished = subprocess.run(
                arguments,
                executable=path,
                input=piped,
                stdout=target,
                env=dict(environment),
                check=False,
            )
        except OSError as error:
            raise PipexError(_with_reason("Error: execve failed", error)) from error
    finally:
        os.close(target)
    return finished.returncode


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex file1 cmd1 cmd2 file2``."""
    arguments: List[str] = list(sys.argv[1:] if argv is None else argv)
    environment = dict(os.environ)
    try:
        check_environment(environment)
    except PipexError as error:
        print(error, file=sys.stderr)
        return 1
    if len(arguments) != 4:
        sys.stderr.write(_USAGE)
        return 1
    infile, first_command, second_command, outfile = arguments
    try:
        return run_pipeline(infile, first_command, second_command, outfile, environment)
    except PipexError as error:
        print(error, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())