"""Running a chain of commands connected by pipes, like a shell pipeline.

``pipex infile cmd1 ... cmdN outfile`` feeds ``infile`` to ``cmd1``, each
command's output to the next, and writes the last output to ``outfile``
(truncated). ``pipex here_doc LIMITER cmd1 cmd2 outfile`` reads standard
input up to a line holding only ``LIMITER`` instead of ``infile`` and
appends to ``outfile``. The exit status is that of the last command.
"""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from ftkit.convert import split

HERE_DOC = "here_doc"


class PipexError(Exception):
    """A command could not be started; ``status`` is the exit status to use."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def resolve_path(command: str, env: Mapping[str, str] | None = None) -> str:
    """Return the path of the executable for ``command``.

    A ``command`` naming an existing file is used as it is; otherwise each
    directory of ``PATH`` in ``env`` is tried in order. Raises
    ``PipexError`` with status 126 when the file found is not executable,
    127 when nothing is found, and 2 when ``PATH`` is not set.
    """
    env = os.environ if env is None else env
    if os.path.exists(command):
        return _check_executable(command, command)
    search = env.get("PATH")
    if search is None:
        raise PipexError("pipex: dup2 failed", 2)
    for directory in split(search, ":"):
        candidate = directory + "/" + command
        if os.path.exists(candidate):
            return _check_executable(command, candidate)
    raise PipexError(f"pipex: {command}: command not found", 127)


def _check_executable(command: str, path: str) -> str:
    if not os.access(path, os.X_OK):
        raise PipexError(f"pipex: {command}: Permission denied", 126)
    return path


def read_here_doc(stream: Iterable[str], limiter: str) -> str:
    """Collect lines from ``stream`` until one equal to ``limiter`` plus a
    newline; return the text read before it."""
    stop = limiter + "\n"
    collected = []
    for line in stream:
        if line == stop:
            break
        collected.append(line)
    return "".join(collected)


@dataclass
class _Stage:
    process: subprocess.Popen | None = None
    status: int = 0

    def wait(self) -> int:
        if self.process is None:
            return self.status
        code = self.process.wait()
        return 128 - code if code < 0 else code


def _spawn(arg: str, in_fd: int, out_fd: int, env: Mapping[str, str]) -> _Stage:
    words = split(arg, " ")
    if not words:
        _report("pipex: dup2 failed")
        return _Stage(status=2)
    try:
        path = resolve_path(words[0], env)
    except PipexError as err:
        _report(str(err))
        return _Stage(status=err.status)
    try:
        process = subprocess.Popen(
            words, executable=path, stdin=in_fd, stdout=out_fd, env=dict(env)
        )
    except OSError:
        _report(f"pipex: {words[0]}: Is a directory")
        return _Stage(status=126)
    return _Stage(process=process)


def _open_infile(path: str) -> int | None:
    try:
        return os.open(path, os.O_RDONLY)
    except FileNotFoundError:
        _report(f"pipex: {path}: No such file or directory")
    except OSError:
        _report(f"pipex: {path}: Permission denied")
    return None


def _open_here_doc(limiter: str) -> int:
    text = read_here_doc(sys.stdin, limiter)
    with tempfile.TemporaryFile() as tmp:
        tmp.write(text.encode())
        tmp.seek(0)
        return os.dup(tmp.fileno())


def _open_outfile(path: str, append: bool) -> int | None:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(path, flags, 0o644)
    except OSError:
        _report(f"pipex: {path}: Permission denied")
        return None


def _close(fd: int | None) -> None:
    if fd is not None:
        os.close(fd)


def pipex(argv: Sequence[str], env: Mapping[str, str] | None = None) -> int:
    """Run the pipeline described by ``argv``, whose first item is the
    program name; return the exit status of the last command."""
    env = os.environ if env is None else env
    if len(argv) < 5:
        _report("Not enough input")
        return 1
    here_doc = argv[1] == HERE_DOC
    if here_doc and len(argv) != 6:
        _report("Not enough input for here_doc")
        return 1
    commands = argv[3:-1] if here_doc else argv[2:-1]
    input_fd = _open_here_doc(argv[2]) if here_doc else _open_infile(argv[1])
    stages: list[_Stage] = []
    for index, arg in enumerate(commands):
        next_input: int | None = None
        if index == len(commands) - 1:
            output_fd = _open_outfile(argv[-1], append=here_doc)
        else:
            next_input, output_fd = os.pipe()
        try:
            if input_fd is None or output_fd is None:
                stages.append(_Stage(status=1))
            else:
                stages.append(_spawn(arg, input_fd, output_fd, env))
        finally:
            _close(input_fd)
            _close(output_fd)
        input_fd = next_input
    return [stage.wait() for stage in stages][-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``argv`` holds the arguments after the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    return pipex(["pipex", *args])


if __name__ == "__main__":
    raise SystemExit(main())