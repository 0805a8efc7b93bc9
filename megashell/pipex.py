"""Running commands connected by pipes between an input and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Mapping
from typing import TextIO

from .parsing import HEREDOC_MARKER
from .textutil import split

HEREDOC_PROMPT = "> "
_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644


class PipexError(Exception):
    """A failure that stops a pipeline before or while it starts."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _describe(message: str, exc: OSError | None = None, code: int | None = None) -> str:
    if exc is not None:
        detail = exc.strerror or str(exc)
    elif code is not None:
        detail = os.strerror(code)
    else:
        return message
    return f"{message}: {detail}"


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def split_paths(env: Mapping[str, str]) -> list[str] | None:
    """Return the PATH directories, each ending in ``/``, or None without PATH."""
    value = env.get("PATH")
    if value is None:
        return None
    return [directory + "/" for directory in split(value, ":")]


def find_path(paths: Iterable[str] | None, cmd: str | None) -> str | None:
    """Locate an executable for ``cmd``.

    ``cmd`` itself is used when it is executable as given; otherwise each
    directory prefix in ``paths`` is tried in order.
    """
    if cmd is None or paths is None:
        return None
    if os.access(cmd, os.F_OK | os.X_OK):
        return cmd
    for prefix in paths:
        candidate = prefix + cmd
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def _require_paths(env: Mapping[str, str]) -> list[str]:
    paths = split_paths(env)
    if paths is None:
        raise PipexError(_describe("path error", code=errno.ENOENT), 1)
    return paths


def _open_infile(path: str) -> int:
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise PipexError(_describe("infile error", exc), 1) from exc


def _open_outfile(path: str, in_fd: int | None = None) -> int:
    try:
        return os.open(path, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError as exc:
        if in_fd is not None:
            os.close(in_fd)
        raise PipexError(_describe("outfile error", exc), 1) from exc


def _read_heredoc(limiter: str, stream: TextIO) -> str:
    interactive = stream.isatty()
    lines: list[str] = []
    while True:
        if interactive:
            sys.stdout.write(HEREDOC_PROMPT)
            sys.stdout.flush()
        line = stream.readline()
        if not line:
            break
        line = line.removesuffix("\n")
        if line.startswith(limiter):
            break
        lines.append(line + "\n")
    return "".join(lines)


def _heredoc_fd(limiter: str, stream: TextIO) -> int:
    """Collect the here-document into an unnamed file and return a readable fd."""
    text = _read_heredoc(limiter, stream)
    with tempfile.TemporaryFile() as handle:
        handle.write(text.encode("utf-8", errors="surrogateescape"))
        handle.flush()
        fd = os.dup(handle.fileno())
    os.lseek(fd, 0, os.SEEK_SET)
    return fd


def _spawn(
    command: str,
    paths: list[str],
    env: Mapping[str, str],
    in_fd: int,
    out_fd: int,
) -> subprocess.Popen | int:
    """Start one command, or report why it cannot start and return its status."""
    argv = split(command, " ")
    full_path = find_path(paths, argv[0]) if argv else None
    if full_path is None:
        _report(_describe("path error", code=errno.ENOENT))
        return 127
    try:
        return subprocess.Popen(
            argv,
            executable=full_path,
            stdin=in_fd,
            stdout=out_fd,
            env=dict(env),
        )
    except OSError as exc:
        _report(_describe("execve error", exc))
        return 126


def _run_pipeline(
    commands: list[str],
    paths: list[str],
    env: Mapping[str, str],
    in_fd: int,
    out_fd: int,
) -> list[int]:
    launched: list[subprocess.Popen | int] = []
    pending_in: int | None = in_fd
    try:
        for index, command in enumerate(commands):
            if index == len(commands) - 1:
                read_fd, write_fd = None, out_fd
            else:
                try:
                    read_fd, write_fd = os.pipe()
                except OSError as exc:
                    raise PipexError(_describe("pipe error", exc), 1) from exc
            try:
                launched.append(_spawn(command, paths, env, pending_in, write_fd))
            finally:
                os.close(pending_in)
                os.close(write_fd)
                pending_in = None
            pending_in = read_fd
    finally:
        if pending_in is not None:
            os.close(pending_in)
    return [item if isinstance(item, int) else item.wait() for item in launched]


def pipex(
    args: Iterable[str],
    env: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
) -> list[int]:
    """Run ``infile cmd1 ... cmdN outfile`` as a pipeline.

    With ``here_doc limiter cmd1 ... cmdN outfile`` the input is read from
    ``stdin`` up to a line starting with the limiter. Returns the exit
    status of every command, in order.
    """
    args = list(args)
    if len(args) < 4:
        raise PipexError("input error", 1)
    env = os.environ if env is None else env
    paths = _require_paths(env)
    heredoc = args[0] == HEREDOC_MARKER
    in_fd = None if heredoc else _open_infile(args[0])
    out_fd = _open_outfile(args[-1], in_fd)
    if heredoc:
        if len(args) < 5:
            os.close(out_fd)
            raise PipexError("input error", 1)
        in_fd = _heredoc_fd(args[1], sys.stdin if stdin is None else stdin)
        commands = args[2:-1]
    else:
        commands = args[1:-1]
    return _run_pipeline(commands, paths, env, in_fd, out_fd)


def run_single(args: Iterable[str], env: Mapping[str, str] | None = None) -> int:
    """Run the command ``args[2]`` from ``args[0]`` into ``args[-1]``.

    Returns the command's exit status.
    """
    args = list(args)
    if len(args) < 4:
        raise PipexError("input error", 1)
    env = os.environ if env is None else env
    paths = _require_paths(env)
    in_fd = _open_infile(args[0])
    out_fd = _open_outfile(args[-1], in_fd)
    try:
        argv = split(args[2], " ")
        full_path = find_path(paths, argv[0]) if argv else None
        if full_path is None:
            raise PipexError(_describe("path error", code=errno.ENOENT), 127)
        try:
            process = subprocess.Popen(
                argv,
                executable=full_path,
                stdin=in_fd,
                stdout=out_fd,
                env=dict(env),
            )
        except OSError as exc:
            raise PipexError(_describe("execve error", exc), 126) from exc
    finally:
        os.close(in_fd)
        os.close(out_fd)
    return process.wait()