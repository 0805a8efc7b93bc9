"""The interactive shell loop."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from .parsing import parse_pipeline
from .pipex import PipexError, pipex, run_single
from .tokenize import string_split

PROMPT = "megashell>$ "


@dataclass
class _SignalState:
    received: int = 0


_SIGNALS = _SignalState()


def _handle_signal(signum, frame) -> None:
    _SIGNALS.received = signum


def install_signals() -> _SignalState:
    """Record SIGUSR1 and SIGUSR2 instead of dying on them.

    Returns the object whose ``received`` attribute holds the last one seen.
    """
    signal.signal(signal.SIGUSR1, _handle_signal)
    signal.signal(signal.SIGUSR2, _handle_signal)
    return _SIGNALS


def run_line(
    line: str,
    env: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
) -> int:
    """Run one input line and return the exit status of its last command.

    Lines starting with ``<`` are pipelines; anything else is a single
    command of the form ``infile word command outfile``.
    """
    if line.startswith("<"):
        return pipex(parse_pipeline(line), env, stdin)[-1]
    return run_single(string_split(line, " "), env)


def main(argv: list[str] | None = None) -> int:
    """Read lines from standard input and run them until end of input."""
    install_signals()
    env = os.environ
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        try:
            run_line(line, env, sys.stdin)
        except PipexError as exc:
            print(f"megashell: {exc}", file=sys.stderr)
        except ValueError as exc:
            print(f"megashell: input error: {exc}", file=sys.stderr)