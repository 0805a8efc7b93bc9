"""Turning a redirected pipeline line into pipex arguments."""

from __future__ import annotations

from .tokenize import string_split

HEREDOC_TOKEN = "<<"
HEREDOC_MARKER = "here_doc"
_OPERATORS = ("<", "|", ">")


def _drop_extra_redirections(tokens: list[str]) -> list[str]:
    result = list(tokens)
    i = 1
    while i < len(result):
        token = result[i]
        if token.startswith("<"):
            # A later input redirection replaces everything before it.
            del result[:i]
            i = 0
        elif token.startswith(">") and i != len(result) - 2:
            # Only the final output redirection is kept.
            del result[i:i + 2]
            i = 0
        i += 1
    return result


def check_io(tokens: list[str]) -> list[str]:
    """Keep only the last input and the last output redirection.

    Returns a new list; ``tokens`` is left unchanged.
    """
    return _drop_extra_redirections(tokens)


def check_io_heredoc(tokens: list[str]) -> list[str]:
    """Like :func:`check_io`, for lines that start with a here-document.

    ``<<`` and ``>>`` are treated the same as ``<`` and ``>``.
    """
    return _drop_extra_redirections(tokens)


def parse_pipeline(line: str) -> list[str]:
    """Convert ``< in cmd | cmd > out`` style input into pipex arguments.

    The result is the input file (or ``here_doc`` and its limiter), the
    commands, and the output file. Each command keeps at most one
    argument joined to it.
    """
    tokens = string_split(line, " ")
    if not tokens:
        raise ValueError("empty command line")
    if tokens[0] == HEREDOC_TOKEN:
        tokens = check_io_heredoc(tokens)
        tokens[0] = HEREDOC_MARKER
    else:
        tokens = check_io(tokens)
    if len(tokens) < 4:
        raise ValueError("incomplete pipeline")

    if not tokens[3].startswith("|"):
        tokens[2] = f"{tokens[2]} {tokens[3]}"
        del tokens[3]

    i = 0
    while i < len(tokens):
        if (
            tokens[i].startswith("|")
            and i + 2 < len(tokens)
            and not tokens[i + 2].startswith(("|", ">"))
        ):
            tokens[i + 1] = f"{tokens[i + 1]} {tokens[i + 2]}"
            del tokens[i + 2]
        i += 1

    i = 0
    while i < len(tokens):
        if tokens[i].startswith(_OPERATORS):
            del tokens[i]
        i += 1
    return tokens