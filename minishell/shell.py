"""The interactive loop: read a line, split it into words, run the built-in."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

from minishell.builtins import ShellExit, execute
from minishell.splitting import split_words

PROMPT = "> "


class Shell:
    """A shell session holding its own copy of the environment and a history."""

    def __init__(
        self,
        environ: Optional[Iterable[str]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        if environ is None:
            environ = (f"{key}={value}" for key, value in os.environ.items())
        self.environ: List[str] = list(environ)
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.history: List[str] = []
        self.status = 0

    def run_line(self, line: str) -> Optional[int]:
        """Run one command line and return the built-in's status.

        Returns None when the line names no built-in. Raises ShellExit
        when the line asks the shell to stop.
        """
        line = line.rstrip("\n")
        if line:
            self.history.append(line)
        words = split_words(line, " ")
        status = execute(words, self.environ, self.out, self.err)
        if status is not None:
            self.status = status
        return status

    def run(self, lines: Iterable[str]) -> int:
        """Run every line in turn; return the exit status, or 0 when input ends."""
        for line in lines:
            try:
                self.run_line(line)
            except ShellExit as stop:
                self.status = stop.status
                return stop.status
        return 0


def _prompted_lines(prompt: str) -> Iterator[str]:
    try:
        import readline  # noqa: F401  (enables line editing and history for input())
    except ImportError:
        pass
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the shell on standard input and return its exit status."""
    shell = Shell(out=sys.stdout, err=sys.stderr)
    if sys.stdin.isatty():
        lines: Iterable[str] = _prompted_lines(PROMPT)
    else:
        lines = sys.stdin
    return shell.run(lines)