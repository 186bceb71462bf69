"""The shell's built-in commands: echo, env, pwd, cd, exit, export and unset."""

from __future__ import annotations

import os
import re
import sys
from typing import Callable, Dict, MutableSequence, Optional, Sequence, TextIO

from minishell.convert import atoi

PATH_LIMIT = 255
TOO_MANY_ARGUMENTS = "bash: exit: too many arguments"

_NUMBER = re.compile(r"[+-]?[0-9]+")

Environ = MutableSequence[str]


class ShellExit(Exception):
    """Raised when the exit built-in asks the shell to stop."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit with status {status}")
        self.status = status


def _stream(stream: Optional[TextIO], default: TextIO) -> TextIO:
    return default if stream is None else stream


def _key(entry: str) -> str:
    """The name part of a NAME=VALUE environment entry."""
    return entry.split("=", 1)[0]


def echo(args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Print the arguments separated by spaces; a leading -n drops the newline."""
    out = _stream(out, sys.stdout)
    words = list(args[1:])
    newline = True
    if words and words[0].startswith("-n"):
        newline = False
        words = words[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def env(environ: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Print every environment entry that holds a value."""
    out = _stream(out, sys.stdout)
    for entry in environ:
        if "=" in entry:
            out.write(f"{entry}\n")
    return 0


def pwd(out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"pwd: {exc.strerror}\n")
        return 1
    out.write(f"{cwd}\n")
    return 0


def cd(
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Change directory; no argument or one starting with ~ goes to $HOME."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    target = args[1] if len(args) > 1 else None
    if target is None or target.startswith("~"):
        path = os.environ.get("HOME")
        if path is None:
            return 1
    else:
        path = target
    if len(path) > PATH_LIMIT:
        out.write(f"cd: {path}: File too long\n")
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        err.write(f"cd: {exc.strerror}\n")
        return 1
    return 0


def is_number(text: str) -> bool:
    """True for an optional sign followed by decimal digits only."""
    return text is not None and _NUMBER.fullmatch(text) is not None


def exit_status(args: Sequence[str], out: Optional[TextIO] = None) -> Optional[int]:
    """Status the exit built-in leaves with, or None when the shell must go on.

    A numeric first argument gives its value modulo 256; extra arguments
    cancel the exit; a non-numeric first argument gives status 2.
    """
    out = _stream(out, sys.stdout)
    if len(args) < 2:
        return 0
    argument = args[1]
    if is_number(argument):
        if len(args) > 2:
            out.write(f"{TOO_MANY_ARGUMENTS}\n")
            return None
        return atoi(argument) & 0xFF
    out.write(f"bash: exit: {argument}: numeric argument required\n")
    return 2


def is_valid_identifier(text: str) -> bool:
    """True when text holds only ASCII letters and '=' signs."""
    return all(("A" <= ch <= "Z") or ("a" <= ch <= "z") or ch == "=" for ch in text)


def add_to_env(entry: str, environ: Environ) -> None:
    """Set NAME=VALUE in environ, replacing an entry of the same name or appending."""
    if "=" not in entry:
        raise ValueError(f"environment entry needs '=': {entry!r}")
    key, value = entry.split("=", 1)
    new_entry = f"{key}={value}"
    for index, existing in enumerate(environ):
        if _key(existing) == key:
            environ[index] = new_entry
            return
    environ.append(new_entry)


def export(args: Sequence[str], environ: Environ, out: Optional[TextIO] = None) -> int:
    """List the environment, or add every NAME=VALUE argument to it."""
    out = _stream(out, sys.stdout)
    if len(args) < 2:
        for entry in environ:
            out.write(f"export {entry}\n")
        return 0
    if not is_valid_identifier(args[1]):
        out.write(f"bash: export: `{args[1]}': not a valid identifier\n")
        return 1
    for argument in args[1:]:
        if "=" in argument:
            add_to_env(argument, environ)
    return 0


def unset(args: Sequence[str], environ: Environ) -> int:
    """Remove the named variables; arguments containing '=' are ignored."""
    names = {name for name in args[1:] if "=" not in name}
    if names:
        environ[:] = [entry for entry in environ if _key(entry) not in names]
    return 0


def _run_exit(args: Sequence[str], out: TextIO) -> int:
    status = exit_status(args, out)
    if status is None:
        return 1
    raise ShellExit(status)


def execute(
    args: Sequence[str],
    environ: Environ,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> Optional[int]:
    """Run the built-in named by args[0] and return its status.

    A command word selects the first built-in whose name it begins, in the
    order env, pwd, exit, echo, cd, export, unset. Returns None when no
    built-in matches; raises ShellExit when exit ends the shell.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if not args or not args[0]:
        return None
    handlers: Dict[str, Callable[[], int]] = {
        "env": lambda: env(environ, out),
        "pwd": lambda: pwd(out, err),
        "exit": lambda: _run_exit(args, out),
        "echo": lambda: echo(args, out),
        "cd": lambda: cd(args, out, err),
        "export": lambda: export(args, environ, out),
        "unset": lambda: unset(args, environ),
    }
    command = args[0]
    for name, handler in handlers.items():
        if name.startswith(command):
            return handler()
    return None