# minishell

A small shell that reads command lines and runs a handful of built-in
commands against its own copy of the environment.

## Installing

```
pip install .
```

## Running

```
minishell
```

On a terminal the prompt is `> ` and line editing is available when Python's
`readline` module is. When standard input is not a terminal, lines are read
from it directly. The shell ends on `exit` or at the end of input (status 0).

Each line is split on spaces. The first word selects the first built-in whose
name it begins, checked in the order `env`, `pwd`, `exit`, `echo`, `cd`,
`export`, `unset` (so `e` runs `env` and `ex` runs `exit`). A word that
begins no built-in does nothing.

| Command  | What it does |
|----------|--------------|
| `echo`   | Prints its arguments separated by spaces; a first argument starting with `-n` drops the trailing newline. |
| `env`    | Prints every environment entry that contains `=`. |
| `pwd`    | Prints the current working directory. |
| `cd`     | Changes directory; with no argument, or one starting with `~`, it goes to `$HOME` of the process environment. Paths longer than 255 characters are refused. |
| `export` | With no argument, lists the environment as `export NAME=value`. Otherwise the first argument must contain only ASCII letters and `=`, or an error is printed; every `NAME=value` argument is added or replaces the entry of that name. |
| `unset`  | Removes the named variables; arguments containing `=` are ignored. |
| `exit`   | With no argument, leaves with status 0. A numeric argument leaves with its value modulo 256; a non-numeric one prints an error and leaves with status 2; a numeric argument followed by more arguments prints `bash: exit: too many arguments` and keeps the shell running. |

## What it does not do

The shell runs only the built-ins above. It does not start external programs,
and it has no quoting, variable expansion, pipes or redirections: a line is
simply split on spaces.

## Using it from Python

```python
import io
from minishell.shell import Shell

out = io.StringIO()
shell = Shell(["GREETING=hi"], out, io.StringIO())
shell.run_line("export NAME=world")
shell.run_line("echo -n hello there")
shell.run_line("env")
print(out.getvalue())
print(shell.environ)   # ['GREETING=hi', 'NAME=world']
print(shell.history)
```

`Shell.run_line` returns the built-in's status, or `None` when the line names
no built-in, and raises `minishell.builtins.ShellExit` (with a `status`
attribute) when `exit` ends the session. `Shell.run` takes any iterable of
lines and returns the exit status. Each built-in is also available on its own
in `minishell.builtins`, together with `execute`, `exit_status`, `is_number`,
`is_valid_identifier` and `add_to_env`.

## Helpers

- `minishell.splitting`: `split_words`, `count_words`, and the quote-aware
  `split_with_quotes` and `count_words_with_quotes`, which keep quoted
  stretches (quotes included) inside one word
- `minishell.strings`: C-style string helpers `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `substr`, `strtrim`, `strjoin`, `strmapi`,
  `striteri`
- `minishell.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`
- `minishell.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on `bytes` and `bytearray`
- `minishell.convert`: `atoi` and `atoll` (wrapping to 32 and 64 bits),
  `itoa`, `utoa`
- `minishell.printf`: `format` and `print_formatted` for
  `%c %s %p %d %i %u %x %X %%`, plus `hex_digits` and `address`
- `minishell.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`
- `minishell.lists`: `LinkedList` and `Node`
- `minishell.lines`: `LineReader`, reading a text or binary stream line by
  line through a fixed-size buffer

## Tests

```
pip install .[test]
pytest
```