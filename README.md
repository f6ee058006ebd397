# pipex

`pipex` runs two commands joined by a pipe. The first command reads its input
from a file, and the output of the second command goes to a file. It works
like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To install the test suite's requirements and run it:

```sh
pip install ".[test]"
pytest
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Before the arguments are checked, the environment is checked. It must contain
at least one variable and it must define `PATH`. If it does not, an error is
printed to standard error and the exit status is 1.

Exactly four arguments are required. With any other number, a usage message
goes to standard error and the exit status is 1.

Each command string is split on spaces, and empty words are dropped. Quotes
are not interpreted. The first word is looked up in each directory listed in
`PATH`, in order. The first directory that holds an executable file with that
name is used.

The two stages work as follows:

1. The first command runs to completion with `infile` as its standard input.
   Its standard output is collected. If `infile` cannot be opened, or the
   command cannot be found or started, an error is printed to standard error.
   The run still goes on, and the second command then receives empty input.
2. `outfile` is opened for writing. It is created with mode `0644` if it does
   not exist, and it is truncated if it does. The second command runs with the
   collected output as its standard input and `outfile` as its standard
   output.

The exit status is the exit status of the second command. Three errors in the
second stage print a message to standard error and give exit status 1:

- `outfile` cannot be opened.
- The second command is not found.
- The second command cannot be started.

Example:

```sh
pipex /etc/passwd "grep root" "wc -l" count.txt
```

## Library use

The pipeline can also be called from Python:

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep a1", "wc -w", "output.txt", dict(os.environ))
```

- The `env` argument is optional. When it is left out, `os.environ` is used.
- The return value is the second command's exit status.
- Failures in the second stage, and an environment without `PATH`, raise
  `pipex.commands.PipexError`.

Command lookup can be used on its own:

```python
from pipex.commands import build_argv, PipexError

try:
    path, arguments = build_argv("ls -l", {"PATH": "/usr/bin:/bin"})
except PipexError as exc:
    print(exc)
```

`pipex.commands` also provides the following functions:

- `check_environment(env)`
- `path_directories(env)`, which returns the non-empty entries of `PATH`.
- `search_path(directories, command)`, which returns the first executable
  `directory/command`, or `None` if there is none.

## Helper modules

The package also contains small helpers that behave like the classic C
library routines, adapted to Python types. Search functions return an index,
or `None` when nothing is found. Out-of-range counts raise `ValueError`.

| Module | Contents |
| --- | --- |
| `pipex.charclass` | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`. Each takes an int code or a one-character string. |
| `pipex.convert` | `atoi`, `itoa` |
| `pipex.memory` | `memset`, `bzero`, `memcpy`, `memmove(buffer, dest_offset, src_offset, count)`, `memchr`, `memcmp`, `calloc`. These work on `bytearray` and bytes-like objects. |
| `pipex.cstrings` | `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strdup`. Each treats the first NUL as the end of the string. |
| `pipex.transform` | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri` |
| `pipex.output` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. Each writes to a file descriptor. |
| `pipex.linkedlist` | `Node` and `LinkedList`, which provide `push_front`, `push_back`, `last`, `remove_first`, `clear`, `iterate`, `map`, `len()` and iteration. |
| `pipex.printf` | `format_text` and `printf`, which support `%c %s %p %d %i %u %x %X %%`. Integers are treated as 32-bit C `int` values. |

```python
from pipex.printf import format_text

format_text("%d items, hex %x", 42, 255)   # '42 items, hex ff'
```

## What it does not do

`pipex` is not a shell. Specifically:

- It joins exactly two commands.
- It does not interpret quotes, globs, variables or redirections inside the
  command strings.
- The two commands do not run at the same time. The first command's whole
  output is held in memory before the second command starts.