# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same
job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep hello" "wc -l" count.txt
```

Each command is split into words on spaces. Quotes and escapes are not
interpreted. The program name, which is the first word, is looked up in the
directories listed in `PATH`. The first directory that contains a file with
that name is used.

The output file is created with mode `0777` (less the umask) if it is
missing. If it exists, it is truncated.

### Errors and exit status

- With any number of arguments other than four, `pipex` writes
  `Error: Bad arguments` to standard error and exits with status 0.
- Some failures affect only the first command: the input file cannot be
  opened, or the first command cannot be found or started. These are
  reported on standard error as `Error: <reason>`. The second command still
  runs, on empty input.
- Some failures affect the second command: the output file cannot be
  created, the second command cannot be found or started, or `PATH` is not
  set. These are reported as `Error: <reason>`, and `pipex` exits with
  status 1.
- Otherwise the exit status is the exit status of the second command.

## Library use

```python
from pipex.pipeline import run_pipeline, find_path, split_command, PipexError

status = run_pipeline("input.txt", "grep hello", "wc -l", "count.txt")
```

The `pipex.pipeline` module provides the following:

- `run_pipeline(infile, first, second, outfile, env=None)` runs both commands
  and returns the exit status of the second. `env` is a mapping used as the
  commands' environment and for the `PATH` lookup. It defaults to
  `os.environ`. Failures on the first command's side are reported on
  standard error, as described above. Failures on the second command's side
  raise `PipexError`.
- `find_path(cmd, env=None)` returns the first `PATH` directory joined with
  `/` and `cmd` that exists, or `None`. It raises `PipexError` when `PATH`
  is not set.
- `split_command(command)` splits a command line into words on spaces and
  drops empty words.
- `read_line(stream=None)` reads one line from `stream`, or from standard
  input when no stream is given. Reading stops at a newline, a NUL character
  or the end of input. It returns `(text, found)`. `text` always ends with a
  newline. `found` is `False` when the input ran out before a terminator.
- `main(argv=None)` is the command-line entry point.

The package also provides small helpers for characters and strings. They
treat characters and strings the way the C library does.

- `pipex.chars` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower` and `to_upper`. Each takes a one-character string or
  an integer code. Only ASCII is recognised.
- `pipex.convert` has two functions:
  - `atoi(text)` parses a leading decimal integer. The result wraps to
    32 bits.
  - `itoa(n)` formats a 32-bit signed integer. It raises `OverflowError`
    outside that range.
- `pipex.strutil` has these functions:
  - `split(text, sep)` splits on one character and drops empty pieces.
  - `strtrim(text, chars)` and `substr(text, start, length)` trim and cut
    strings.
  - `strnstr(haystack, needle, length)` returns an index or `None`.
  - `strncmp(first, second, n)` and `memcmp(first, second, n)` compare two
    strings or buffers.
  - `strlcpy(src, size)` and `strlcat(dest, src, size)` return the resulting
    text and the length that would have been needed.
  - `map_indexed(text, func)` builds a new string by calling
    `func(index, char)` for each character.

## What it does not do

`pipex` joins exactly two commands. It does not chain more than two. It has
no here-document mode and no append mode for the output file. It does not
interpret shell syntax such as quotes, globs or variables.

## Tests

```sh
pip install ".[test]"
pytest
```