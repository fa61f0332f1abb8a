# ftkit

A small toolkit of low-level text, buffer and process helpers:

- `ftkit.chars` – ASCII character classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`,
  `to_upper`. Each accepts a one-character string or an integer code;
  `to_lower` and `to_upper` return the same kind they were given.
- `ftkit.memory` – operations on bytes-like buffers: `memset`, `bzero`,
  `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`. Writing functions change
  a `bytearray` or writable `memoryview` in place and return it; a byte count
  larger than a buffer raises `ValueError`.
- `ftkit.strings` – `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`,
  `strlcat`, `substr`, `strtrim`, `strmapi`, `striteri`. Searches return an
  index or `None`; `strlcpy` and `strlcat` return the resulting text together
  with the length they tried to create.
- `ftkit.convert` – `atoi`, `atoi_base`, `itoa`, `itoa_hex` and `split`
  (splits on one character and drops empty words).
- `ftkit.output` – writing to file descriptors with `os.write`:
  `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, and `putnbr_hex_fd`
  with a `HexStyle` of `LOWER`, `UPPER` or `POINTER` (`0x` prefix, `(nil)`
  for zero). Each returns the number of characters written.
- `ftkit.lists` – `LinkedList`, a singly linked list with `add_front`,
  `add_back`, `last`, `len()`, iteration, `clear`, `for_each` and `map`.
- `ftkit.printf` – `sprintf`, `printf` and `dprintf` with the conversions
  `%c %s %d %i %u %p %x %X`; any other character after `%` produces a single
  `%`.
- `ftkit.lines` – `LineReader`, which reads a file descriptor line by line
  through a fixed-size buffer, and `get_next_line`, which keeps one reader per
  descriptor between calls.
- `ftkit.pipex` – running a chain of commands connected by pipes
  (`pipex`, `resolve_path`, `read_here_doc`, `PipexError`, `main`).

## Installation

```
pip install .
```

## Examples

```python
from ftkit.printf import sprintf
from ftkit.convert import split, itoa

sprintf("%s has %d items (%x)", "box", 42, 255)   # 'box has 42 items (ff)'
sprintf("%s %p", None, 0)                          # '(null) (nil)'
split("  a b  c ", " ")                            # ['a', 'b', 'c']
itoa(-123)                                         # '-123'
```

```python
from ftkit.lists import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                                      # [0, 2, 4, 6]
```

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 64):
    print(line, end="")
os.close(fd)
```

## The pipex command

`pipex` connects commands the way a shell pipe does, reading from one file and
writing to another:

```
pipex infile "grep foo" "wc -l" outfile
```

behaves like `< infile grep foo | wc -l > outfile`. Any number of commands may
be given between the two files; the output file is truncated.

With `here_doc` as the first argument, exactly two commands follow the
limiter. Input is read from standard input up to a line equal to the limiter,
and the output file is appended to instead of truncated:

```
pipex here_doc END "cat" "wc -l" outfile
```

The exit status is that of the last command in the pipeline; a command killed
by a signal counts as 128 plus the signal number. A command that cannot be
found gives 127, one that is not executable gives 126. Fewer arguments than
required print a message and give 1.

The same runner is available from Python as `ftkit.pipex.pipex(argv, env)`,
where `argv[0]` is the program name, and as `python -m ftkit.pipex`.

## What it does not do

- `pipex` runs commands without a shell. Each command string is split on
  spaces only: there is no quoting, globbing, variable expansion or
  redirection inside a command.
- The formatters accept no flags, field widths or precision.
- `LineReader` decodes input as UTF-8; it does not offer other encodings.

## Running the tests

```
pip install .[test]
pytest
```