# ftlib

A small collection of the classic C-library routines written in Python. They
give the same results on the same inputs, edge cases included. The package
covers character classes, bounded string functions, splitting and trimming,
integer conversion, a compact `printf` and a buffered line reader for file
descriptors.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftlib.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes an integer character code or a
  one-character string. The conversions return the same kind of value they
  were given.
- `ftlib.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`. Searches return an
  index or `None`. `strlcpy` and `strlcat` return a pair: the new destination
  string and the length the full result would have had.
- `ftlib.transform`: `strtrim`, `split`, `strmapi`, `striteri`, `atoi`, `itoa`.
  `atoi` wraps its result to a 32-bit `int`. A digit run too long for 64 bits
  yields `-1` when positive and `0` when negative.
- `ftlib.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to
  the text stream it is given, or to standard output when none is given.
- `ftlib.printf`: `format_string`, `printf`, `eprintf`, `fprintf`. They
  understand the conversions `%c %s %p %d %i %u %x %X %%`. `%s` of `None`
  prints `(null)`, and `%p` of `None` or `0` prints `(nil)`.
- `ftlib.lines`: `LineReader` and `get_next_line`. They read a file descriptor
  one line at a time and return `bytes`. At the end of the input they return
  `None`.

## Examples

```python
from ftlib.transform import split, atoi, itoa
from ftlib.strings import strlcpy
from ftlib.printf import format_string

split("  hello  world ", " ")        # ['hello', 'world']
atoi("  -42abc")                     # -42
itoa(-2147483648)                    # '-2147483648'
strlcpy("", "abcdef", 4)             # ('abc', 6)
format_string("%s=%x", "value", 255) # 'value=ff'
```

`printf`, `eprintf` and `fprintf` return the number of characters they wrote.

Reading lines from a descriptor:

```python
import os
from ftlib.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line.decode(), end="")
os.close(fd)
```

Each line keeps its trailing newline. The last line of a file may have no
newline. `get_next_line(fd)` keeps one reader per descriptor, so data read
past a line is kept for the next call on that descriptor.

## What it does not do

The package works on `str` values, on text streams and on file descriptors.
It has no routines for raw byte buffers, so it cannot fill, copy, move, search
or compare the contents of a `bytearray`.