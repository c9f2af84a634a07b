# ftlib

Small helpers that behave like the classic C character, string, memory and
output routines, but take and return Python types. Searches return indices
or `None` in place of pointers. Where a length or offset cannot fit, the
function raises `ValueError` and does not overrun anything.

## Modules

- `ftlib.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `is_space`, `to_lower`, `to_upper`. Each one accepts a one-character string or
  an integer code. The case functions return the same kind they were given.
- `ftlib.numbers`:
  - `atoi` and `atol` parse a leading decimal integer. They skip leading
    whitespace and accept one sign. Text with no digits gives 0.
  - `atoi_base` parses text written in the digits of a custom base. It accepts
    any number of signs and raises `ValueError` for an invalid base or a
    character outside the base.
  - `is_valid_base` and `base_index` are its helpers.
  - `itoa` formats an integer in decimal.
  - `degtorad` and `radtodeg` convert angles in single precision.
- `ftlib.cstrings`:
  - Comparison: `strcmp` and `strncmp` return the difference of the first
    character codes that differ.
  - Search: `strchr`, `strrchr` and `strnstr` return an index or `None`.
  - Slicing and joining: `substr`, `strjoin`, `strtrim`, and `split`, which
    drops empty words.
  - Mapping: `strmapi` builds a new string. `striteri` works in place on a
    mutable sequence.
  - Bounded copies: `strlcpy(src, size)` and `strlcat(dst, src, size)` return a
    `(text, attempted_length)` tuple.
  - `rand_str(length)` returns random letters A-Z from `os.urandom`.
- `ftlib.memory`: `memset`, `bzero`, `memcpy`, `memchr` and `memcmp` work on
  `bytes`, `bytearray` and `memoryview`. `memmove(buf, dest, src, n)` moves
  bytes between two offsets of one buffer, and the regions may overlap.
- `ftlib.linkedlist`: `LinkedList` is a doubly linked list of `Node` objects
  (`content`, `next`, `prev`, `index`).
  - Building: `add_back` gives the new node the last node's index plus one.
    `add_front` gives it the first node's index minus one.
  - Removing: `remove(node, delete)` and `clear(delete)`. `delete` is an
    optional callback that receives the content of each node taken out.
  - Inspecting: `apply(f)` and `last()`.
  - Mapping: `map(f, delete)` builds a new list.
  - `len()` counts the nodes. Iterating over the list yields the contents.
- `ftlib.printfd`: `printfd(out, fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`.
  - `%d`/`%i` use signed 32-bit values. `%u`/`%x`/`%X` use unsigned 32-bit
    values.
  - A `None` string prints `(null)`, and a null pointer prints `(nil)`.
  - It returns the number of characters written.
  - `out` is an integer file descriptor, which receives UTF-8 bytes, or any
    object with a `write(str)` method.
  - Also provided: `put_char`, `put_str`, `put_endl`, `put_nbr`,
    `put_nbr_base` and `put_ptr`.
- `ftlib.linereader`:
  - `LineReader(source, buffer_size=10)` reads lines, with their newline, from
    a file descriptor (yielding `bytes`) or a stream with `read`.
  - `read_line()` returns `None` at the end, and iterating over the reader
    yields each line.
  - `get_next_line(fd)` keeps the unread data for each descriptor between
    calls.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import sys

from ftlib.numbers import atoi, atoi_base, itoa
from ftlib.cstrings import split, strchr, strlcpy, strtrim
from ftlib.printfd import printfd

atoi("   -42abc")                    # -42
atoi_base("ff", "0123456789abcdef")  # 255
itoa(-7)                             # "-7"
split("  a b  c ", " ")              # ["a", "b", "c"]
strtrim("xxhixx", "x")               # "hi"
strchr("hello", "l")                 # 2
strlcpy("hello", 3)                  # ("he", 5)

printfd(sys.stdout, "%s has %d items (%x)\n", "list", 42, 42)
```

```python
from ftlib.linkedlist import LinkedList, Node

items = LinkedList()
items.add_back(Node("b"))
items.add_front(Node("a"))
list(items)                           # ["a", "b"]
[node.index for node in items.nodes()]  # [-1, 0]
len(items)                            # 2
```

```python
import os

from ftlib.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line.decode("utf-8"), end="")
os.close(fd)
```

## What it does not do

This is a library only. It installs no command-line program.