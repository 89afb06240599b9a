# raycub

raycub is a collection of small, dependency-free helpers for a grid
raycasting maze explorer: character classification, string and byte-buffer
utilities, a printf-style formatter, a chunked line reader and a singly
linked list.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `raycub.chars`

ASCII character tests and conversions. Each function accepts a character
either as a one-character `str` or as an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
- `to_upper`, `to_lower` change ASCII letters only and return the same kind
  of value they were given
- `atoi(text)` skips leading whitespace, accepts one `+` or `-`, and reads
  digits until the first non-digit; text with no digits gives `0`
- `itoa(n)` returns the decimal text of an integer

### `raycub.memory`

Operations on `bytearray` and other bytes-like objects. Lengths that are
negative or larger than a buffer raise `ValueError`.

- `memset(buffer, value, length)`, `bzero(buffer, length)`
- `calloc(count, size)` returns a zero-filled `bytearray`
- `memcpy(dst, src, n)`
- `memmove(buffer, dest, src, n)` moves a region within one buffer, overlap
  included
- `memchr(data, value, n)` returns an index or `None`
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or `0`

### `raycub.strings`

- `split(text, sep)` splits on one character and drops empty pieces
- `trim(text, chars)` strips any of `chars` from both ends
- `substr(text, start, length)`
- `find_char`, `rfind_char` return an index or `None`; searching for `"\0"`
  gives the length of the text
- `compare(a, b, n)` compares at most `n` characters, treating the end of a
  string as code 0
- `find_within(haystack, needle, length)` searches only the first `length`
  characters
- `bounded_copy(src, size)` and `bounded_concat(dst, src, size)` return the
  resulting text together with the length the full result would have had
- `map_indexed(text, func)` and `for_each_indexed(chars, func)` apply
  `func(index, char)` to each character

### `raycub.output`

- `put_char`, `put_str`, `put_endl`, `put_nbr` write to a stream, standard
  output by default
- `format(fmt, *args)` understands `%c %s %d %i %u %x %X %p %%`; `%s` of
  `None` prints `(null)`, `%d`/`%i` wrap to 32-bit signed, `%u`/`%x`/`%X` to
  32-bit unsigned, and a lone `%` at the end is dropped
- `printf(fmt, *args, stream=None)` writes the formatted text and returns
  the number of characters written

```python
>>> from raycub.output import format
>>> format("%d %x %s", -1, 255, None)
'-1 ff (null)'
```

### `raycub.linereader`

- `LineReader(source, buffer_size=4)` reads lines from any object with a
  `read(size)` method; text streams give `str`, binary streams give `bytes`.
  `read_line()` returns `None` at the end, and the reader is iterable.
- `FdLineReader(buffer_size=4)` reads byte lines from file descriptors with
  `read_line(fd)`, keeping separate pending data for each descriptor.

Lines keep their trailing newline, except a final line that has none.

### `raycub.lists`

`LinkedList` is a singly linked list of `Node` cells with `add_front`,
`add_back`, `last`, `clear`, `remove_first`, `for_each`, `map`, `len()` and
iteration. `map` raises `ValueError`, after passing the values built so far to
the optional `delete` callback, when the mapping function returns `None`.

## What the package does not do

raycub has no command to run and opens no window. It does not read or
validate `.cub` scene files, does not handle player movement or keyboard
input, and does not render frames; only the helper modules above are
included.