# miniprintf

A compact printf-style formatter with a small, fixed set of conversions.
It has no flags, no width and no precision.

## Conversions

| Spec        | Argument             | Output                                              |
|-------------|----------------------|-----------------------------------------------------|
| `%c`        | one-character string, or an integer | the character; integers are cut to one byte (`value & 0xFF`) |
| `%s`        | string or `None`     | the text up to its first NUL, or `(null)` for `None` |
| `%d` / `%i` | integer              | signed decimal, wrapped to 32 bits                  |
| `%u`        | integer              | unsigned decimal, wrapped to 32 bits                |
| `%x` / `%X` | integer              | lower / upper case hexadecimal, wrapped to 32 bits, no prefix |
| `%p`        | integer or `None`    | `0x`-prefixed lower case hex (64-bit), or `(nil)` for `None` or `0` |
| `%` + other | none                 | the character after `%`, so `%%` gives `%`          |

Each conversion consumes one positional argument, in order. Extra
arguments are ignored.

## Errors

`FormatError` (a subclass of `ValueError`, in `miniprintf.printer`) is raised when:

- the template is `None`;
- the template ends with a single `%`;
- a conversion has no argument left to consume.

A template is read only up to its first NUL character.

Arguments of the wrong kind raise `TypeError` (for example a string given
to `%d`), and `%c` given a string that is not exactly one character raises
`ValueError`.

## Usage

```python
from miniprintf.printer import render, printf

text = render("%s has %d items (0x%X)", "cart", 42, 42)
# 'cart has 42 items (0x2A)'

count = printf("value: %u\n", 7)   # writes to stdout, returns the character count
```

`printf` takes an optional `file=` keyword to write to another text stream
instead of standard output. It returns the length of the rendered text.

Each conversion is also available on its own in `miniprintf.conversions`:
`format_char(value)`, `format_string(value)`, `format_int(value)`,
`format_unsigned(value)`, `format_hex(value, upper)` and
`format_pointer(address)`. Each returns a string.

## Installing

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```