"""Template rendering and printing with a small set of conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from functools import partial
from typing import Any, TextIO

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a template cannot be rendered."""


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": partial(format_hex, upper=False),
    "X": partial(format_hex, upper=True),
    "p": format_pointer,
    "s": format_string,
    "c": format_char,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    converter = _CONVERTERS.get(spec)
    if converter is None:
        # Unknown specifiers, including '%', are emitted literally.
        return spec
    try:
        value = next(values)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    return converter(value)


def render(template: str | None, *args: Any) -> str:
    """Render a template, consuming one argument per conversion."""
    if template is None:
        raise FormatError("template is None")
    values = iter(args)
    chars = iter(template.split("\0", 1)[0])
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("template ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(template: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered template to a stream and return its length."""
    text = render(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)