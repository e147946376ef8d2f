"""Text renderings for the individual conversion specifiers."""

from __future__ import annotations

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _require_int(value: object, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def format_char(value: int | str) -> str:
    """Render a single character; integers are truncated to one byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def format_string(value: str | None) -> str:
    """Render a string, stopping at the first NUL; None becomes '(null)'."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def format_int(value: int) -> str:
    """Render a value as a signed 32-bit decimal integer."""
    wrapped = _require_int(value, "d") & _UINT_MASK
    if wrapped >= 1 << (_INT_BITS - 1):
        wrapped -= 1 << _INT_BITS
    return str(wrapped)


def format_unsigned(value: int) -> str:
    """Render a value as an unsigned 32-bit decimal integer."""
    return str(_require_int(value, "u") & _UINT_MASK)


def format_hex(value: int, upper: bool) -> str:
    """Render a value as unsigned 32-bit hexadecimal, without a prefix."""
    number = _require_int(value, "X" if upper else "x") & _UINT_MASK
    return format(number, "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """Render an address as '0x' plus lowercase hex; null becomes '(nil)'."""
    if address is None:
        return NULL_POINTER
    number = _require_int(address, "p") & _POINTER_MASK
    if number == 0:
        return NULL_POINTER
    return "0x" + format(number, "x")