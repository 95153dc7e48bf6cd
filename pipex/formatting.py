"""A small printf supporting the conversions %c %s %d %i %u %p %x %X and %%."""

from __future__ import annotations

import sys
from typing import IO, Any, Iterator

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


def _as_int(value: Any) -> int:
    """Reduce an integer to the range of a 32-bit signed int."""
    value = int(value) & _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _as_uint(value: Any) -> int:
    return int(value) & _UINT_MASK


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _convert_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return f"0x{int(value) & _POINTER_MASK:x}"


_CONVERSIONS = {
    "c": _convert_char,
    "s": _convert_string,
    "d": lambda value: str(_as_int(value)),
    "i": lambda value: str(_as_int(value)),
    "u": lambda value: str(_as_uint(value)),
    "p": _convert_pointer,
    "x": lambda value: f"{_as_uint(value):x}",
    "X": lambda value: f"{_as_uint(value):X}",
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    pending = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions print nothing and consume no argument.
            continue
        try:
            value = next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string {fmt!r}") from None
        yield convert(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments."""
    if fmt is None:
        raise TypeError("format string must not be None")
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: IO[str] | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)