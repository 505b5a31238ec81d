"""A small printf-style formatter and character output helpers.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. A ``%`` followed by anything else is dropped
and the following character is written as ordinary text; a trailing
``%`` is dropped. Integers are taken as 32-bit C ``int`` values
(``%p`` as a 64-bit address), so out-of-range values wrap.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

__all__ = ["format", "printf", "put_char", "put_str", "put_endl", "put_nbr"]

_SPECIFIERS = frozenset("cspdiuxX%")
_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _to_int32(value: Any) -> int:
    number = operator.index(value) % _UINT32
    return number - _UINT32 if number >= _UINT32 // 2 else number


def _to_uint32(value: Any) -> int:
    return operator.index(value) % _UINT32


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _UINT64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _as_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {value!r}")
    return value


def _render(spec: str, next_arg: Callable[[], Any]) -> str:
    if spec == "%":
        return "%"
    value = next_arg()
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return _as_string(value)
    if spec in ("d", "i"):
        return str(_to_int32(value))
    if spec == "u":
        return str(_to_uint32(value))
    if spec == "x":
        return f"{_to_uint32(value):x}"
    if spec == "X":
        return f"{_to_uint32(value):X}"
    return _as_pointer(value)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)

    def next_arg() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec in _SPECIFIERS and spec:
            yield _render(spec, next_arg)
        elif spec:
            yield spec


def format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises TypeError if ``fmt`` is not a string or an argument has the
    wrong kind, and ValueError if there are too few arguments. Extra
    arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format string must be str, got {fmt!r}")
    return "".join(_pieces(fmt, args))


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` and return its length."""
    text = format(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(c: Any, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _target(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(str(_to_int32(n)))