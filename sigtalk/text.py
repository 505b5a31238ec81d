"""Small string and character helpers with C-string semantics.

Strings behave as if terminated by a NUL character: searching for
``"\\0"`` finds the position just past the last character, and
comparisons treat the end of a string as a zero code.
"""

from __future__ import annotations

from itertools import islice, takewhile, zip_longest
from typing import Iterator, Union

CharLike = Union[str, int]

_C_SPACE = " \t\n\v\f\r"
_INT_BITS = 32
_NUL = "\0"


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise TypeError(f"expected a single character or an int, got {c!r}")


def _codes(s: Union[str, bytes]) -> Iterator[int]:
    if isinstance(s, (bytes, bytearray)):
        return iter(s)
    return map(ord, s)


def _wrap_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional single sign is accepted; parsing stops at the first
    non-digit. Text without digits yields 0. The result wraps to a
    signed 32-bit integer.
    """
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_is_ascii_digit, rest))
    return _wrap_int(sign * int(digits or "0"))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {n!r}")
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end of the string yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the first occurrence, 0 for an empty needle,
    or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    pos = haystack[:length].find(needle)
    return None if pos < 0 else pos


def strncmp(a: Union[str, bytes], b: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` characters, returning the code difference.

    The end of either string compares as a zero code, so the result is
    negative, zero or positive like its C counterpart.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(_codes(a), _codes(b), fillvalue=0)
    for left, right in islice(pairs, n):
        if left != right or left == 0:
            return left - right
    return 0


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    if c == _NUL:
        return len(s)
    pos = s.find(c)
    return None if pos < 0 else pos


def rfind_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    if c == _NUL:
        return len(s)
    pos = s.rfind(c)
    return None if pos < 0 else pos


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _shift_case(c: CharLike, low: str, high: str, offset: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; other values pass through unchanged."""
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; other values pass through unchanged."""
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))