"""Parsing of unsigned integers written with optional scale suffixes.

A number may be given in decimal, octal (leading ``0``) or hexadecimal
(leading ``0x``), optionally followed by one of:

* ``K``, ``M``, ``G``, ``T``, ``P``: multiply by 10**3, 10**6, ... 10**15
* ``k``, ``m``, ``g``, ``t``, ``p``: multiply by 2**10, 2**20, ... 2**50
* ``e<n>`` or ``E<n>``: multiply by 10**n
* ``b<n>`` or ``B<n>``: multiply by 2**n
"""

from __future__ import annotations

__all__ = [
    "NumberParseError",
    "NumberSyntaxError",
    "NumberRangeError",
    "parse_uint",
    "parse_uint64",
    "UINT32_MAX",
    "UINT64_MAX",
]

UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1

_WHITESPACE = " \t\n\v\f\r"
_DECIMAL_SCALES = {"K": 1, "M": 2, "G": 3, "T": 4, "P": 5}
_BINARY_SHIFTS = {"k": 10, "m": 20, "g": 30, "t": 40, "p": 50}


class NumberParseError(ValueError):
    """Base class for failures to read a number."""


class NumberSyntaxError(NumberParseError):
    """The text is not a well-formed number."""


class NumberRangeError(NumberParseError):
    """The number is well-formed but outside the permitted range."""


def _digit_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lowered = char.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10
    return 99


def _read_unsigned(text: str, limit: int) -> tuple[int, str, bool]:
    """Read a leading integer the way the C library does with base 0.

    Returns the value (wrapped modulo ``limit + 1`` when negated), the
    unread remainder, and whether the magnitude exceeded ``limit``.
    When no digits are present, the value is 0 and the remainder is the
    whole input.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    base = 10
    if (
        text.startswith(("0x", "0X"), pos)
        and pos + 2 < length
        and _digit_value(text[pos + 2]) < 16
    ):
        base = 16
        pos += 2
    elif text.startswith("0", pos):
        base = 8

    start = pos
    value = 0
    while pos < length and _digit_value(text[pos]) < base:
        value = value * base + _digit_value(text[pos])
        pos += 1

    if pos == start:
        return 0, text, False

    overflow = value > limit
    if overflow:
        value = limit
    elif negative:
        value = (-value) & limit
    return value, text[pos:], overflow


def _read_exponent(rest: str) -> tuple[int, str]:
    exponent, tail, overflow = _read_unsigned(rest, UINT64_MAX)
    if overflow:
        raise NumberRangeError(f"exponent out of range: {rest!r}")
    if tail:
        raise NumberSyntaxError(f"unexpected characters after exponent: {tail!r}")
    return exponent & UINT32_MAX, tail


def parse_uint64(text: str, lo: int = 0, hi: int = UINT64_MAX) -> int:
    """Parse ``text`` as an unsigned integer in ``[lo, hi]``.

    Raises NumberSyntaxError when the text cannot be parsed and
    NumberRangeError when the value lies outside the bounds.
    """
    if not 0 <= lo <= UINT64_MAX or not 0 <= hi <= UINT64_MAX:
        raise ValueError("bounds must fit in an unsigned 64-bit integer")

    num, tail, overflow = _read_unsigned(text, UINT64_MAX)
    if overflow or num > hi:
        raise NumberRangeError(f"number out of range: {text!r}")

    suffix, rest = tail[:1], tail[1:]

    if suffix == "":
        pass
    elif suffix in _DECIMAL_SCALES:
        if rest:
            raise NumberSyntaxError(f"unexpected characters after suffix: {text!r}")
        for _ in range(_DECIMAL_SCALES[suffix]):
            if num > hi // 1000:
                raise NumberRangeError(f"number out of range: {text!r}")
            num *= 1000
    elif suffix in "eE":
        exponent, _ = _read_exponent(rest)
        if num:
            for _ in range(exponent):
                if num > hi // 10:
                    raise NumberRangeError(f"number out of range: {text!r}")
                num *= 10
    elif suffix in _BINARY_SHIFTS:
        if rest:
            raise NumberSyntaxError(f"unexpected characters after suffix: {text!r}")
        shift = _BINARY_SHIFTS[suffix]
        if num > hi >> shift:
            raise NumberRangeError(f"number out of range: {text!r}")
        num <<= shift
    elif suffix in "bB":
        exponent, _ = _read_exponent(rest)
        if num:
            for _ in range(exponent):
                if num > hi >> 1:
                    raise NumberRangeError(f"number out of range: {text!r}")
                num <<= 1
    else:
        raise NumberSyntaxError(f"unrecognised suffix in {text!r}")

    if num < lo:
        raise NumberRangeError(f"number out of range: {text!r}")
    return num


def parse_uint(text: str, lo: int = 0, hi: int = UINT32_MAX) -> int:
    """Parse ``text`` as an unsigned 32-bit integer in ``[lo, hi]``."""
    if not 0 <= lo <= UINT32_MAX or not 0 <= hi <= UINT32_MAX:
        raise ValueError("bounds must fit in an unsigned 32-bit integer")
    return parse_uint64(text, lo, hi)