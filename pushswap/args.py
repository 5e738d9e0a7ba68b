"""Parsing and validation of the integers given on the command line."""

from __future__ import annotations

from typing import Optional, Sequence

_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class ArgumentError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def atoi(text: str) -> int:
    """Leniently read a leading integer: skip whitespace, one sign, then digits."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
    return sign * number


def parse_int(text: str) -> int:
    """Strictly read a 32-bit integer: optional '-', then only digits."""
    if not text:
        raise ArgumentError("empty argument")
    if text[0] == "+":
        raise ArgumentError(f"invalid integer: {text!r}")
    negative = text[0] == "-"
    digits = text[1:] if negative else text
    if not digits:
        raise ArgumentError(f"invalid integer: {text!r}")
    limit = _INT_MIN_MAGNITUDE if negative else _INT_MAX
    number = 0
    for char in digits:
        if char not in _DIGITS:
            raise ArgumentError(f"invalid integer: {text!r}")
        number = number * 10 + int(char)
        if number > limit:
            raise ArgumentError(f"integer out of range: {text!r}")
    return -number if negative else number


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def is_blank(text: Optional[str]) -> bool:
    """True if ``text`` is missing or holds nothing but spaces."""
    return text is None or all(char == " " for char in text)


def collect_arguments(args: Sequence[str]) -> list[str]:
    """Return the words to parse: a single argument is split on spaces."""
    if len(args) != 1:
        return list(args)
    if is_blank(args[0]):
        raise ArgumentError("blank argument")
    words = split_words(args[0], " ")
    if not words:
        raise ArgumentError("no integers given")
    return words


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse the arguments into distinct 32-bit integers, top of the stack first."""
    values = [parse_int(word) for word in collect_arguments(args)]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ArgumentError(f"duplicate integer: {value}")
        seen.add(value)
    return values