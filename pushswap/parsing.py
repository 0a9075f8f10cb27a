"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_WORD_LENGTH = 11

_WHITESPACE = "\t\n\v\f\r "
_SEPARATOR = re.compile(f"[{re.escape(_WHITESPACE)}]+")
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_blank(text: str) -> bool:
    """True when ``text`` is empty or holds only ASCII whitespace."""
    return all(char in _WHITESPACE for char in text)


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of ASCII whitespace, dropping empty pieces."""
    return [word for word in _SEPARATOR.split(text) if word]


def parse_number(word: str) -> int:
    """Read a signed decimal integer that fits in 32 bits.

    Leading whitespace and one ``+`` or ``-`` are allowed; anything else
    that is not a digit is rejected. The value ``-1`` is rejected as well,
    since it is the marker the reader has always used for a bad word.
    Raises ``InputError``.
    """
    body = word.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or not all(char in _DIGITS for char in body):
        raise InputError()
    value = sign * int(body)
    if value < INT_MIN or value > INT_MAX or value == -1:
        raise InputError()
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Iterable[str], limit_length: bool = True) -> list[int]:
    """Turn arguments, each holding one or more numbers, into a list of ints.

    A blank argument, a malformed or out-of-range number, a repeated number,
    or, when ``limit_length`` is set, a word longer than eleven characters
    raises ``InputError``.
    """
    values: list[int] = []
    for arg in args:
        if is_blank(arg):
            raise InputError()
        for word in split_words(arg):
            if limit_length and len(word) > MAX_WORD_LENGTH:
                raise InputError()
            values.append(parse_number(word))
    if has_duplicates(values):
        raise InputError()
    return values