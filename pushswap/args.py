"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the numbers given are not a valid stack."""

    def __init__(self, argument: str) -> None:
        super().__init__("Error")
        self.argument = argument


def parse_int(text: str) -> int:
    """Read a leading integer after optional whitespace and sign; 0 if none."""
    match = _LEADING.match(text)
    sign, digits = match.groups()
    number = int(digits) if digits else 0
    return -number if sign == "-" else number


def split_words(text: str) -> list[str]:
    """Split on single spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def collect_args(argv: Sequence[str]) -> list[str]:
    """Gather the number words: a lone argument is split on spaces."""
    if len(argv) == 1:
        return split_words(argv[0])
    return list(argv)


def _is_number(text: str) -> bool:
    digits = text[1:] if text.startswith("-") else text
    return all(char in _DIGITS for char in digits)


def validate_args(args: Iterable[str]) -> list[int]:
    """Check every word is a distinct 32-bit integer and return the integers."""
    numbers: list[int] = []
    seen: set[int] = set()
    for text in args:
        if not _is_number(text):
            raise ArgumentError(text)
        number = parse_int(text)
        if number in seen or not _INT_MIN <= number <= _INT_MAX:
            raise ArgumentError(text)
        seen.add(number)
        numbers.append(number)
    return numbers


def parse_stack(argv: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the validated starting stack."""
    return validate_args(collect_args(argv))