"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence, TextIO

from .args import ArgumentError, parse_stack
from .stacks import Operation, Stacks


class CommandError(ValueError):
    """Raised for a line that names no operation."""

    def __init__(self, line: str) -> None:
        super().__init__("Error")
        self.line = line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines without their newline; a final empty line is not yielded."""
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]
        elif line:
            yield line


def run_commands(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Apply each named operation to fresh stacks and return them."""
    stacks = Stacks(values)
    for line in lines:
        try:
            operation = Operation(line)
        except ValueError:
            raise CommandError(line) from None
        stacks.apply(operation)
    return stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
    except ArgumentError as exc:
        print(exc)
        return 0
    try:
        stacks = run_commands(values, read_lines(sys.stdin))
    except CommandError as exc:
        print(exc)
        return -1
    print("OK\n" if stacks.is_sorted() else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())