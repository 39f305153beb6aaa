"""Command that prints the operations sorting the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from .args import ArgumentError, parse_stack
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` for invalid input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return -1
    try:
        values = parse_stack(args)
    except ArgumentError as exc:
        print(exc)
        return 0
    for operation in solve(values):
        print(operation.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())