"""Command that prints distinct random numbers to use as input."""

from __future__ import annotations

import random
import sys
from typing import Sequence

from .args import parse_int

MAX_NUMBER = 10000


def unique_numbers(
    count: int, limit: int = MAX_NUMBER, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` distinct numbers drawn from ``range(limit)``."""
    if count < 0 or count > limit:
        raise ValueError(f"cannot draw {count} distinct numbers below {limit}")
    rng = rng if rng is not None else random.Random()
    return rng.sample(range(limit), count)


def main(argv: Sequence[str] | None = None) -> int:
    """Print N+1 distinct numbers below the limit, each followed by a space."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: randnums N", file=sys.stderr)
        return 1
    count = max(parse_int(args[0]) + 1, 0)
    try:
        numbers = unique_numbers(count)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("".join(f"{number} " for number in numbers), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())