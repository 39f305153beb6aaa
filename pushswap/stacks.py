"""The two-stack machine: elements, the eleven operations and the stacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Iterable, MutableSequence, Sequence


@dataclass
class Element:
    """A stack entry: its value and its rank among all values (-1 if unranked)."""

    value: int
    index: int = -1


class Operation(str, Enum):
    """The instructions understood by the machine, named as they are written."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


_PAIRED = frozenset({Operation.SS, Operation.RR, Operation.RRR})


def swap(stack: MutableSequence) -> bool:
    """Exchange the two top items; return False if there are fewer than two."""
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def push(dst: MutableSequence, src: MutableSequence) -> bool:
    """Move the top of ``src`` onto ``dst``; return False if ``src`` is empty."""
    if not src:
        return False
    dst.insert(0, src.pop(0))
    return True


def rotate(stack: MutableSequence) -> bool:
    """Move the top item to the bottom; return False if there are fewer than two."""
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def reverse_rotate(stack: MutableSequence) -> bool:
    """Move the bottom item to the top; return False if there are fewer than two."""
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def index_values(values: Iterable[int]) -> list[int]:
    """Rank each value from 0 upwards; equal values rank in order of position."""
    values = list(values)
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(first <= second for first, second in pairwise(values))


class Stacks:
    """Stack ``a`` holding the input and an initially empty stack ``b``.

    Operations carried out through :meth:`perform` are recorded in
    ``operations`` in the order they were made.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.a: list[Element] = [
            Element(value, rank) for value, rank in zip(values, index_values(values))
        ]
        self.b: list[Element] = []
        self.operations: list[Operation] = []

    def apply(self, operation: Operation | str) -> bool:
        """Carry out an operation without recording it.

        Paired operations act on each stack that can take them. Returns
        whether anything moved. Raises ValueError for an unknown name.
        """
        op = Operation(operation)
        if op is Operation.SA:
            return swap(self.a)
        if op is Operation.SB:
            return swap(self.b)
        if op is Operation.SS:
            moved_a = swap(self.a)
            moved_b = swap(self.b)
            return moved_a or moved_b
        if op is Operation.PA:
            return push(self.a, self.b)
        if op is Operation.PB:
            return push(self.b, self.a)
        if op is Operation.RA:
            return rotate(self.a)
        if op is Operation.RB:
            return rotate(self.b)
        if op is Operation.RR:
            moved_a = rotate(self.a)
            moved_b = rotate(self.b)
            return moved_a or moved_b
        if op is Operation.RRA:
            return reverse_rotate(self.a)
        if op is Operation.RRB:
            return reverse_rotate(self.b)
        moved_a = reverse_rotate(self.a)
        moved_b = reverse_rotate(self.b)
        return moved_a or moved_b

    def perform(self, operation: Operation | str) -> bool:
        """Carry out and record an operation if it can be made.

        Paired operations need both stacks to hold at least two items.
        Returns whether the operation was made.
        """
        op = Operation(operation)
        if op in _PAIRED and (len(self.a) < 2 or len(self.b) < 2):
            return False
        if not self.apply(op):
            return False
        self.operations.append(op)
        return True

    def is_sorted(self) -> bool:
        """Tell whether stack ``a`` is in non-decreasing order."""
        return is_sorted(self.values())

    def values(self) -> list[int]:
        """The values of stack ``a`` from top to bottom."""
        return [element.value for element in self.a]

    def distance_to(self, index: int) -> int:
        """Position in ``a`` of the element with this rank, or the size of ``a``."""
        return next(
            (pos for pos, element in enumerate(self.a) if element.index == index),
            len(self.a),
        )

    def make_top(self, distance: int) -> None:
        """Bring the element at ``distance`` to the top of ``a`` the short way."""
        if distance == 0:
            return
        size = len(self.a)
        if distance <= size // 2:
            for _ in range(distance):
                self.perform(Operation.RA)
        else:
            for _ in range(size - distance):
                self.perform(Operation.RRA)

    def __str__(self) -> str:
        return "".join(f"{value}\n" for value in self.values())