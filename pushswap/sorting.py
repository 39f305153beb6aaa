"""Strategies that sort stack ``a`` using only the machine's operations."""

from __future__ import annotations

from typing import Iterable

from .stacks import Operation, Stacks

_SMALL_LIMIT = 5


def _get_min(stacks: Stacks, excluded: int) -> int:
    """Smallest rank in ``a`` other than ``excluded``, starting from the top's rank."""
    head, *rest = stacks.a
    smallest = head.index
    for element in rest:
        if element.index < smallest and element.index != excluded:
            smallest = element.index
    return smallest


def _max_bits(stacks: Stacks) -> int:
    return max(element.index for element in stacks.a).bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort on the ranks, one pass through ``b`` per bit."""
    size = len(stacks.a)
    for bit in range(_max_bits(stacks)):
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.perform(Operation.RA)
            else:
                stacks.perform(Operation.PB)
        while stacks.b:
            stacks.perform(Operation.PA)


def sort_3(stacks: Stacks) -> None:
    """Sort three elements of ``a`` in at most three operations."""
    head = stacks.a[0]
    smallest = _get_min(stacks, -1)
    next_smallest = _get_min(stacks, smallest)
    if stacks.is_sorted():
        return
    second = stacks.a[1]
    if head.index == smallest and second.index != next_smallest:
        stacks.perform(Operation.RA)
        stacks.perform(Operation.SA)
        stacks.perform(Operation.RRA)
    elif head.index == next_smallest:
        if second.index == smallest:
            stacks.perform(Operation.SA)
        else:
            stacks.perform(Operation.RRA)
    elif second.index == smallest:
        stacks.perform(Operation.RA)
    else:
        stacks.perform(Operation.SA)
        stacks.perform(Operation.RRA)


def sort_4(stacks: Stacks) -> None:
    """Bring the smallest to the top, park it in ``b``, sort three, bring it back."""
    if stacks.is_sorted():
        return
    distance = stacks.distance_to(_get_min(stacks, -1))
    if distance == 1:
        stacks.perform(Operation.RA)
    elif distance == 2:
        stacks.perform(Operation.RA)
        stacks.perform(Operation.RA)
    elif distance == 3:
        stacks.perform(Operation.RRA)
    if stacks.is_sorted():
        return
    stacks.perform(Operation.PB)
    sort_3(stacks)
    stacks.perform(Operation.PA)


def sort_5(stacks: Stacks) -> None:
    """Bring the smallest to the top, park it in ``b``, sort four, bring it back."""
    distance = stacks.distance_to(_get_min(stacks, -1))
    if distance == 1:
        stacks.perform(Operation.RA)
    elif distance == 2:
        stacks.perform(Operation.RA)
        stacks.perform(Operation.RA)
    elif distance == 3:
        stacks.perform(Operation.RRA)
        stacks.perform(Operation.RRA)
    elif distance == 4:
        stacks.perform(Operation.RRA)
    if stacks.is_sorted():
        return
    stacks.perform(Operation.PB)
    sort_4(stacks)
    stacks.perform(Operation.PA)


def simple_sort(stacks: Stacks) -> None:
    """Dedicated sorting for stacks of up to five elements."""
    size = len(stacks.a)
    if size <= 1 or stacks.is_sorted():
        return
    if size == 2:
        stacks.perform(Operation.SA)
    elif size == 3:
        sort_3(stacks)
    elif size == 4:
        sort_4(stacks)
    elif size == 5:
        sort_5(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy by size: small stacks by hand, others by radix."""
    if len(stacks.a) <= _SMALL_LIMIT:
        simple_sort(stacks)
    else:
        radix_sort(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values``; empty when already sorted."""
    stacks = Stacks(values)
    if not stacks.is_sorted():
        sort_stacks(stacks)
    return stacks.operations