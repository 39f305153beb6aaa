# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations, printing the operations it chose. A companion checker
reads a sequence of operations and reports whether they sort the input.

## Operations

| Name  | Effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up (top goes to the bottom)       |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down (bottom goes to the top)     |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

An operation on a stack with too few elements does nothing.

## Installation

```
pip install .
```

## Commands

Sort numbers given as separate arguments, or as one space-separated string:

```
push-swap 3 1 2
push-swap "5 4 3 2 1"
```

One operation is printed per line; nothing is printed if the numbers are
already sorted. An argument that is not made of digits (with an optional
leading `-`), a duplicate, or a value outside the 32-bit signed range makes the
program print `Error`. With no arguments it prints nothing.

Check a sequence of operations read from standard input, one per line:

```
push-swap 3 1 2 | push-swap-checker 3 1 2
```

The checker prints `OK` when stack `a` ends up sorted and `KO` otherwise. An
unknown operation, or invalid numbers, prints `Error`.

Print distinct random numbers below 10000, for trying the sorter out:

```
push-swap-random 100
```

Given `N`, it prints `N + 1` distinct numbers on one line, each followed by a
space.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import run_commands

ops = solve([3, 1, 2])
stacks = run_commands([3, 1, 2], [op.value for op in ops])
print(stacks.is_sorted())  # True
```

- `pushswap.stacks`: `Stacks` (with `apply`, `perform`, `is_sorted`, `values`,
  `distance_to`, `make_top`), `Operation`, `Element`, and the plain list
  operations `swap`, `push`, `rotate`, `reverse_rotate`, plus `index_values`
  and `is_sorted`.
- `pushswap.args`: `parse_stack`, `validate_args`, `collect_args`,
  `split_words`, `parse_int` and `ArgumentError`.
- `pushswap.sorting`: `solve`, `sort_stacks`, `simple_sort`, `sort_3`,
  `sort_4`, `sort_5` and `radix_sort`.
- `pushswap.checker`: `run_commands`, `read_lines` and `CommandError`.
- `pushswap.randnums`: `unique_numbers`.

Lists of five or fewer numbers use hand-written sequences; longer ones use a
binary radix sort on the ranks of the values.

## Running the tests

```
pip install ".[test]"
pytest
```