# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. The `push-swap` command prints the operations it uses, one
per line, to standard output.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the first two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top element of `b` to `a`, or of `a` to `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upwards (first becomes last) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downwards (last becomes first) |

Each value is first replaced by its rank among all the values. Lists of up
to five numbers are then sorted case by case with few moves; longer lists
are sorted with a binary radix sort on the ranks, using `b` as the bucket
for ranks whose current bit is zero.

## Installation

```
pip install .
```

## Command line

Numbers can be given as separate arguments or as one argument separated by
spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

- With no arguments nothing is printed and the exit status is 0.
- An input that is already in order prints nothing.
- If an argument is not an optional sign followed by digits, lies outside
  the 32-bit signed range, or holds the same number as another argument,
  `Error` is written to standard error and the exit status is 1.

To count the operations used:

```
push-swap 5 1 4 2 3 9 7 | wc -l
```

## Library

The sorter can be used from Python:

```python
from pushswap.sorting import solve

solve([3, 2, 1])   # ['sa', 'rra']
```

`solve` returns the operation names in the order they are carried out.

The stacks can also be driven by hand:

```python
from pushswap.stack import Machine

machine = Machine([2, 1])
machine.sa()
machine.a.values()    # [1, 2]
machine.operations    # ['sa']
```

`Machine` holds the stacks `a` and `b` (each a `Stack`) and has one method
per operation. Single-stack operations that change nothing are not recorded
in `operations`; `ss`, `rr` and `rrr` are always recorded.

Other pieces:

- `pushswap.validate`: `check_input(args)` raises `InputError` on bad input;
  `parse_arguments(args)` returns the integers. A single argument is split
  on spaces, several are taken as given.
- `pushswap.sorting`: `sort(machine)`, `radix_sort`, `sort_cases`,
  `sort_3`, `push_target_to_b`, `fill_index`, `is_sorted` and
  `bubble_sort`.
- `pushswap.stack`: `Stack`, `Element`, `Machine` and `get_max_bits`.
- `pushswap.cli`: `main(argv=None)`, the command's entry point.

The package also holds small utility modules the program is built on:

- `chars`: ASCII classification and case conversion (`isalpha`, `isdigit`,
  `toupper`, ...).
- `memory`: byte-buffer helpers on `bytearray` (`memset`, `memcpy`,
  `memmove`, `memcmp`, `calloc`, ...).
- `numbers`: `atoi`, `atol` with C integer widths, `itoa`, `n_digits`.
- `strings`: C-style string functions returning Python values (`split`,
  `strtrim`, `substr`, `strlcpy`, ...).
- `output`: a small printf dialect (`format_printf`, `printf`) and the
  `put*` writers.
- `lines`: `LineReader`, which reads lines from a stream in fixed-size
  chunks.
- `linkedlist`: a singly linked `LinkedList` of `Node`s.

## What it does not do

There is no checker: the package does not read a list of operations and
report whether they sort a given input. A `Machine` can replay operations
by calling its methods, and `is_sorted` tells whether the ranks on a stack
are in order, but ranks must first be set with `fill_index`.

## Running the tests

```
pip install ".[test]"
pytest
```