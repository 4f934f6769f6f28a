"""Ranking the values on stack ``a`` and sorting them with the stack operations.

Up to five values are sorted by hand-picked sequences. Larger inputs are
sorted by a binary radix sort on the values' ranks.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, Optional

from .stack import Machine, Stack, get_max_bits


def bubble_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place, ascending and stable; return them."""
    size = len(items)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def create_sorted_array(values: Iterable[int]) -> list[tuple[int, int]]:
    """The values in ascending order, each paired with its rank."""
    ordered = bubble_sort(list(values))
    return [(value, rank) for rank, value in enumerate(ordered)]


def fill_index(stack: Stack) -> None:
    """Give every element of ``stack`` the rank of its value."""
    ranks: dict[int, int] = {}
    for value, rank in create_sorted_array(stack.values()):
        ranks.setdefault(value, rank)
    for element in stack:
        element.index = ranks[element.value]


def is_sorted(stack: Optional[Stack]) -> bool:
    """True when the ranks never decrease from top to bottom."""
    if stack is None or len(stack) < 2:
        return True
    ranks = stack.indices()
    return all(a <= b for a, b in zip(ranks, ranks[1:]))


def radix_sort(machine: Machine) -> None:
    """Sort ``a`` by the bits of its ranks, using ``b`` as the zero bucket."""
    a, b = machine.a, machine.b
    size = len(a)
    for bit in range(get_max_bits(size)):
        for _ in range(size):
            if (a.head.index >> bit) & 1 == 0:
                machine.pb()
            else:
                machine.ra()
        while len(b):
            machine.pa()


def sa_rra(machine: Machine, n_elem: int) -> None:
    """Fix the two three-element orders that take a swap and a reverse rotation."""
    tail = machine.a.tail.index
    if tail == n_elem - 3:
        machine.sa()
        machine.rra()
    elif tail == n_elem - 2:
        machine.rra()
        machine.sa()


def sort_3(machine: Machine, n_elem: int) -> None:
    """Sort three elements on ``a`` whose ranks are the top three of ``n_elem``."""
    head = machine.a.head.index
    tail = machine.a.tail.index
    if head == n_elem - 1:
        if tail == n_elem - 2:
            machine.ra()
        elif tail == n_elem - 3:
            sa_rra(machine, n_elem)
    elif head == n_elem - 2:
        if tail == n_elem - 1:
            machine.sa()
        elif tail == n_elem - 3:
            machine.rra()
    elif head == n_elem - 3:
        if tail == n_elem - 2:
            sa_rra(machine, n_elem)


def push_target_to_b(machine: Machine, target: int) -> None:
    """Bring the element ranked ``target`` to the top of ``a`` the short way and push it.

    Nothing more is done once ``a`` is already in order.
    """
    a = machine.a
    ranks = a.indices()
    if target not in ranks:
        raise ValueError(f"no element ranked {target} on stack a")
    pos = ranks.index(target)
    size = len(a)
    if not is_sorted(a):
        if pos <= size // 2:
            for _ in range(pos):
                machine.ra()
        else:
            for _ in range(size - pos):
                machine.rra()
    if not is_sorted(a):
        machine.pb()


def sort_cases(machine: Machine) -> None:
    """Sort a stack ``a`` of at most five ranked elements."""
    a = machine.a
    size = len(a)
    if size == 1 or is_sorted(a):
        return
    if size == 2:
        if a.head.index > a.tail.index:
            machine.sa()
    elif size == 3:
        sort_3(machine, 3)
    elif size == 4:
        push_target_to_b(machine, 0)
        sort_3(machine, 4)
        machine.pa()
    elif size == 5:
        push_target_to_b(machine, 0)
        push_target_to_b(machine, 1)
        sort_3(machine, 5)
        machine.pa()
        machine.pa()


def sort(machine: Machine) -> None:
    """Rank the values on ``a`` and sort them, logging each operation."""
    fill_index(machine.a)
    if len(machine.a) <= 5:
        sort_cases(machine)
    elif not is_sorted(machine.a):
        radix_sort(machine)


def solve(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values``, in the order they are carried out."""
    machine = Machine(values)
    sort(machine)
    return machine.operations