"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Element:
    """A value on a stack together with its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A stack whose top is its front; elements can be rotated either way."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[Element] = deque()
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def head(self) -> Optional[Element]:
        """The top element, or None when empty."""
        return self._items[0] if self._items else None

    @property
    def tail(self) -> Optional[Element]:
        """The bottom element, or None when empty."""
        return self._items[-1] if self._items else None

    def append(self, value: int) -> Element:
        """Put a new element holding ``value`` at the bottom."""
        element = Element(value)
        self._items.append(element)
        return element

    def push_front(self, element: Element) -> None:
        """Put ``element`` on top."""
        self._items.appendleft(element)

    def pop_front(self) -> Element:
        """Take the top element off; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap(self) -> bool:
        """Exchange the two top elements; False when there are fewer than two."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom; False with fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top; False with fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [element.value for element in self._items]

    def indices(self) -> list[int]:
        """The ranks from top to bottom."""
        return [element.index for element in self._items]


class Machine:
    """Stacks ``a`` and ``b`` and the log of operations carried out on them.

    Single-stack operations that change nothing are not logged; the combined
    operations ``ss``, ``rr`` and ``rrr`` are always logged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[str] = []

    def _log(self, done: bool, name: str) -> None:
        if done:
            self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two of ``a``."""
        self._log(self.a.swap(), "sa")

    def sb(self) -> None:
        """Swap the top two of ``b``."""
        self._log(self.b.swap(), "sb")

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self.a.swap()
        self.b.swap()
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if len(self.b):
            self.a.push_front(self.b.pop_front())
            self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if len(self.a):
            self.b.push_front(self.a.pop_front())
            self.operations.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        self._log(self.a.rotate(), "ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        self._log(self.b.rotate(), "rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate()
        self.b.rotate()
        self.operations.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        self._log(self.a.reverse_rotate(), "rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        self._log(self.b.reverse_rotate(), "rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self.operations.append("rrr")


def get_max_bits(size: int) -> int:
    """Number of bits needed to write the largest rank, ``size - 1``."""
    return max(size - 1, 0).bit_length()