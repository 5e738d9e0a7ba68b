"""Stacks of ranked integers and the push_swap instruction set."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional, TextIO, Union


@dataclass
class Element:
    """A value on a stack together with its rank among all values (-1 if unranked)."""

    value: int
    index: int = -1


class Stack:
    """A stack whose first element is the top."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._items: deque[Element] = deque(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def swap(self) -> bool:
        """Exchange the two top elements; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        items = self._items
        items[0], items[1] = items[1], items[0]
        return True

    def push_from(self, other: "Stack") -> bool:
        """Move the top of ``other`` onto this stack; False if ``other`` is empty."""
        if not other._items:
            return False
        self._items.appendleft(other._items.popleft())
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top; False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def is_sorted(self) -> bool:
        """True if values never decrease from top to bottom."""
        return all(
            first.value <= second.value
            for first, second in zip(self._items, islice(self._items, 1, None))
        )

    def distance_to(self, index: int) -> int:
        """Position of the element ranked ``index``, or the stack size if absent."""
        for position, element in enumerate(self._items):
            if element.index == index:
                return position
        return len(self._items)

    def values(self) -> list[int]:
        return [element.value for element in self._items]

    def indexes(self) -> list[int]:
        return [element.index for element in self._items]


def index_stack(stack: Stack) -> None:
    """Rank the unranked elements of ``stack`` by value, starting from 0.

    Equal values are ranked in the order they appear.
    """
    unranked = sorted(
        (element for element in stack if element.index == -1),
        key=lambda element: element.value,
    )
    for rank, element in enumerate(unranked):
        element.index = rank


def build_stack(values: Iterable[int]) -> Stack:
    """Build a ranked stack whose top is the first value."""
    stack = Stack(Element(value) for value in values)
    index_stack(stack)
    return stack


class PushSwap:
    """Two stacks and the named instructions that act on them.

    Every instruction that changes a stack is recorded in ``ops`` and written,
    one per line, to ``out`` (standard output when ``out`` is None).
    """

    def __init__(
        self,
        a: Union[Stack, Iterable[int]],
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = a if isinstance(a, Stack) else build_stack(a)
        self.b = Stack()
        self.out = out
        self.ops: list[str] = []

    def _record(self, name: str) -> bool:
        self.ops.append(name)
        stream = self.out if self.out is not None else sys.stdout
        stream.write(name + "\n")
        return True

    def sa(self) -> bool:
        return self.a.swap() and self._record("sa")

    def sb(self) -> bool:
        return self.b.swap() and self._record("sb")

    def ss(self) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.swap()
        self.b.swap()
        return self._record("ss")

    def pa(self) -> bool:
        return self.a.push_from(self.b) and self._record("pa")

    def pb(self) -> bool:
        return self.b.push_from(self.a) and self._record("pb")

    def ra(self) -> bool:
        return self.a.rotate() and self._record("ra")

    def rb(self) -> bool:
        return self.b.rotate() and self._record("rb")

    def rr(self) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate()
        self.b.rotate()
        return self._record("rr")

    def rra(self) -> bool:
        return self.a.reverse_rotate() and self._record("rra")

    def rrb(self) -> bool:
        return self.b.reverse_rotate() and self._record("rrb")

    def rrr(self) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        return self._record("rrr")

    def make_top(self, distance: int) -> None:
        """Bring the element ``distance`` places down stack a to its top, the short way."""
        if distance == 0:
            return
        size = len(self.a)
        if distance <= size // 2:
            for _ in range(distance):
                self.ra()
        else:
            for _ in range(size - distance):
                self.rra()