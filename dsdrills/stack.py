"""A last-in, first-out stack of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in items:
            self.push(value)

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def reversed(self) -> Stack:
        """Return a new stack whose top is this stack's bottom."""
        return Stack(self)

    def render(self) -> str:
        """Return the stack drawn from the top down, followed by its item count."""
        chain = "".join(f"{value} -> " for value in self)
        return f"{chain}END\nItems in the stack: {len(self._items)}\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"