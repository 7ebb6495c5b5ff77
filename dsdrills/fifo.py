"""A first-in, first-out queue of numbers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


def _format_number(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Queue:
    """A queue; iteration runs from the head to the back."""

    def __init__(self, items: Iterable[float] = ()) -> None:
        self._items: deque[float] = deque()
        for value in items:
            self.enqueue(value)

    def enqueue(self, value: float) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> float:
        """Remove and return the value at the head of the queue."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def head(self) -> int:
        """Return the head value, truncated to an integer."""
        if not self._items:
            raise IndexError("Queue is empty")
        return int(self._items[0])

    def back(self) -> int:
        """Return the back value, truncated to an integer."""
        if not self._items:
            raise IndexError("Queue is empty")
        return int(self._items[-1])

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._items

    def remove_negatives(self) -> None:
        """Drop every negative value, keeping the others in order."""
        self._items = deque(value for value in self._items if value >= 0)

    def render(self) -> str:
        """Return the queue drawn from head to back, followed by its item count."""
        if not self._items:
            return "Queue is empty\n"
        chain = "".join(f"{_format_number(value)} -> " for value in self._items)
        return f"{chain}END\nItems in the queue: {len(self._items)}\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"