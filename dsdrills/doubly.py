"""A doubly linked list of integers that can be walked from either end."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class DoublyList:
    """A list growing at both ends; iteration runs from the front."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque()
        for value in items:
            self.add_at_rear(value)

    def add_at_front(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self._items.appendleft(value)

    def add_at_rear(self, value: int) -> None:
        """Put ``value`` at the rear of the list."""
        self._items.append(value)

    def render_from_front(self) -> str:
        """Return the list drawn from front to rear."""
        chain = "".join(f"{value} -> " for value in self)
        return f"START -> {chain}END\n"

    def render_from_rear(self) -> str:
        """Return the list drawn from rear to front."""
        chain = "".join(f"{value} <- " for value in reversed(self))
        return f"END <- {chain}START\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"DoublyList({list(self._items)!r})"