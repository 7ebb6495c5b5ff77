"""A singly linked list of integers with sorted insertion and merging helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class LinkedList:
    """An ordered sequence supporting front/back insertion and sorted insertion."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in items:
            self.add_at_last(value)

    def insert(self, value: int) -> None:
        """Insert ``value`` keeping the list in ascending order.

        The new value is placed before the first node, past the head, whose
        value is not smaller than it.
        """
        if not self._items or self._items[0] > value:
            self._items.insert(0, value)
            return
        position = next(
            (
                index
                for index, existing in enumerate(self._items[1:], start=1)
                if existing >= value
            ),
            len(self._items),
        )
        self._items.insert(position, value)

    def add_at_front(self, value: int) -> None:
        """Put ``value`` at the head of the list."""
        self._items.insert(0, value)

    def add_at_last(self, value: int) -> None:
        """Put ``value`` at the tail of the list."""
        self._items.append(value)

    def remove_at(self, index: int) -> int:
        """Remove and return the value at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")
        return self._items.pop(index)

    def last(self) -> int:
        """Return the value at the tail of the list."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items[-1]

    def render(self) -> str:
        """Return the list drawn as a chain followed by its item count."""
        chain = "".join(f"{value} -> " for value in self._items)
        return f"{chain}END\nItems In the list: {len(self._items)}\n\n"

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"


def merge_into(target: LinkedList, other: LinkedList) -> LinkedList:
    """Insert every value of ``other`` into ``target`` in sorted order."""
    for value in list(other):
        target.insert(value)
    return target


def concatenate(first: LinkedList, second: LinkedList) -> LinkedList:
    """Append the values of ``second`` to the end of ``first`` and return ``first``."""
    for value in list(second):
        first.add_at_last(value)
    return first


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return a new sorted list holding the values of both lists."""
    merged = LinkedList()
    for source in (first, second):
        for value in source:
            merged.insert(value)
    return merged