"""A singly linked list that keeps items in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("info", "link")

    def __init__(self, info: Any, link: _Node | None = None) -> None:
        self.info = info
        self.link = link


class LinkedList:
    """Unordered singly linked list with references to both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._count = 0
        for item in items:
            self.insert_last(item)

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._first is None

    def front(self) -> Any:
        """Return the first item; raise IndexError if the list is empty."""
        if self._first is None:
            raise IndexError("front of an empty list")
        return self._first.info

    def back(self) -> Any:
        """Return the last item; raise IndexError if the list is empty."""
        if self._last is None:
            raise IndexError("back of an empty list")
        return self._last.info

    def insert_first(self, item: Any) -> None:
        """Put item at the start of the list."""
        self._first = _Node(item, self._first)
        if self._last is None:
            self._last = self._first
        self._count += 1

    def insert_last(self, item: Any) -> None:
        """Put item at the end of the list."""
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.link = node
        self._last = node
        self._count += 1

    def remove(self, item: Any) -> None:
        """Remove the first occurrence of item.

        Raises ValueError if the list is empty or the item is absent.
        """
        if self._first is None:
            raise ValueError("Cannot delete from an empty list.")
        if self._first.info == item:
            self._first = self._first.link
            if self._first is None:
                self._last = None
            self._count -= 1
            return
        trail = self._first
        current = trail.link
        while current is not None:
            if current.info == item:
                trail.link = current.link
                if self._last is current:
                    self._last = trail
                self._count -= 1
                return
            trail, current = current, current.link
        raise ValueError("The item to be deleted is not in the list.")

    def search(self, item: Any) -> bool:
        """Return True when item is in the list."""
        return any(value == item for value in self)

    def clear(self) -> None:
        """Remove every item."""
        self._first = None
        self._last = None
        self._count = 0

    def copy(self) -> LinkedList:
        """Return an independent list with the same items."""
        return LinkedList(self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        current = self._first
        while current is not None:
            yield current.info
            current = current.link

    def __contains__(self, item: object) -> bool:
        return self.search(item)

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"