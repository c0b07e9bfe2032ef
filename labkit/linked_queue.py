"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when an empty queue is read from or removed from."""


class _Node:
    __slots__ = ("info", "link")

    def __init__(self, info: Any) -> None:
        self.info = info
        self.link: _Node | None = None


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._count = 0
        for item in items:
            self.add(item)

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._front is None

    def is_full(self) -> bool:
        """A linked queue never fills up."""
        return False

    def clear(self) -> None:
        """Remove every item."""
        self._front = None
        self._rear = None
        self._count = 0

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("front of an empty queue")
        return self._front.info

    def back(self) -> Any:
        """Return the item at the rear without removing it."""
        if self._rear is None:
            raise QueueEmptyError("back of an empty queue")
        return self._rear.info

    def add(self, item: Any) -> None:
        """Append item at the rear."""
        node = _Node(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.link = node
        self._rear = node
        self._count += 1

    def remove(self) -> Any:
        """Remove and return the item at the front."""
        if self._front is None:
            raise QueueEmptyError("Cannot remove from an empty queue")
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.info

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        current = self._front
        while current is not None:
            yield current.info
            current = current.link

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"