"""Directed graphs on adjacency lists, with weighted shortest paths."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from labkit.linked_list import LinkedList
from labkit.linked_queue import LinkedQueue

END_OF_LIST = -999
NO_EDGE = sys.float_info.max


class GraphFormatError(ValueError):
    """Raised when graph data cannot be parsed."""


class _Tokens:
    """Whitespace-separated tokens of graph data."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def _next(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise GraphFormatError(f"missing {what}") from None

    @staticmethod
    def _int(token: str, what: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise GraphFormatError(f"invalid {what}: {token!r}") from None

    def integer(self, what: str) -> int:
        return self._int(self._next(what), what)

    def optional_integer(self, what: str) -> int | None:
        token = next(self._tokens, None)
        return None if token is None else self._int(token, what)

    def number(self, what: str) -> float:
        token = self._next(what)
        try:
            return float(token)
        except ValueError:
            raise GraphFormatError(f"invalid {what}: {token!r}") from None


class Graph:
    """Directed graph with at most max_size vertices."""

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._lists = [LinkedList() for _ in range(max_size)]
        self._size = 0

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.max_size:
            raise IndexError(f"vertex {vertex} out of range")

    def is_empty(self) -> bool:
        """Return True when the graph has no vertices."""
        return self._size == 0

    def add_edge(self, vertex: int, adjacent: int) -> None:
        """Add an edge from vertex to adjacent, growing the vertex count as needed."""
        self._check(vertex)
        self._check(adjacent)
        self._lists[vertex].insert_last(adjacent)
        self._size = max(self._size, vertex + 1, adjacent + 1)

    def adjacent(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to vertex, in insertion order."""
        self._check(vertex)
        return list(self._lists[vertex])

    def clear(self) -> None:
        """Remove every vertex and edge."""
        for adjacency in self._lists:
            adjacency.clear()
        self._size = 0

    def read(self, stream: TextIO) -> None:
        """Replace the graph with adjacency lists read from stream.

        The data starts with the vertex count, followed by one line per vertex:
        the vertex, its adjacent vertices, and -999.
        """
        self._read_lists(_Tokens(stream.read()))

    def _read_lists(self, tokens: _Tokens) -> None:
        self.clear()
        count = tokens.integer("vertex count")
        if not 0 <= count <= self.max_size:
            raise GraphFormatError(
                f"vertex count {count} outside 0..{self.max_size}"
            )
        for _ in range(count):
            vertex = tokens.integer("vertex")
            self._require_vertex(vertex, count)
            adjacent = tokens.integer("adjacent vertex")
            while adjacent != END_OF_LIST:
                self._require_vertex(adjacent, count)
                self._lists[vertex].insert_last(adjacent)
                adjacent = tokens.integer("adjacent vertex")
        self._size = count

    @staticmethod
    def _require_vertex(vertex: int, count: int) -> None:
        if not 0 <= vertex < count:
            raise GraphFormatError(f"vertex {vertex} outside 0..{count - 1}")

    def _dft(self, start: int, visited: set[int], order: list[int]) -> None:
        visited.add(start)
        order.append(start)
        stack = [iter(self._lists[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._lists[neighbour]))
                    break
            else:
                stack.pop()

    def depth_first(self) -> list[int]:
        """Return every vertex in depth-first order."""
        visited: set[int] = set()
        order: list[int] = []
        for vertex in range(self._size):
            if vertex not in visited:
                self._dft(vertex, visited, order)
        return order

    def depth_first_from(self, vertex: int) -> list[int]:
        """Return the vertices reachable from vertex in depth-first order."""
        if not 0 <= vertex < self._size:
            raise IndexError(f"vertex {vertex} out of range")
        order: list[int] = []
        self._dft(vertex, set(), order)
        return order

    def breadth_first(self) -> list[int]:
        """Return every vertex in breadth-first order."""
        visited: set[int] = set()
        order: list[int] = []
        queue = LinkedQueue()
        for start in range(self._size):
            if start in visited:
                continue
            queue.add(start)
            visited.add(start)
            order.append(start)
            while not queue.is_empty():
                for neighbour in self._lists[queue.remove()]:
                    if neighbour not in visited:
                        queue.add(neighbour)
                        visited.add(neighbour)
                        order.append(neighbour)
        return order

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        lines = "".join(
            f"{index} {self._lists[index]}\n" for index in range(self._size)
        )
        return lines + "\n"


class WeightedGraph(Graph):
    """Directed graph with a weight on each edge."""

    def __init__(self, max_size: int = 0) -> None:
        super().__init__(max_size)
        self._weights = [[NO_EDGE] * max_size for _ in range(max_size)]

    def read(self, stream: TextIO) -> None:
        """Read adjacency lists followed by weight lines.

        Each weight line holds a vertex, then pairs of adjacent vertex and
        weight, and ends with -999.
        """
        tokens = _Tokens(stream.read())
        self._read_lists(tokens)
        for row in self._weights:
            row[:] = [NO_EDGE] * self.max_size
        count = len(self)
        while (vertex := tokens.optional_integer("vertex")) is not None:
            self._require_vertex(vertex, count)
            adjacent = tokens.integer("adjacent vertex")
            while adjacent != END_OF_LIST:
                self._require_vertex(adjacent, count)
                self._weights[vertex][adjacent] = tokens.number("weight")
                adjacent = tokens.integer("adjacent vertex")

    def set_weight(self, vertex: int, adjacent: int, weight: float) -> None:
        """Set the weight of the edge from vertex to adjacent."""
        self._check(vertex)
        self._check(adjacent)
        self._weights[vertex][adjacent] = float(weight)

    def weight(self, vertex: int, adjacent: int) -> float:
        """Return the weight of the edge from vertex to adjacent."""
        self._check(vertex)
        self._check(adjacent)
        return self._weights[vertex][adjacent]

    def shortest_path(self, vertex: int) -> list[float]:
        """Return the smallest total weight from vertex to every vertex."""
        size = len(self)
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} out of range")
        smallest = self._weights[vertex][:size]
        found = [False] * size
        found[vertex] = True
        smallest[vertex] = 0.0
        for _ in range(size - 1):
            candidates = [
                (distance, index)
                for index, distance in enumerate(smallest)
                if not found[index] and distance < NO_EDGE
            ]
            if not candidates:
                break
            min_weight, nearest = min(candidates)
            found[nearest] = True
            for index, edge in enumerate(self._weights[nearest][:size]):
                if not found[index] and min_weight + edge < smallest[index]:
                    smallest[index] = min_weight + edge
        return smallest


def _truncate(value: float) -> float:
    return value if math.isinf(value) else math.trunc(value)


def closest_vertex(distances: list[float]) -> int:
    """Pick the room the story sends the vacuum to.

    Distances are compared against the whole-number part of room 1's
    distance, so room 0 is returned unless a later room is strictly closer.
    """
    if len(distances) < 2:
        raise ValueError("at least two distances are needed")
    best = 0
    bound = _truncate(distances[1])
    for index, distance in enumerate(distances[1:], start=1):
        if distance < bound:
            best = index
            bound = _truncate(distance)
    return best