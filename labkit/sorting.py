"""Searching and in-place sorting of sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, NamedTuple


class SearchResult(NamedTuple):
    """Where an item was found (None if absent) and how many comparisons it took."""

    index: int | None
    comparisons: int

    @property
    def found(self) -> bool:
        return self.index is not None


def seq_search(items: Sequence[Any], item: Any) -> SearchResult:
    """Scan items from the start until item is found."""
    comparisons = 0
    for index, value in enumerate(items):
        comparisons += 1
        if value == item:
            return SearchResult(index, comparisons)
    return SearchResult(None, comparisons)


def binary_search(items: Sequence[Any], item: Any) -> SearchResult:
    """Search sorted items by repeatedly halving the range."""
    first, last = 0, len(items) - 1
    comparisons = 0
    while first <= last:
        mid = (first + last) // 2
        comparisons += 1
        if items[mid] == item:
            return SearchResult(mid, comparisons)
        if items[mid] > item:
            last = mid - 1
        else:
            first = mid + 1
    return SearchResult(None, comparisons)


def _swap(items: MutableSequence[Any], first: int, second: int) -> None:
    items[first], items[second] = items[second], items[first]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place by swapping adjacent pairs."""
    length = len(items)
    for iteration in range(1, length):
        for index in range(length - iteration):
            if items[index] > items[index + 1]:
                _swap(items, index, index + 1)


def _min_location(items: MutableSequence[Any], first: int, last: int) -> int:
    min_index = first
    for loc in range(first + 1, last + 1):
        if items[loc] < items[min_index]:
            min_index = loc
    return min_index


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place by moving the smallest remaining item forward."""
    length = len(items)
    for loc in range(length):
        _swap(items, loc, _min_location(items, loc, length - 1))


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place by inserting each item into the sorted prefix."""
    for first_out_of_order in range(1, len(items)):
        if items[first_out_of_order] < items[first_out_of_order - 1]:
            temp = items[first_out_of_order]
            location = first_out_of_order
            while True:
                items[location] = items[location - 1]
                location -= 1
                if not (location > 0 and items[location - 1] > temp):
                    break
            items[location] = temp


def _partition(items: MutableSequence[Any], first: int, last: int) -> int:
    _swap(items, first, (first + last) // 2)
    pivot = items[first]
    small_index = first
    for index in range(first + 1, last + 1):
        if items[index] < pivot:
            small_index += 1
            _swap(items, small_index, index)
    _swap(items, first, small_index)
    return small_index


def _quick_sort(items: MutableSequence[Any], first: int, last: int) -> None:
    while first < last:
        pivot = _partition(items, first, last)
        # Recurse on the smaller side to keep the stack shallow.
        if pivot - first < last - pivot:
            _quick_sort(items, first, pivot - 1)
            first = pivot + 1
        else:
            _quick_sort(items, pivot + 1, last)
            last = pivot - 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place with quicksort, pivoting on the middle item."""
    _quick_sort(items, 0, len(items) - 1)


def _heapify(items: MutableSequence[Any], low: int, high: int) -> None:
    temp = items[low]
    large_index = 2 * low + 1
    while large_index <= high:
        if large_index < high and items[large_index] < items[large_index + 1]:
            large_index += 1
        if temp > items[large_index]:
            break
        items[low] = items[large_index]
        low = large_index
        large_index = 2 * low + 1
    items[low] = temp


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place with heapsort."""
    length = len(items)
    for index in range(length // 2 - 1, -1, -1):
        _heapify(items, index, length - 1)
    for last_out_of_order in range(length - 1, -1, -1):
        _swap(items, 0, last_out_of_order)
        _heapify(items, 0, last_out_of_order - 1)