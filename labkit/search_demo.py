"""Compare linear and binary search on a list of even numbers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from labkit.sorting import SearchResult, binary_search, seq_search

LIST_LENGTH = 1000


def _describe(kind: str, item: Any, result: SearchResult) -> str:
    if result.found:
        return f"{kind} search: {item} found at position {result.index}"
    return f"{kind} search: {item} is not in list"


def report(items: Sequence[Any], item: Any) -> str:
    """Describe both searches for item in sorted items, with their comparison counts."""
    linear = seq_search(items, item)
    binary = binary_search(items, item)
    return "\n".join(
        [
            _describe("linear", item, linear),
            f"Linear count: {linear.comparisons}",
            _describe("binary", item, binary),
            f"Binary count: {binary.comparisons}",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers until -1 or end of input and report both searches for each."""
    parser = argparse.ArgumentParser(
        prog="search-demo",
        description="Search the even numbers below 2000; enter -1 to stop.",
    )
    parser.parse_args(argv)
    items = [index * 2 for index in range(LIST_LENGTH)]
    while True:
        try:
            raw = input("\nsearch for: ")
        except EOFError:
            break
        try:
            item = int(raw.strip())
        except ValueError:
            print("Please enter a whole number.")
            continue
        if item == -1:
            break
        print(report(items, item))
    print("Program end")
    return 0


if __name__ == "__main__":
    sys.exit(main())