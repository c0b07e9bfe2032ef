"""Fill a binary search tree with random keys and look keys up interactively."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections.abc import Sequence
from typing import TextIO

from labkit.bst import BinarySearchTree

DEFAULT_COUNT = 100_000_000
DEFAULT_REPORT_EVERY = 1_000_000


def random_key(rng: random.Random | None = None) -> str:
    """Return two upper-case letters followed by eight digits."""
    source = random if rng is None else rng
    letters = "".join(source.choice(string.ascii_uppercase) for _ in range(2))
    digits = "".join(source.choice(string.digits) for _ in range(8))
    return letters + digits


def load_random(
    tree: BinarySearchTree,
    count: int,
    rng: random.Random | None = None,
    stream: TextIO | None = None,
    report_every: int = DEFAULT_REPORT_EVERY,
) -> int:
    """Insert count new random keys into tree; return how many keys were tried.

    Every report_every insertions, the running total and the key are written.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if report_every <= 0:
        raise ValueError("report_every must be positive")
    out = sys.stdout if stream is None else stream
    inserted = 0
    attempts = 0
    while inserted < count:
        key = random_key(rng)
        attempts += 1
        if tree.insert(key):
            inserted += 1
            if inserted % report_every == 0:
                out.write(f"{inserted} {key}\n")
                out.flush()
    return attempts


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return number


def main(argv: Sequence[str] | None = None) -> int:
    """Load random keys, then report searches for keys read until end of input."""
    parser = argparse.ArgumentParser(
        prog="large-bst", description="Search a tree of random keys."
    )
    parser.add_argument("--count", type=_non_negative, default=DEFAULT_COUNT)
    parser.add_argument("--report-every", type=_positive, default=DEFAULT_REPORT_EVERY)
    parser.add_argument("--seed", type=int, help="seed for the random keys")
    args = parser.parse_args(argv)

    tree = BinarySearchTree()
    rng = random.Random(args.seed)
    print("loading BST ...")
    load_random(tree, args.count, rng, sys.stdout, args.report_every)
    print("loading BST complete")

    while True:
        try:
            key = input("search key: ").strip()
        except EOFError:
            break
        result = tree.search_with_count(key)
        print("found" if result.found else "not found")
        print(f"Comparisons: {result.comparisons}")
    return 0


if __name__ == "__main__":
    sys.exit(main())