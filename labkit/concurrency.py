"""Small demonstrations of threads sharing output and lists under a lock."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from labkit.records import read_rows


def print_numbered(messages: Iterable[str], stream: TextIO | None = None) -> None:
    """Write "<n> : <message>" for each message, one thread per message."""
    out = sys.stdout if stream is None else stream
    lock = threading.Lock()

    def emit(number: int, message: str) -> None:
        line = f"{number} : {message}\n"
        with lock:
            out.write(line)
            out.flush()

    threads = [
        threading.Thread(target=emit, args=(number, message))
        for number, message in enumerate(messages)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _check_interval(interval: int) -> None:
    if interval <= 0:
        raise ValueError("interval must be positive")


def add_multiples(
    target: list[int], maximum: int, interval: int, lock: threading.Lock
) -> None:
    """Append every multiple of interval below maximum to target, holding lock throughout."""
    _check_interval(interval)
    with lock:
        target.extend(value for value in range(maximum) if value % interval == 0)


def fill_concurrently(maximum: int, intervals: Sequence[int]) -> list[int]:
    """Fill one shared list from a thread per interval and return it.

    Each thread adds its multiples as one uninterrupted block.
    """
    for interval in intervals:
        _check_interval(interval)
    shared: list[int] = []
    lock = threading.Lock()
    threads = [
        threading.Thread(target=add_multiples, args=(shared, maximum, interval, lock))
        for interval in intervals
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared


def collect_titles(paths: Iterable[str], stream: TextIO | None = None) -> list[str]:
    """Read colon-separated wiki rows from each path in its own thread.

    The third field of every row is collected and reported as it is read.
    """
    out = sys.stdout if stream is None else stream
    paths = list(paths)
    titles: list[str] = []
    lock = threading.Lock()

    def read(path: str) -> None:
        with open(path, encoding="utf-8") as handle:
            for fields in read_rows(handle, ":"):
                if len(fields) < 3:
                    raise ValueError(f"{path}: expected 3 fields in {':'.join(fields)!r}")
                with lock:
                    titles.append(fields[2])
                    out.write(f"[File: {path}] - {fields[2]}\n")
        with lock:
            out.write(f"titles count : {len(titles)}\n")
            out.flush()

    with ThreadPoolExecutor(max_workers=max(1, len(paths))) as pool:
        futures = [pool.submit(read, path) for path in paths]
    for future in futures:
        future.result()
    return titles