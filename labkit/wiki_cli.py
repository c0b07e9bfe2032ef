"""Command line for listing wiki data and searching titles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TextIO

from labkit.records import read_rows
from labkit.wiki import WikiEntry, format_results, insert_raw, read_entries, search_all

SAMPLE_ROWS = (
    "13576300:156567:Hogwarts School Of Witchcraft And Wizardry",
    "13576300:156542:The Arrival (The Twilight Zone)",
    "13576300:156544:Cian Ciaran",
    "13576300:156545:B-sides",
    "13576300:156546:Stepin Fetchit",
    "13576300:156547:Remix",
    "13576300:156548:Gruff Rhys",
    "13576300:156549:Gruff Remix",
)


def dump_rows(stream: TextIO, out: TextIO | None = None) -> int:
    """Write the namespace, page id and title of every row; return the row count."""
    target = sys.stdout if out is None else out
    count = 0
    for fields in read_rows(stream, ":"):
        if len(fields) < 3:
            raise ValueError(f"expected 3 fields in {':'.join(fields)!r}")
        target.write(f"ns: {fields[0]} pageid: {fields[1]} title: {fields[2]}\n")
        count += 1
    return count


def run_queries(
    entries: Mapping[str, WikiEntry], lines: Iterable[str], out: TextIO | None = None
) -> int:
    """Answer each line of search terms until a line starting with "exit".

    Blank lines are skipped. Returns the number of queries answered.
    """
    target = sys.stdout if out is None else out
    answered = 0
    for line in lines:
        terms = line.split()
        if not terms:
            continue
        if terms[0] == "exit":
            break
        target.write(format_results(search_all(entries, terms)))
        target.flush()
        answered += 1
    return answered


def _prompted_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Load wiki data and answer searches read from standard input."""
    parser = argparse.ArgumentParser(
        prog="wiki-search", description="Search wiki page titles for all given words."
    )
    parser.add_argument("path", nargs="?", default="wikiData.dat", help="wiki data file")
    parser.add_argument("--dump", action="store_true", help="list every row and stop")
    parser.add_argument("--sample", action="store_true", help="search a few built-in titles")
    args = parser.parse_args(argv)

    entries: dict[str, WikiEntry] = {}
    if args.sample:
        for raw in SAMPLE_ROWS:
            insert_raw(entries, raw)
    else:
        try:
            with open(args.path, encoding="utf-8") as handle:
                if args.dump:
                    dump_rows(handle)
                    return 0
                entries = read_entries(handle)
        except OSError:
            print("File failed to load")
            return 1
        except ValueError as error:
            print(f"Invalid wiki data: {error}")
            return 1
        print("wikiData loaded successfully!\n")

    run_queries(entries, _prompted_lines("Enter search term: "))
    return 0


if __name__ == "__main__":
    sys.exit(main())