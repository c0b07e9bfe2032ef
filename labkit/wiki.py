"""Wiki page entries: parsing, a title index, term search and result formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from typing import TextIO

from labkit.records import read_rows

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving other characters alone."""
    return "".join(char.lower() if char.isascii() else char for char in text)


@dataclass(eq=False)
class WikiEntry:
    """A page title with its namespace and page id."""

    title: str
    namespace: str
    page_id: str

    @classmethod
    def from_raw(cls, raw: str) -> WikiEntry:
        """Build an entry from "namespace:page_id:title" data."""
        fields = raw.split(":")
        if len(fields) < 3:
            raise ValueError(f"expected namespace:page_id:title, got {raw!r}")
        return cls(title=fields[2], namespace=fields[0], page_id=fields[1])

    def sort_key(self) -> tuple[int, int]:
        """Return the namespace and page id as numbers."""
        return _to_int(self.namespace), _to_int(self.page_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WikiEntry):
            return NotImplemented
        return self.namespace == other.namespace and self.page_id == other.page_id

    def __hash__(self) -> int:
        return hash((self.namespace, self.page_id))

    def __lt__(self, other: WikiEntry) -> bool:
        if not isinstance(other, WikiEntry):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def describe(self) -> str:
        """Return the entry as labelled lines."""
        return f"Title: {self.title}\nNamespace: {self.namespace}\nID: {self.page_id}"


def parse_title(raw: str) -> str:
    """Return the title segment of raw data.

    The third colon-separated segment is the title; with fewer segments the
    last one present is returned, so a bare title comes back unchanged.
    """
    return raw.split(":")[:3][-1]


def insert_entry(
    entries: MutableMapping[str, WikiEntry], title: str, namespace: str, page_id: str
) -> bool:
    """Index an entry under its lower-cased title; an existing key is kept.

    Returns True when the entry was added.
    """
    key = _lower(parse_title(title))
    if key in entries:
        return False
    entries[key] = WikiEntry(title, namespace, page_id)
    return True


def insert_raw(entries: MutableMapping[str, WikiEntry], raw: str) -> bool:
    """Index an entry given as "namespace:page_id:title"; an existing key is kept."""
    key = _lower(parse_title(raw))
    if key in entries:
        return False
    entries[key] = WikiEntry.from_raw(raw)
    return True


def read_entries(stream: TextIO) -> dict[str, WikiEntry]:
    """Read colon-separated rows of namespace, page id and title into an index."""
    entries: dict[str, WikiEntry] = {}
    for fields in read_rows(stream, ":"):
        if len(fields) < 3:
            raise ValueError(f"expected 3 fields in {':'.join(fields)!r}")
        insert_entry(entries, fields[2], fields[0], fields[1])
    return entries


def search(entries: Mapping[str, WikiEntry], term: str) -> list[WikiEntry]:
    """Return entries whose indexed title contains term, ignoring case.

    Results carry the indexed (lower-case) title and come in descending title order.
    """
    needle = _lower(term)
    results = [
        WikiEntry(key, entry.namespace, entry.page_id)
        for key, entry in sorted(entries.items())
        if needle in key
    ]
    results.reverse()
    return results


def intersect(first: Iterable[WikiEntry], second: Iterable[WikiEntry]) -> list[WikiEntry]:
    """Return the entries of first that also occur in second, by namespace and id.

    Both inputs are sorted; a repeated entry is kept as often as it occurs in both.
    """
    left = iter(sorted(first, key=WikiEntry.sort_key))
    right = iter(sorted(second, key=WikiEntry.sort_key))
    result: list[WikiEntry] = []
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        key_a, key_b = a.sort_key(), b.sort_key()
        if key_a < key_b:
            a = next(left, None)
        elif key_b < key_a:
            b = next(right, None)
        else:
            result.append(a)
            a = next(left, None)
            b = next(right, None)
    return result


def search_all(entries: Mapping[str, WikiEntry], terms: Sequence[str]) -> list[WikiEntry]:
    """Return the entries that match every term."""
    terms = list(terms)
    if not terms:
        raise ValueError("at least one search term is needed")
    results = search(entries, terms[0])
    if len(terms) == 1:
        return results
    results = intersect(results, search(entries, terms[1]))
    for term in terms[2:]:
        results = intersect(search(entries, term), results)
    return results


def format_results(results: Sequence[WikiEntry]) -> str:
    """Return search results as an aligned table, or a no-results notice."""
    if not results:
        return "\nNo results found\n\n"
    longest = max(len(entry.title) for entry in results)
    rows = "".join(
        f"{entry.title}"
        f"{'[NS] '.rjust(8 + longest - len(entry.title))}"
        f"{entry.namespace}"
        f"{'[ID] '.rjust(18 - len(entry.namespace))}"
        f"{entry.page_id}\n"
        for entry in results
    )
    return f"\nSearch Results:\n------------------\n{rows}\n"