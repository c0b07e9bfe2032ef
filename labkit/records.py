"""Delimited records and a city lookup by FIPS code."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


def split_row(line: str, delimiter: str = ",") -> list[str]:
    """Split line at every delimiter; empty fields are kept."""
    return line.split(delimiter)


def read_rows(stream: TextIO, delimiter: str = ",") -> Iterator[list[str]]:
    """Yield the fields of each line of stream."""
    for line in stream:
        yield split_row(line.rstrip("\r\n"), delimiter)


@dataclass(eq=False)
class City:
    """A place with its state, FIPS code, population and location."""

    state_id: str
    name: str
    place_fips: str
    population: int
    geolocation: str

    @classmethod
    def from_row(cls, fields: Sequence[str]) -> City:
        """Build a city from state, name, FIPS, population, latitude and longitude fields."""
        if len(fields) < 6:
            raise ValueError(f"expected 6 fields, got {len(fields)}")
        try:
            population = int(fields[3])
        except ValueError:
            raise ValueError(f"invalid population: {fields[3]!r}") from None
        return cls(
            state_id=fields[0],
            name=fields[1],
            place_fips=fields[2],
            population=population,
            geolocation=f"{fields[4]},{fields[5]}",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, City):
            return NotImplemented
        return self.place_fips == other.place_fips

    def __hash__(self) -> int:
        return hash(self.place_fips)


def load_cities(stream: TextIO) -> dict[str, City]:
    """Read cities keyed by FIPS code, sorted by code; the first of duplicates wins."""
    cities: dict[str, City] = {}
    for fields in read_rows(stream):
        city = City.from_row(fields)
        cities.setdefault(city.place_fips, city)
    return dict(sorted(cities.items()))


def describe_city(city: City) -> str:
    """Return the lookup report for city."""
    return (
        "City Found\n"
        f"Name: {city.name}\n"
        f"State ID: {city.state_id}\n"
        f"Population: {city.population}\n"
        f"Geolocation: {city.geolocation}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Load a city file and look one city up by FIPS code."""
    parser = argparse.ArgumentParser(prog="city-lookup", description="Find a city by FIPS code.")
    parser.add_argument("path", nargs="?", default="500Cities.csv", help="city CSV file")
    parser.add_argument("--fips", help="FIPS code to look up")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as stream:
            cities = load_cities(stream)
    except OSError:
        print(f"Cannot open {args.path}")
        return 1
    except ValueError as error:
        print(f"Invalid city data: {error}")
        return 1

    fips = args.fips
    if fips is None:
        try:
            fips = input("Search for city by FIPS: ").strip()
        except EOFError:
            fips = ""

    city = cities.get(fips)
    if city is None:
        print("\nCity Not Found")
    else:
        print("\n" + describe_city(city) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())