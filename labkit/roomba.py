"""The story of a vacuum robot planning its route through the house."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from labkit.animation import delay, loading_dots, typewriter
from labkit.graph import GraphFormatError, WeightedGraph, closest_vertex

TITLE = "The Tale of the Emotionally Distressed Roomba"
HEADER = "Rooms  Shortest Distance"
RULE = "-------------------------\n"


def distance_table(distances: Sequence[float]) -> str:
    """Return the header and one line per room with its distance."""
    rows = "".join(
        f"{room:>4}{float(distance):>12g}\n" for room, distance in enumerate(distances)
    )
    return f"{HEADER}\n{rows}"


def tell_story(
    distances: Sequence[float], stream: TextIO | None = None, pace: float = 1.0
) -> int:
    """Narrate the route; return the room the vacuum heads to.

    pace scales every pause; 0 prints the story at once.
    """
    out = sys.stdout if stream is None else stream

    def say(text: str, speed: float = 0.05) -> None:
        typewriter(text, speed * pace, out)

    def pause(seconds: float = 0.5) -> None:
        delay(seconds * pace)

    def dots(count: int) -> None:
        loading_dots(count, out, 0.5 * pace)

    def write(text: str) -> None:
        out.write(text)
        out.flush()

    write("\n")
    say("[Narrator] The Roomba wakes up in existential dread, just like any other Tuesday.\n")
    pause()
    say("[Narrator] It readies itself in the first room, ground zero.\n")
    pause()
    say("[Narrator] The sad little vaccuum begins scanning rooms to calculate todays path")
    dots(2)
    write("\n")
    pause()
    say("[Narrator] It comes back with the infamous NULLPTR EXCEPTION. Heartbroken, the Roomba tries again")
    dots(2)
    write("\n")
    pause()
    say("[Narrator] This time, the scan reports ")
    write(str(len(distances)))
    say(" rooms.\n\n")
    say(RULE, 0.025)
    pause()

    header, *rows = distance_table(distances).splitlines(keepends=True)
    write(header)
    pause()
    for row in rows:
        write(row)
        pause(0.25)

    closest = closest_vertex(list(distances))
    say(RULE, 0.025)
    pause()
    write("\n")
    say('[Roomba]   "Good enough... I guess"\n\n')
    pause()
    say("[Narrator] Even though the poor guy has no potential, it does its work without complaint.\n")
    pause()
    say("[Narrator] Hmm... Amazon could really use more vaccuums like this one.\n")
    pause()
    say("[Narrator] No workers' rights necessary. Not that they had any to begin with")
    dots(1)
    write("\n\n")
    pause()
    say('[Roomba]   "Navigating to the closest room')
    dots(1)
    say(" thats umm")
    dots(1)
    write(f" room {closest}")
    say(' I think?"\n')
    pause()
    say("[Narrator] Wondering why Cyber Jesus brought him into this world, the Roomba sulked to room ")
    write(f"{closest}.\n")
    pause()
    say("[Narrator] As the suffering vaccuum slaved away cleaning the Harrison Family Estate,")
    pause()
    say("\nthe Roomba managed to knock some framed pictures off of a table.\n")
    pause()
    for part in ('[Roomba]   "I\'d say I suck at my job, ', "but even that isn't true. ", "I SUCK "):
        say(part)
        pause()
    say('at SUCKING."\n')
    pause()
    for part in ('[Roomba]   "Its my only job! ', "Why did God curse me with this ", "AWFUL "):
        say(part)
        pause()
    say('EXISTENCE!"\n')
    pause(1)
    return closest


def _pace(value: str) -> float:
    pace = float(value)
    if pace < 0:
        raise argparse.ArgumentTypeError("pace must not be negative")
    return pace


def main(argv: Sequence[str] | None = None) -> int:
    """Read a weighted room graph and tell the vacuum's story."""
    parser = argparse.ArgumentParser(
        prog="roomba", description="Shortest distances from room 0, told as a story."
    )
    parser.add_argument("path", nargs="?", help="graph data file")
    parser.add_argument(
        "--pace", type=_pace, default=1.0, help="scale for all pauses (0 for none)"
    )
    args = parser.parse_args(argv)

    path = args.path
    if path is None:
        path = input("Enter input file name: ").strip()
        print()

    graph = WeightedGraph(50)
    try:
        with open(path, encoding="utf-8") as stream:
            graph.read(stream)
    except OSError:
        print("Cannot open input file.")
        return 1
    except GraphFormatError as error:
        print(f"Invalid graph data: {error}")
        return 1
    if len(graph) < 2:
        print("At least two rooms are needed.")
        return 1

    out = sys.stdout
    out.write("\n\n")
    typewriter(TITLE, 0.05 * args.pace, out)
    out.write("\n----------------------------------------------\n")
    delay(2 * args.pace)
    tell_story(graph.shortest_path(0), out, args.pace)
    out.write("\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())