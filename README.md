# labkit

Classic data structures and algorithms in plain Python, with a few small
command-line programs built on them. No third-party dependencies.

## What is inside

| Module                 | Contents                                                              |
|------------------------|-----------------------------------------------------------------------|
| `labkit.linked_list`   | `LinkedList`: singly linked list with front and back insertion        |
| `labkit.linked_queue`  | `LinkedQueue`, `QueueEmptyError`: an unbounded FIFO queue             |
| `labkit.graph`         | `Graph`, `WeightedGraph`, `closest_vertex`, `GraphFormatError`        |
| `labkit.bst`           | `BinarySearchTree`, `TreeSearch`: traversals, height, counts          |
| `labkit.sorting`       | `seq_search`, `binary_search` (returning `SearchResult`); bubble, selection, insertion, quick and heap sort, all in place |
| `labkit.records`       | `split_row`, `read_rows`, the `City` record, `load_cities`, `describe_city` |
| `labkit.wiki`          | `WikiEntry`, `parse_title`, `insert_entry`, `insert_raw`, `read_entries`, `search`, `intersect`, `search_all`, `format_results` |
| `labkit.concurrency`   | `print_numbered`, `add_multiples`, `fill_concurrently`, `collect_titles` |
| `labkit.animation`     | `clear_screen`, `clear_characters`, `delay`, `loading_dots`, `typewriter` |
| `labkit.roomba`        | `distance_table`, `tell_story` and the `labkit-roomba` command        |
| `labkit.search_demo`   | `report` and the `labkit-search` command                              |
| `labkit.large_bst`     | `random_key`, `load_random` and the `labkit-large-bst` command        |
| `labkit.wiki_cli`      | `dump_rows`, `run_queries` and the `labkit-wiki` command              |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library examples

```python
from labkit.linked_list import LinkedList
from labkit.linked_queue import LinkedQueue
from labkit.bst import BinarySearchTree

items = LinkedList([3, 1, 4])
items.insert_first(0)
items.insert_last(9)
print(len(items), 4 in items, items.front(), items.back())   # 5 True 0 9
items.remove(1)          # ValueError if the item is absent

queue = LinkedQueue([1, 2])
queue.add(3)
print(queue.remove(), queue.front())   # 1 2; QueueEmptyError when empty

tree = BinarySearchTree(["m", "c", "x"])
tree.insert("a")                       # False if already present
print("c" in tree, tree.inorder(), tree.height())
print(tree.search_with_count("x"))     # TreeSearch(found=True, comparisons=3)
```

Searching and sorting:

```python
from labkit.sorting import binary_search, quick_sort

data = [5, 2, 8, 1]
quick_sort(data)                 # sorts in place
result = binary_search(data, 8)
print(result.index, result.comparisons, result.found)
```

Shortest distances on a weighted graph:

```python
from labkit.graph import WeightedGraph, closest_vertex

graph = WeightedGraph(50)
with open("graph.txt", encoding="utf-8") as stream:
    graph.read(stream)
distances = graph.shortest_path(0)
print(distances, closest_vertex(distances))
```

`Graph` also offers `depth_first()`, `depth_first_from(vertex)` and
`breadth_first()`, each returning the visiting order as a list. Bad data raises
`GraphFormatError`.

### Graph file format

The first number is the vertex count (at most the graph's `max_size`). Then,
for each vertex, its number followed by its adjacent vertices, ended by `-999`.
After that come the weights: a vertex number, then pairs of adjacent vertex and
weight, ended by `-999`, repeated until the end of the data. Edges without a
weight count as unreachable.

```
3
0 1 2 -999
1 2 -999
2 -999
0 1 4 2 10 -999
1 2 3 -999
2 -999
```

## Command-line programs

- `labkit-roomba [path] [--pace N]` reads a weighted graph file (asking for
  the file name if none is given) into a graph of up to 50 rooms and narrates
  a robot vacuum working out the shortest distance from room 0 to every room.
  `--pace` scales every pause; `--pace 0` prints at once. At least two rooms
  are needed.
- `labkit-search` searches the even numbers 0 to 1998 by linear and binary
  search and reports the position and comparison count of each; enter `-1` or
  end the input to stop.
- `labkit-cities [path] [--fips CODE]` loads a city CSV file (default
  `500Cities.csv`; fields: state, name, FIPS, population, latitude, longitude)
  and looks a city up by FIPS code, asking for the code if `--fips` is not given.
- `labkit-large-bst [--count N] [--report-every N] [--seed N]` fills a binary
  search tree with random keys (two letters, eight digits), then for each key
  read from input reports whether it was found and how many comparisons were
  made. The default count is 100 million keys, which takes a long time and a
  great deal of memory; pass a smaller `--count` for a quick run.
- `labkit-wiki [path] [--dump] [--sample]` loads colon-separated page records
  (namespace, page id, title; default file `wikiData.dat`) and answers title
  searches line by line. Several words on one line return only the pages that
  match every word; a line starting with `exit` ends the session. `--dump`
  lists every row and stops; `--sample` searches a few built-in titles instead
  of a file.

The modules can also be run with `python -m`, for example
`python -m labkit.roomba graph.txt --pace 0`.

## What it does not do

The data structures live in memory only; nothing is saved between runs. The
thread demonstrations in `labkit.concurrency` are library functions only and
have no command of their own.