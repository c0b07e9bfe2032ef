import io
import sys

import pytest

from labkit.graph import Graph, GraphFormatError, WeightedGraph, closest_vertex

SAMPLE = """5
0 1 3 -999
1 2 -999
2 -999
3 4 -999
4 0 -999
"""

WEIGHTED = """3
0 1 2 -999
1 2 -999
2 -999
0 1 2 2 10 -999
1 2 3 -999
2 -999
"""


def test_new_graph_is_empty():
    graph = Graph(4)
    assert graph.is_empty()
    assert len(graph) == 0


def test_read_builds_adjacency_lists():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    assert len(graph) == 5
    assert not graph.is_empty()
    assert graph.adjacent(0) == [1, 3]
    assert graph.adjacent(2) == []
    assert graph.adjacent(4) == [0]


def test_str_lists_each_vertex():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    text = str(graph)
    lines = text.split("\n")
    assert lines[0] == "0 1 3 "
    assert len([line for line in lines if line]) == 5
    assert text.endswith("\n\n")


def test_depth_first_visits_every_vertex_once():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    order = graph.depth_first()
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert order[:2] == [0, 1]


def test_depth_first_from_reaches_connected_vertices():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    assert graph.depth_first_from(2) == [2]
    from_three = graph.depth_first_from(3)
    assert set(from_three) == {0, 1, 2, 3, 4}
    assert from_three[0] == 3


def test_breadth_first_visits_neighbours_first():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    order = graph.breadth_first()
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert order[:3] == [0, 1, 3]


def test_clear_empties_graph():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    graph.clear()
    assert graph.is_empty()
    assert graph.depth_first() == []


def test_add_edge_grows_graph():
    graph = Graph(3)
    graph.add_edge(0, 2)
    assert len(graph) == 3
    assert graph.adjacent(0) == [2]
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)


def test_depth_first_from_out_of_range():
    graph = Graph(10)
    graph.read(io.StringIO(SAMPLE))
    with pytest.raises(IndexError):
        graph.depth_first_from(5)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2\n0 1 -999\n",
        "2\n0 x -999\n1 -999\n",
        "2\n0 5 -999\n1 -999\n",
        "20\n",
    ],
)
def test_bad_data_raises(text):
    graph = Graph(10)
    with pytest.raises(GraphFormatError):
        graph.read(io.StringIO(text))


def test_weighted_read_sets_weights():
    graph = WeightedGraph(10)
    graph.read(io.StringIO(WEIGHTED))
    assert graph.weight(0, 1) == 2.0
    assert graph.weight(0, 2) == 10.0
    assert graph.weight(1, 2) == 3.0
    assert graph.weight(2, 0) == sys.float_info.max


def test_shortest_path():
    graph = WeightedGraph(10)
    graph.read(io.StringIO(WEIGHTED))
    assert graph.shortest_path(0) == [0.0, 2.0, 5.0]


def test_shortest_path_unreachable_keeps_no_edge():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(2, 2)
    graph.set_weight(0, 1, 4)
    distances = graph.shortest_path(0)
    assert distances[0] == 0.0
    assert distances[1] == 4.0
    assert distances[2] == sys.float_info.max


def test_shortest_path_never_exceeds_direct_edge():
    graph = WeightedGraph(10)
    graph.read(io.StringIO(WEIGHTED))
    distances = graph.shortest_path(0)
    for target, distance in enumerate(distances):
        assert distance <= graph.weight(0, target)


def test_shortest_path_bad_vertex():
    graph = WeightedGraph(10)
    graph.read(io.StringIO(WEIGHTED))
    with pytest.raises(IndexError):
        graph.shortest_path(3)


def test_truncated_weights_raise():
    graph = WeightedGraph(10)
    with pytest.raises(GraphFormatError):
        graph.read(io.StringIO("2\n0 1 -999\n1 -999\n0 1"))


def test_closest_vertex_picks_strictly_smaller():
    assert closest_vertex([0.0, 4.0, 1.0, 3.0]) == 2


def test_closest_vertex_defaults_to_room_zero():
    distances = [0.0, 2.0, 5.0]
    assert closest_vertex(distances) == 0


def test_closest_vertex_needs_two_rooms():
    with pytest.raises(ValueError):
        closest_vertex([0.0])