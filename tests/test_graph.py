import io

import pytest

from gobion.graph import Edge, EdgeMap, EdgeSlice, LabeledDirected, VertexMap


@pytest.fixture(params=[EdgeSlice, EdgeMap])
def edges(request):
    store = request.param()
    store.connect(Edge(1, 2))
    store.connect(Edge(1, 3))
    store.connect(Edge(3, 2))
    return store


def test_edge_endpoints():
    edge = Edge("a", "b")
    assert edge.source() == "a"
    assert edge.destination() == "b"


def test_edges_from(edges):
    assert edges.from_(1) == [Edge(1, 2), Edge(1, 3)]
    assert edges.from_(3) == [Edge(3, 2)]
    assert edges.from_(2) == []


def test_edges_to(edges):
    assert edges.to(2) == [Edge(1, 2), Edge(3, 2)]
    assert edges.to(3) == [Edge(1, 3)]
    assert edges.to(1) == []


def test_edges_iterate_in_insertion_order(edges):
    assert list(edges) == [Edge(1, 2), Edge(1, 3), Edge(3, 2)]


def test_edges_early_stop(edges):
    seen = []
    for edge in edges:
        seen.append(edge)
        break
    assert seen == [Edge(1, 2)]


def test_vertex_map_add_and_lookup():
    vertices = VertexMap()
    assert vertices.add("alpha", 7) == 7
    assert vertices.vertex(7) == "alpha"
    assert vertices.vertex(8) is None
    assert 7 in vertices
    assert list(vertices) == [(7, "alpha")]


def test_vertex_map_overwrites_key():
    vertices = VertexMap()
    vertices.add("first", 1)
    vertices.add("second", 1)
    assert vertices.vertex(1) == "second"
    assert len(vertices) == 1


def test_labeled_directed_queries():
    graph = LabeledDirected(VertexMap(), EdgeMap())
    graph.add_vertex("start", 0)
    graph.add_vertex("end", 1)
    graph.add_edge(Edge(0, 1))
    assert graph.at(0) == "start"
    assert graph.at(5) is None
    assert graph.from_(0) == [Edge(0, 1)]
    assert graph.to(1) == [Edge(0, 1)]
    assert list(graph.vertices()) == [(0, "start"), (1, "end")]


def test_labeled_directed_dot():
    graph = LabeledDirected(VertexMap(), EdgeSlice())
    graph.add_vertex("a", 1)
    graph.add_vertex("b", 2)
    graph.add_edge(Edge(1, 2))
    buffer = io.StringIO()
    graph.dot(buffer, lambda vertex: vertex, lambda edge: f"{edge.start}{edge.end}")
    assert buffer.getvalue() == (
        "digraph G {\n"
        '1 [label="a"]\n'
        '2 [label="b"]\n'
        '1 -> 2 [label="12"]\n'
        "}\n"
    )