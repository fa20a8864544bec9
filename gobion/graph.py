"""Labelled directed graphs built from pluggable vertex and edge stores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterator, Optional, TextIO, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class Edge(Generic[K]):
    """A directed edge between two vertex keys."""

    start: K
    end: K

    def source(self) -> K:
        return self.start

    def destination(self) -> K:
        return self.end


class EdgeSlice:
    """Edges kept in a plain list; lookups scan every edge."""

    def __init__(self, edges: Optional[list] = None) -> None:
        self._edges: list = list(edges or [])

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._edges)

    def to(self, destination) -> list:
        return [edge for edge in self._edges if edge.destination() == destination]

    def from_(self, source) -> list:
        return [edge for edge in self._edges if edge.source() == source]

    def connect(self, edge) -> None:
        self._edges.append(edge)


class EdgeMap:
    """Edges indexed by their source and destination keys."""

    def __init__(self) -> None:
        self._edges: list = []
        self._outgoing: dict[Any, list] = {}
        self._incoming: dict[Any, list] = {}

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._edges)

    def connect(self, edge) -> None:
        self._edges.append(edge)
        self._outgoing.setdefault(edge.source(), []).append(edge)
        self._incoming.setdefault(edge.destination(), []).append(edge)

    def to(self, destination) -> list:
        return list(self._incoming.get(destination, ()))

    def from_(self, source) -> list:
        return list(self._outgoing.get(source, ()))


class VertexMap(Generic[K, V]):
    """Vertices stored by key."""

    def __init__(self) -> None:
        self._vertices: dict[K, V] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self._vertices.items())

    def add(self, vertex: V, key: K) -> K:
        self._vertices[key] = vertex
        return key

    def vertex(self, key: K) -> Optional[V]:
        """Return the vertex stored under ``key``, or None if there is none."""
        return self._vertices.get(key)


class LabeledDirected:
    """A directed graph whose vertices and edges carry arbitrary values."""

    def __init__(self, vertices, edges) -> None:
        self._vertices = vertices
        self._edges = edges

    def to(self, destination) -> list:
        return self._edges.to(destination)

    def from_(self, source) -> list:
        return self._edges.from_(source)

    def at(self, key):
        """Return the vertex at ``key``, or None if there is none."""
        return self._vertices.vertex(key)

    def vertices(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, vertex)`` pairs."""
        yield from self._vertices

    def add_vertex(self, vertex, key):
        return self._vertices.add(vertex, key)

    def add_edge(self, edge) -> None:
        self._edges.connect(edge)

    def dot(
        self,
        writer: TextIO,
        vertex_label: Callable[[Any], str],
        edge_label: Callable[[Any], str],
    ) -> None:
        """Write the graph in Graphviz DOT form."""
        writer.write("digraph G {\n")
        for key, vertex in self._vertices:
            writer.write(f'{key} [label="{vertex_label(vertex)}"]\n')
        for edge in self._edges:
            writer.write(
                f'{edge.source()} -> {edge.destination()} [label="{edge_label(edge)}"]\n'
            )
        writer.write("}\n")