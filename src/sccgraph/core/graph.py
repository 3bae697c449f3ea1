"""Directed graph model used by the SCC traversal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .invariants import DuplicateVertex, UnknownVertex

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .scc import Component


class Vertex:
    """Named vertex carrying its ordered outgoing adjacency.

    Equality and hashing use the name only, so the name is read-only. The
    adjacency grows through :meth:`Graph.add_edge` and is never shrunk.
    """

    __slots__ = ("_name", "_neighbours")

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"vertex name must be a str, got {type(name).__name__}")
        self._name = name
        self._neighbours: List[Vertex] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def neighbours(self) -> Tuple["Vertex", ...]:
        """Outgoing neighbours in insertion order (duplicates kept)."""

        return tuple(self._neighbours)

    def out_degree(self) -> int:
        return len(self._neighbours)

    def _add_neighbour(self, vertex: "Vertex") -> None:
        self._neighbours.append(vertex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        names = [n.name for n in self._neighbours]
        return f"Vertex(name={self._name!r}, neighbours={names!r})"


VertexRef = Union[Vertex, str]


class Graph:
    """Append-only directed graph keyed by vertex name."""

    def __init__(self) -> None:
        self._vertices: Dict[str, Vertex] = {}

    def add_vertex(self, name: str) -> Vertex:
        """Register a new vertex and return its handle."""

        if name in self._vertices:
            raise DuplicateVertex(name)
        vertex = Vertex(name)
        self._vertices[name] = vertex
        return vertex

    def add_edge(self, source: VertexRef, destination: VertexRef) -> None:
        """Add a directed edge; endpoints may be handles or names."""

        src = self._resolve(source)
        dst = self._resolve(destination)
        src._add_neighbour(dst)

    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices.values())

    def vertex(self, name: str) -> Vertex:
        try:
            return self._vertices[name]
        except KeyError:
            raise UnknownVertex(name) from None

    def has_edge(self, source: VertexRef, destination: VertexRef) -> bool:
        src = self._resolve(source)
        dst = self._resolve(destination)
        return any(n is dst for n in src._neighbours)

    def edge_count(self) -> int:
        return sum(v.out_degree() for v in self._vertices.values())

    def _resolve(self, ref: VertexRef) -> Vertex:
        # Membership is by identity: a same-named vertex from another graph is foreign.
        if isinstance(ref, Vertex):
            owned: Optional[Vertex] = self._vertices.get(ref.name)
            if owned is not ref:
                raise UnknownVertex(ref.name)
            return ref
        if isinstance(ref, str):
            return self.vertex(ref)
        raise TypeError(f"expected Vertex or str, got {type(ref).__name__}")

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return self._vertices.get(item.name) is item
        if isinstance(item, str):
            return item in self._vertices
        return False

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={list(self._vertices.values())!r})"

    def strongly_connected_components(self, strategy: Optional[str] = None) -> List["Component"]:
        from .scc import tarjan_scc

        return tarjan_scc(self, strategy=strategy)

    def condensation_dag(self, strategy: Optional[str] = None) -> Tuple[List["Component"], "Graph"]:
        from .scc import condensation_dag

        return condensation_dag(self, strategy=strategy)


def build_graph(names: Iterable[str], edges: Iterable[Tuple[str, str]]) -> Graph:
    """Convenience helper to build a graph from iterables."""

    graph = Graph()
    for name in names:
        graph.add_vertex(name)
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph
