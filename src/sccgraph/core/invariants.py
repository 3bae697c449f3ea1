"""Error taxonomy and structural checks for sccgraph graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .graph import Graph, Vertex


class GraphError(ValueError):
    """Base error for graph construction failures."""


class DuplicateVertex(GraphError):
    """Raised when a vertex name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"vertex {name!r} already exists")
        self.name = name


class UnknownVertex(GraphError, KeyError):
    """Raised when a vertex does not belong to the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(f"vertex {name!r} does not belong to this graph")
        self.name = name

    def __str__(self) -> str:
        # KeyError would render the repr of the message.
        return str(self.args[0])


class InvariantViolation(RuntimeError):
    """Base error for invalid traversal results."""


class PartitionViolation(InvariantViolation):
    """Raised when components do not partition the vertex set."""


class OrderViolation(InvariantViolation):
    """Raised when an edge points into a later-emitted component."""


def validate_partition(graph: "Graph", components: Sequence[Sequence["Vertex"]]) -> None:
    """Ensure every vertex of ``graph`` sits in exactly one non-empty component."""

    seen: Dict[str, int] = {}
    for position, component in enumerate(components):
        if not component:
            raise PartitionViolation(f"component {position} is empty")
        for vertex in component:
            # Identity membership: a same-named vertex from another graph is foreign.
            if vertex not in graph:
                raise PartitionViolation(f"component {position} holds foreign vertex {vertex.name!r}")
            if vertex.name in seen:
                raise PartitionViolation(
                    f"vertex {vertex.name!r} appears in components {seen[vertex.name]} and {position}"
                )
            seen[vertex.name] = position
    missing = [vertex.name for vertex in graph.vertices() if vertex.name not in seen]
    if missing:
        raise PartitionViolation(f"vertices missing from components: {', '.join(missing)}")


def validate_emission_order(graph: "Graph", components: Sequence[Sequence["Vertex"]]) -> None:
    """Check that no edge leads from a component to a strictly later one."""

    position = {vertex.name: idx for idx, component in enumerate(components) for vertex in component}
    for vertex in graph.vertices():
        src = position[vertex.name]
        for neighbour in vertex.neighbours:
            dst = position[neighbour.name]
            if dst > src:
                raise OrderViolation(
                    f"edge {vertex.name}->{neighbour.name} points from component {src} to later component {dst}"
                )


def assert_components(graph: "Graph", components: Sequence[Sequence["Vertex"]]) -> None:
    """Run all result checks."""

    validate_partition(graph, components)
    validate_emission_order(graph, components)
