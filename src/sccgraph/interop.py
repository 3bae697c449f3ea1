"""networkx adapters for sccgraph graphs.

networkx is optional; install it via ``pip install sccgraph[nx]``.
"""
from __future__ import annotations

from typing import Optional

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover - optional dependency
    raise ImportError(
        "sccgraph.interop requires the optional dependency 'networkx'. "
        "Install it via 'pip install sccgraph[nx]' or 'pip install networkx'."
    ) from exc

from .core.graph import Graph
from .core.scc import condensation_dag


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Convert a Graph into a networkx DiGraph keyed by vertex name.

    Duplicate edges collapse into one networkx edge carrying a ``count``.
    """
    out = nx.DiGraph()
    for vertex in graph.vertices():
        out.add_node(vertex.name)
    for vertex in graph.vertices():
        for neighbour in vertex.neighbours:
            if out.has_edge(vertex.name, neighbour.name):
                out[vertex.name][neighbour.name]["count"] += 1
            else:
                out.add_edge(vertex.name, neighbour.name, count=1)
    return out


def condensation_to_networkx(graph: Graph, strategy: Optional[str] = None) -> nx.DiGraph:
    """Condensation DAG as a networkx DiGraph with a ``members`` attribute per node."""
    comps, dag = condensation_dag(graph, strategy=strategy)
    out = nx.DiGraph()
    for idx, comp in enumerate(comps):
        out.add_node(f"component_{idx}", members=[v.name for v in comp], index=idx)
    for node in dag.vertices():
        for neighbour in node.neighbours:
            out.add_edge(node.name, neighbour.name)
    return out


__all__ = ["to_networkx", "condensation_to_networkx"]
