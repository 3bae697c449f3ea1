"""Strongly connected component utilities."""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from ..config import recursion_headroom, resolve_traversal
from .graph import Graph, Vertex

Component = Tuple[Vertex, ...]

LOGGER = logging.getLogger(__name__)

# The recursion limit is process-wide; recursive runs hold this while raised.
_RECURSION_LIMIT_LOCK = threading.Lock()


@dataclass
class _TraversalState:
    """Per-run side-table: discovery index, low-link and the vertex stack."""

    index: Dict[Vertex, int] = field(default_factory=dict)
    low_link: Dict[Vertex, int] = field(default_factory=dict)
    on_stack: Set[Vertex] = field(default_factory=set)
    stack: List[Vertex] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)
    next_index: int = 0

    def discover(self, v: Vertex) -> None:
        self.index[v] = self.next_index
        self.low_link[v] = self.next_index
        self.next_index += 1
        self.stack.append(v)
        self.on_stack.add(v)

    def close_if_root(self, v: Vertex) -> None:
        if self.low_link[v] != self.index[v]:
            return
        comp: List[Vertex] = []
        while True:
            w = self.stack.pop()
            self.on_stack.remove(w)
            comp.append(w)
            if w is v:
                break
        self.components.append(tuple(comp))


def _strongconnect_iterative(root: Vertex, state: _TraversalState) -> None:
    state.discover(root)
    work: List[Tuple[Vertex, Iterator[Vertex]]] = [(root, iter(root.neighbours))]
    while work:
        v, successors = work[-1]
        for w in successors:
            if w not in state.index:
                state.discover(w)
                work.append((w, iter(w.neighbours)))
                break
            if w in state.on_stack:
                state.low_link[v] = min(state.low_link[v], state.index[w])
        else:
            work.pop()
            if work:
                parent = work[-1][0]
                state.low_link[parent] = min(state.low_link[parent], state.low_link[v])
            state.close_if_root(v)


def _strongconnect_recursive(root: Vertex, state: _TraversalState) -> None:
    def strongconnect(v: Vertex) -> None:
        state.discover(v)
        for w in v.neighbours:
            if w not in state.index:
                strongconnect(w)
                state.low_link[v] = min(state.low_link[v], state.low_link[w])
            elif w in state.on_stack:
                state.low_link[v] = min(state.low_link[v], state.index[w])
        state.close_if_root(v)

    strongconnect(root)


_STRATEGIES: Dict[str, Callable[[Vertex, _TraversalState], None]] = {
    "iterative": _strongconnect_iterative,
    "recursive": _strongconnect_recursive,
}


def _run(graph: Graph, visit: Callable[[Vertex, _TraversalState], None]) -> List[Component]:
    state = _TraversalState()
    for vertex in graph.vertices():
        if vertex not in state.index:
            visit(vertex, state)
    return state.components


def tarjan_scc(graph: Graph, strategy: Optional[str] = None) -> List[Component]:
    """Tarjan's SCC algorithm.

    Components are emitted as soon as they close, so every component comes
    after all components reachable from it: for a DAG the result is a reverse
    topological order of singletons. Members appear in stack pop order.

    Recursive runs are serialized across threads because they raise the
    interpreter recursion limit for their duration.
    """

    name = resolve_traversal(strategy)
    visit = _STRATEGIES[name]
    if name == "recursive":
        with _RECURSION_LIMIT_LOCK:
            previous = sys.getrecursionlimit()
            wanted = 2 * len(graph) + recursion_headroom()
            if wanted > previous:
                LOGGER.debug("tarjan_scc recursion_limit=%d previous=%d", wanted, previous)
                sys.setrecursionlimit(wanted)
            try:
                comps = _run(graph, visit)
            finally:
                sys.setrecursionlimit(previous)
    else:
        comps = _run(graph, visit)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(
            "tarjan_scc strategy=%s vertices=%d edges=%d components=%d",
            name,
            len(graph),
            graph.edge_count(),
            len(comps),
        )
    return comps


def component_index(comps: List[Component]) -> Dict[str, int]:
    """Map each vertex name to the emission index of its component."""

    return {v.name: i for i, comp in enumerate(comps) for v in comp}


def condensation_dag(graph: Graph, strategy: Optional[str] = None) -> Tuple[List[Component], Graph]:
    """Return SCCs and the condensation DAG.

    Vertex ``component_<i>`` of the DAG stands for ``comps[i]``; edges are
    deduplicated and always point from a higher to a lower index.
    """

    comps = tarjan_scc(graph, strategy=strategy)
    comp_of = component_index(comps)
    dag = Graph()
    nodes = [dag.add_vertex(f"component_{i}") for i in range(len(comps))]
    seen: Set[Tuple[int, int]] = set()
    for u in graph.vertices():
        cu = comp_of[u.name]
        for v in u.neighbours:
            cv = comp_of[v.name]
            if cu != cv and (cu, cv) not in seen:
                seen.add((cu, cv))
                dag.add_edge(nodes[cu], nodes[cv])
    return comps, dag


def topological_components(graph: Graph, strategy: Optional[str] = None) -> List[Component]:
    """Components ordered so that every edge points forward (sources first)."""

    comps = tarjan_scc(graph, strategy=strategy)
    comps.reverse()
    return comps


def _is_cyclic(comp: Component) -> bool:
    if len(comp) > 1:
        return True
    only = comp[0]
    return any(n is only for n in only.neighbours)


def cyclic_components(graph: Graph, strategy: Optional[str] = None) -> List[Component]:
    """Components holding a cycle: several members, or one with a self-loop."""

    return [comp for comp in tarjan_scc(graph, strategy=strategy) if _is_cyclic(comp)]


def has_cycle(graph: Graph, strategy: Optional[str] = None) -> bool:
    return bool(cyclic_components(graph, strategy=strategy))


__all__ = [
    "Component",
    "tarjan_scc",
    "component_index",
    "condensation_dag",
    "topological_components",
    "cyclic_components",
    "has_cycle",
]
