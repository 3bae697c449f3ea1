"""
Core of sccgraph.

The core package holds the append-only graph model, the Tarjan SCC
traversal and its consumers (condensation, topological order, cycle
detection), plus the error taxonomy and result checks.
"""

from . import invariants, graph, scc  # noqa: F401

__all__ = ["graph", "scc", "invariants"]
