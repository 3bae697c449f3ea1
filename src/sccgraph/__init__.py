"""sccgraph: strongly connected components of directed graphs."""

from importlib import metadata

from . import config, core
from .core.graph import Graph, Vertex, build_graph
from .core.invariants import (
    DuplicateVertex,
    GraphError,
    InvariantViolation,
    OrderViolation,
    PartitionViolation,
    UnknownVertex,
    assert_components,
)
from .core.scc import (
    Component,
    component_index,
    condensation_dag,
    cyclic_components,
    has_cycle,
    tarjan_scc,
    topological_components,
)

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("sccgraph")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "config",
    "core",
    "Graph",
    "Vertex",
    "build_graph",
    "Component",
    "tarjan_scc",
    "component_index",
    "condensation_dag",
    "topological_components",
    "cyclic_components",
    "has_cycle",
    "GraphError",
    "DuplicateVertex",
    "UnknownVertex",
    "InvariantViolation",
    "PartitionViolation",
    "OrderViolation",
    "assert_components",
    "__version__",
]
