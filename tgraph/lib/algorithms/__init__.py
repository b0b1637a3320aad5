"""Graph algorithms: SCC, condensation, topological order and DAG paths."""

from tgraph.lib.algorithms.condensation import (
    Condensation,
    build_condensation,
    condensation_from_edges,
    derive_task_order,
    task_order,
)
from tgraph.lib.algorithms.dag_paths import (
    critical_path,
    critical_path_sink,
    longest_path,
    shortest_path,
)
from tgraph.lib.algorithms.path_utils import PathDetail, describe_path, reconstruct_path
from tgraph.lib.algorithms.scc import SCCResult, kosaraju_scc, kosaraju_scc_from_edges
from tgraph.lib.algorithms.topo import topological_order
from tgraph.lib.algorithms.types import PathResult

__all__ = [
    "SCCResult",
    "kosaraju_scc",
    "kosaraju_scc_from_edges",
    "Condensation",
    "build_condensation",
    "condensation_from_edges",
    "derive_task_order",
    "task_order",
    "topological_order",
    "PathResult",
    "PathDetail",
    "reconstruct_path",
    "describe_path",
    "shortest_path",
    "longest_path",
    "critical_path",
    "critical_path_sink",
]
