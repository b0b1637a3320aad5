"""tgraph: structural and path analysis of task dependency graphs.

tgraph computes strongly connected components, condensation DAGs, task orders
and vertex-weighted shortest, longest and critical paths over directed graphs
with optional per-node durations.

Primary API:
    Graph, GraphBuilder - Immutable graph and its incremental builder
    kosaraju_scc() - Strongly connected components
    build_condensation(), task_order() - Component DAG and flattened order
    topological_order() - DFS-based ordering of an adjacency list
    shortest_path(), longest_path(), critical_path() - DAG path algorithms
    TimerMetrics - Per-call work counters

Example:
    from tgraph import GraphBuilder, shortest_path

    g = (
        GraphBuilder()
        .add_edge(0, 1).add_edge(1, 3).add_edge(0, 2).add_edge(2, 3)
        .set_duration(0, 1).set_duration(1, 2).set_duration(2, 5).set_duration(3, 3)
        .build()
    )
    res = shortest_path(g, 0)
    res.distance_to(3)        # 6
    res.reconstruct_path(3)   # [0, 1, 3]
"""

from __future__ import annotations

from tgraph import cli, logging
from tgraph._version import __version__
from tgraph.lib.algorithms import (
    Condensation,
    PathDetail,
    PathResult,
    SCCResult,
    build_condensation,
    condensation_from_edges,
    critical_path,
    critical_path_sink,
    derive_task_order,
    describe_path,
    kosaraju_scc,
    kosaraju_scc_from_edges,
    longest_path,
    reconstruct_path,
    shortest_path,
    task_order,
    topological_order,
)
from tgraph.lib.graph import Graph, GraphBuilder
from tgraph.lib.io import graph_from_dict, load_graph
from tgraph.lib.metrics import Metrics, TimerMetrics
from tgraph.lib.nx import NodeMap, from_networkx, to_networkx
from tgraph.types.base import INF, NEG_INF

__all__ = [
    # Version
    "__version__",
    # Graph model
    "Graph",
    "GraphBuilder",
    "graph_from_dict",
    "load_graph",
    # Metrics
    "Metrics",
    "TimerMetrics",
    # Components and ordering
    "SCCResult",
    "kosaraju_scc",
    "kosaraju_scc_from_edges",
    "Condensation",
    "build_condensation",
    "condensation_from_edges",
    "derive_task_order",
    "task_order",
    "topological_order",
    # Paths
    "INF",
    "NEG_INF",
    "PathResult",
    "PathDetail",
    "reconstruct_path",
    "describe_path",
    "shortest_path",
    "longest_path",
    "critical_path",
    "critical_path_sink",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
