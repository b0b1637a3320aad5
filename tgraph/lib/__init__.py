"""Core graph containers, metrics and integrations for tgraph."""

from tgraph.lib.graph import Graph, GraphBuilder
from tgraph.lib.metrics import Metrics, TimerMetrics
from tgraph.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "Graph",
    "GraphBuilder",
    "Metrics",
    "TimerMetrics",
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
