from __future__ import annotations

from typing import List, Optional

from tgraph.lib.algorithms.traversal import AdjacencyRows, dfs_postorder
from tgraph.lib.metrics import Metrics
from tgraph.types.base import NodeID


def topological_order(
    adjacency: Optional[AdjacencyRows], metrics: Optional[Metrics] = None
) -> List[NodeID]:
    """
    DFS-based topological order of an adjacency list.

    Visits every unvisited node in ascending id order, records nodes in
    post-order and returns the reversed list. Works on ``Graph.adjacency()``
    and on a condensation adjacency alike.

    Cycles are not detected: on cyclic input the result is still a permutation
    of all nodes but some edges will point backwards. Callers must only rely on
    the topological property for genuine DAGs.

    Args:
        adjacency: Outgoing neighbours per node; None means an empty graph.
        metrics: Optional DFS visit/edge counters.

    Returns:
        Node ids in topological order.
    """
    if not adjacency:
        return []
    n = len(adjacency)
    visited = [False] * n
    order: List[NodeID] = []
    for start in range(n):
        if not visited[start]:
            dfs_postorder(adjacency, start, visited, order, metrics)
    order.reverse()
    return order
