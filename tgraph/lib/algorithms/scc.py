from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from tgraph.lib.algorithms.traversal import dfs_postorder
from tgraph.lib.graph import Graph
from tgraph.lib.metrics import Metrics
from tgraph.logging import get_logger
from tgraph.types.base import EdgeTuple, NodeID

logger = get_logger(__name__)


class SCCResult:
    """
    Strongly connected components of a graph.

    Attributes:
        component_ids: Read-only int32 vector mapping node -> component index.
        components: Node lists per component, in discovery order of the second
            Kosaraju pass. Within a component nodes appear in DFS pre-order.
    """

    __slots__ = ("component_ids", "components")

    def __init__(
        self, component_ids: Sequence[int], components: Iterable[Iterable[NodeID]]
    ) -> None:
        ids = np.array(component_ids, dtype=np.int32)
        ids.flags.writeable = False
        self.component_ids: np.ndarray = ids
        self.components: Tuple[Tuple[NodeID, ...], ...] = tuple(
            tuple(int(v) for v in comp) for comp in components
        )

    def __repr__(self) -> str:
        return f"SCCResult(components={[list(c) for c in self.components]})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SCCResult):
            return NotImplemented
        return self.components == other.components and np.array_equal(
            self.component_ids, other.component_ids
        )

    @property
    def component_count(self) -> int:
        """Number of components."""
        return len(self.components)

    def component_of(self, v: NodeID) -> int:
        """Component index of node ``v``."""
        return int(self.component_ids[v])


def _kosaraju(
    n: int, adj: List[List[NodeID]], metrics: Optional[Metrics]
) -> SCCResult:
    """Run both Kosaraju passes over a sanitized adjacency."""
    rev: List[List[NodeID]] = [[] for _ in range(n)]
    for u, row in enumerate(adj):
        for v in row:
            rev[v].append(u)

    # first pass: forward finishing order
    visited = [False] * n
    order: List[NodeID] = []
    for start in range(n):
        if not visited[start]:
            dfs_postorder(adj, start, visited, order, metrics)

    # second pass: reverse graph, seeds in reverse finishing order
    comp_ids = [-1] * n
    components: List[List[NodeID]] = []
    for seed in reversed(order):
        if comp_ids[seed] != -1:
            continue
        cid = len(components)
        members: List[NodeID] = [seed]
        comp_ids[seed] = cid
        if metrics is not None:
            metrics.inc_dfs_visit()
        stack: List[List[int]] = [[seed, 0]]
        while stack:
            frame = stack[-1]
            node, idx = frame
            row = rev[node]
            if idx < len(row):
                frame[1] = idx + 1
                nxt = row[idx]
                if metrics is not None:
                    metrics.inc_dfs_edge()
                if comp_ids[nxt] == -1:
                    comp_ids[nxt] = cid
                    members.append(nxt)
                    if metrics is not None:
                        metrics.inc_dfs_visit()
                    stack.append([nxt, 0])
            else:
                stack.pop()
        components.append(members)

    logger.debug(f"Kosaraju: {n} nodes -> {len(components)} components")
    return SCCResult(comp_ids, components)


def kosaraju_scc(graph: Graph, metrics: Optional[Metrics] = None) -> SCCResult:
    """
    Compute strongly connected components with Kosaraju's two-pass algorithm.

    The first pass runs DFS over the forward graph from every unvisited node in
    ascending id order and records finishing order. The second pass runs DFS
    over the reverse graph, seeding in reverse finishing order; each seed
    collects one component. Numbering is deterministic for a given graph.

    Edges pointing outside ``[0, n)`` are dropped silently.

    Args:
        graph: Input graph.
        metrics: Optional counters. Each node adds one DFS visit per pass and
            each edge one DFS edge per pass.

    Returns:
        SCCResult partitioning all nodes.
    """
    n = graph.node_count
    adj = [[v for v in row if 0 <= v < n] for row in graph.adjacency()]
    return _kosaraju(n, adj, metrics)


def kosaraju_scc_from_edges(
    n: int, edges: Iterable[EdgeTuple], metrics: Optional[Metrics] = None
) -> SCCResult:
    """
    Same as :func:`kosaraju_scc` for a node count and an edge list.

    Edges with an endpoint outside ``[0, n)`` are dropped silently.
    """
    adj: List[List[NodeID]] = [[] for _ in range(n)]
    for u, v in edges:
        if 0 <= u < n and 0 <= v < n:
            adj[u].append(v)
    return _kosaraju(n, adj, metrics)
