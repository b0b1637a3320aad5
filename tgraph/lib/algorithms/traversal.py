from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from tgraph.lib.metrics import Metrics
from tgraph.types.base import NodeID

AdjacencyRows = Sequence[Optional[Sequence[NodeID]]]


def dfs_postorder(
    adjacency: AdjacencyRows,
    start: NodeID,
    visited: MutableSequence[bool],
    order: List[NodeID],
    metrics: Optional[Metrics] = None,
) -> None:
    """
    Depth-first search from ``start`` appending nodes to ``order`` in post-order.

    Uses an explicit stack of ``[node, next_neighbour_index]`` frames so the
    depth of the graph does not hit the interpreter recursion limit. The
    resulting order equals that of the textbook recursive DFS.

    Neighbour ids outside ``[0, len(adjacency))`` are counted as examined edges
    and otherwise ignored. ``None`` rows are treated as empty.

    Args:
        adjacency: Outgoing neighbours per node.
        start: Unvisited node to start from.
        visited: Per-node visited flags; updated in place.
        order: Receives finished nodes.
        metrics: Optional counters (one visit per node, one edge per entry).
    """
    n = len(adjacency)
    visited[start] = True
    if metrics is not None:
        metrics.inc_dfs_visit()
    stack: List[List[int]] = [[start, 0]]

    while stack:
        frame = stack[-1]
        node, idx = frame
        row = adjacency[node] or ()
        if idx < len(row):
            frame[1] = idx + 1
            nxt = row[idx]
            if metrics is not None:
                metrics.inc_dfs_edge()
            if 0 <= nxt < n and not visited[nxt]:
                visited[nxt] = True
                if metrics is not None:
                    metrics.inc_dfs_visit()
                stack.append([nxt, 0])
        else:
            stack.pop()
            order.append(node)
