"""Vertex-weighted extremal paths over a DAG.

The distance of a path is the sum of the durations of every node on it,
endpoints included. Nodes are relaxed in topological order, so every algorithm
is O(V + E) once the order is known. Acyclicity is not validated: on cyclic
input the results are best-effort.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from tgraph.lib.algorithms.topo import topological_order
from tgraph.lib.algorithms.types import PathResult
from tgraph.lib.graph import Graph
from tgraph.lib.metrics import Metrics
from tgraph.logging import get_logger
from tgraph.types.base import INF, NEG_INF, NO_PRED, Distance, NodeID

logger = get_logger(__name__)


def _relax_in_order(
    graph: Graph,
    order: Sequence[NodeID],
    dist: List[Distance],
    pred: List[NodeID],
    unreached: Distance,
    better: Callable[[Distance, Distance], bool],
    metrics: Optional[Metrics],
) -> None:
    """Relax every edge of every reached node, visiting nodes in ``order``."""
    n = graph.node_count
    dur = graph.duration_vector().tolist()
    adj = graph.adjacency()

    for u in order:
        if not 0 <= u < n:
            continue
        du = dist[u]
        if du == unreached:
            continue
        for v in adj[u]:
            if not 0 <= v < n:
                continue
            if metrics is not None:
                metrics.inc_relaxation()
            cand = du + dur[v]
            if better(cand, dist[v]):
                dist[v] = cand
                pred[v] = u


def _single_source(
    graph: Optional[Graph],
    src: NodeID,
    metrics: Optional[Metrics],
    topo_order: Optional[Sequence[NodeID]],
    unreached: Distance,
    better: Callable[[Distance, Distance], bool],
) -> PathResult:
    if graph is None:
        raise ValueError("graph is None")
    n = graph.node_count
    dist = [unreached] * n
    pred = [NO_PRED] * n

    if not 0 <= src < n:
        logger.debug(f"Source {src} outside [0, {n}); all nodes unreachable")
        return PathResult(src, dist, pred)

    dist[src] = graph.duration_of(src) or 0
    if topo_order is None:
        topo_order = topological_order(graph.adjacency(), metrics)
    _relax_in_order(graph, topo_order, dist, pred, unreached, better, metrics)
    return PathResult(src, dist, pred)


def shortest_path(
    graph: Graph,
    src: NodeID,
    metrics: Optional[Metrics] = None,
    topo_order: Optional[Sequence[NodeID]] = None,
) -> PathResult:
    """
    Minimum duration-weighted paths from ``src`` in a DAG.

    ``distance[src]`` is the duration of ``src``; relaxing ``u -> v`` tries
    ``distance[u] + duration(v)``. Unreached nodes keep ``INF``.

    Args:
        graph: Input DAG.
        src: Source node. An id outside ``[0, n)`` yields an all-``INF`` result.
        metrics: Optional counters; one relaxation per examined edge, plus the
            DFS counts of the topological sort when it is computed here.
        topo_order: Precomputed topological order of ``graph``.

    Returns:
        PathResult rooted at ``src``.

    Raises:
        ValueError: If ``graph`` is None.
    """
    return _single_source(
        graph, src, metrics, topo_order, INF, lambda cand, cur: cand < cur
    )


def longest_path(
    graph: Graph,
    src: NodeID,
    metrics: Optional[Metrics] = None,
    topo_order: Optional[Sequence[NodeID]] = None,
) -> PathResult:
    """
    Maximum duration-weighted paths from ``src`` in a DAG.

    Same as :func:`shortest_path` with ``NEG_INF`` for unreached nodes and the
    maximum kept on relaxation.

    Raises:
        ValueError: If ``graph`` is None.
    """
    return _single_source(
        graph, src, metrics, topo_order, NEG_INF, lambda cand, cur: cand > cur
    )


def critical_path(
    graph: Graph,
    metrics: Optional[Metrics] = None,
    topo_order: Optional[Sequence[NodeID]] = None,
) -> PathResult:
    """
    Longest duration-weighted path anywhere in a DAG.

    Every node starts at its own duration, so any node may begin the path.
    After relaxation the node with the largest distance (lowest id on ties) is
    the sink, and the predecessor chain from it leads to the path's start,
    which becomes ``source`` of the result. An empty graph yields source 0.

    Args:
        graph: Input DAG.
        metrics: Optional counters.
        topo_order: Precomputed topological order of ``graph``.

    Returns:
        PathResult whose ``reconstruct_path(sink)`` is the critical path.

    Raises:
        ValueError: If ``graph`` is None.
    """
    if graph is None:
        raise ValueError("graph is None")
    n = graph.node_count
    dist: List[Distance] = graph.duration_vector().tolist()
    pred = [NO_PRED] * n

    if topo_order is None:
        topo_order = topological_order(graph.adjacency(), metrics)
    _relax_in_order(
        graph, topo_order, dist, pred, NEG_INF, lambda cand, cur: cand > cur, metrics
    )

    sink = _argmax(dist)
    if sink == -1:
        return PathResult(0, dist, pred)

    start = sink
    steps = 0
    while pred[start] != NO_PRED and steps < n:
        start = pred[start]
        steps += 1

    logger.debug(f"Critical path: sink={sink} start={start} length={dist[sink]}")
    return PathResult(start, dist, pred)


def _argmax(values: Sequence[Distance]) -> int:
    best = NEG_INF
    best_idx = -1
    for i, value in enumerate(values):
        if value > best:
            best = value
            best_idx = i
    return best_idx


def critical_path_sink(result: PathResult) -> int:
    """
    Node with the largest distance in ``result`` (lowest id on ties).

    Returns:
        The sink node id, or -1 when no distance exceeds ``NEG_INF``.
    """
    return _argmax(result.distances().tolist())
