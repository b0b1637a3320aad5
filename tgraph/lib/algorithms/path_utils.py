from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Mapping, Tuple

from tgraph.lib.graph import Graph
from tgraph.types.base import Distance, NodeID

if TYPE_CHECKING:
    from tgraph.lib.algorithms.types import PathResult


def reconstruct_path(
    pred: Mapping[NodeID, NodeID], src: NodeID, dst: NodeID
) -> List[NodeID]:
    """
    Rebuild the node sequence from ``src`` to ``dst`` out of a predecessor map.

    Walks ``pred`` backwards from ``dst``. If the chain runs out before reaching
    ``src`` the destination is unreachable and an empty list is returned. A
    chain longer than the map itself can only come from a cycle and is treated
    as unreachable too.

    Args:
        pred: ``pred[v]`` is the node preceding ``v`` on the best path.
        src: Source node.
        dst: Destination node.

    Returns:
        ``[src, ..., dst]`` inclusive, ``[src]`` when ``dst == src``, or ``[]``.
    """
    rev: List[NodeID] = []
    cur = dst
    max_steps = len(pred) + 1
    while cur != src:
        if len(rev) > max_steps:
            return []
        rev.append(cur)
        nxt = pred.get(cur)
        if nxt is None:
            return []
        cur = nxt
    rev.append(src)
    rev.reverse()
    return rev


@dataclass(frozen=True)
class PathDetail:
    """A reconstructed path with its per-node durations.

    Attributes:
        path: Node ids from source to destination.
        node_durations: Duration of each node on ``path`` (absent counts as 0).
        length: Distance reported for the destination.
    """

    path: Tuple[NodeID, ...]
    node_durations: Tuple[Distance, ...]
    length: Distance

    def to_dict(self) -> dict:
        return {
            "path": list(self.path),
            "node_durations": list(self.node_durations),
            "path_length": self.length,
        }


def describe_path(graph: Graph, result: PathResult, dst: NodeID) -> PathDetail:
    """Reconstruct the path to ``dst`` and attach node durations and length."""
    path = result.reconstruct_path(dst)
    durations = tuple(graph.duration_of(v) or 0 for v in path)
    return PathDetail(
        path=tuple(path), node_durations=durations, length=result.distance_to(dst)
    )
