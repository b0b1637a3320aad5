"""Result containers for DAG path algorithms."""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Sequence, Union

import numpy as np

from tgraph.lib.algorithms.path_utils import reconstruct_path
from tgraph.types.base import INF, NO_PRED, Distance, NodeID


class PathResult:
    """Immutable distances and predecessors of a path computation.

    Distances use ``INF`` (shortest) or ``NEG_INF`` (longest) for unreachable
    nodes. Predecessors are kept as a dense vector with ``NO_PRED`` marking
    nodes without one and are exposed as a read-only mapping.

    Attributes:
        source: Start node. Meaningful for single-source variants; for the
            critical path it is the start of the best path.
    """

    __slots__ = ("source", "_dist", "_pred", "_pred_view")

    def __init__(
        self,
        source: NodeID,
        distances: Sequence[int],
        predecessors: Union[Mapping[NodeID, NodeID], Sequence[int], None] = None,
    ) -> None:
        """
        Args:
            source: Source node id.
            distances: Distance per node; copied.
            predecessors: Either a ``{node: pred}`` mapping or a dense vector
                with ``NO_PRED`` for missing entries; copied.

        Raises:
            ValueError: If a dense predecessor vector and ``distances`` differ
                in length.
        """
        self.source = int(source)
        dist = np.array(distances, dtype=np.int64)
        dist.flags.writeable = False
        self._dist = dist

        n = len(dist)
        pred = np.full(n, NO_PRED, dtype=np.int64)
        if isinstance(predecessors, Mapping):
            for v, p in predecessors.items():
                if 0 <= v < n:
                    pred[v] = p
        elif predecessors is not None:
            dense = np.asarray(predecessors, dtype=np.int64)
            if len(dense) != n:
                raise ValueError(
                    f"Predecessor vector has {len(dense)} entries, expected {n} "
                    "to match distances."
                )
            pred[:] = dense
        pred.flags.writeable = False
        self._pred = pred

        self._pred_view: Mapping[NodeID, NodeID] = MappingProxyType(
            {int(v): int(pred[v]) for v in np.flatnonzero(pred != NO_PRED)}
        )

    def __repr__(self) -> str:
        return f"PathResult(source={self.source}, distances={self._dist.tolist()})"

    def __len__(self) -> int:
        return len(self._dist)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathResult):
            return NotImplemented
        return (
            self.source == other.source
            and np.array_equal(self._dist, other._dist)
            and np.array_equal(self._pred, other._pred)
        )

    __hash__ = None  # type: ignore[assignment]

    def distances(self) -> np.ndarray:
        """Return a writable copy of the distance vector."""
        return self._dist.copy()

    def distance_to(self, v: NodeID) -> Distance:
        """Distance of ``v``; ``INF`` when ``v`` is out of range."""
        if 0 <= v < len(self._dist):
            return int(self._dist[v])
        return INF

    def predecessors(self) -> Mapping[NodeID, NodeID]:
        """Read-only ``{node: predecessor}`` view."""
        return self._pred_view

    def predecessor_of(self, v: NodeID) -> NodeID:
        """Predecessor of ``v`` or ``NO_PRED``."""
        if 0 <= v < len(self._pred):
            return int(self._pred[v])
        return NO_PRED

    def reconstruct_path(self, dst: NodeID) -> List[NodeID]:
        """Node sequence from ``source`` to ``dst``; empty when unreachable."""
        return reconstruct_path(self._pred_view, self.source, dst)
