from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from tgraph.types.base import Distance, EdgeTuple, NodeID


class Graph:
    """
    Immutable directed graph over dense integer node ids ``0..n-1``.

    Adjacency rows keep insertion order and may contain duplicate edges and
    self-loops. Each node optionally carries an integer duration; absence is
    distinct from a zero duration but algorithms treat it as 0.

    Durations are held in a dense int64 vector with a companion presence mask
    so lookups are O(1) and allocation-free.
    """

    def __init__(
        self,
        n: int,
        adjacency: Sequence[Optional[Sequence[NodeID]]],
        durations: Optional[Mapping[NodeID, int]] = None,
    ) -> None:
        """
        Create a graph, copying every input structure.

        Args:
            n: Number of nodes. Rows beyond ``len(adjacency)`` (or given as None)
                become empty.
            adjacency: Outgoing neighbour ids per node.
            durations: Optional node -> duration mapping. Entries for nodes
                outside ``[0, n)`` are ignored.
        """
        if n < 0:
            raise ValueError(f"Node count must be non-negative, got {n}.")
        self._n = n

        rows: List[Tuple[NodeID, ...]] = []
        for i in range(n):
            row = adjacency[i] if i < len(adjacency) else None
            rows.append(tuple(int(v) for v in row) if row is not None else ())
        self._adj: Tuple[Tuple[NodeID, ...], ...] = tuple(rows)

        self._duration_values = np.zeros(n, dtype=np.int64)
        self._duration_present = np.zeros(n, dtype=bool)
        for node, value in (durations or {}).items():
            node = int(node)
            if 0 <= node < n:
                self._duration_values[node] = int(value)
                self._duration_present[node] = True
        self._duration_values.flags.writeable = False
        self._duration_present.flags.writeable = False

        self._durations_view: Mapping[NodeID, int] = MappingProxyType(
            {
                int(v): int(self._duration_values[v])
                for v in np.flatnonzero(self._duration_present)
            }
        )

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self.edge_count()})"

    @property
    def node_count(self) -> int:
        """Number of nodes."""
        return self._n

    def adjacency(self) -> Tuple[Tuple[NodeID, ...], ...]:
        """Read-only adjacency rows, one per node."""
        return self._adj

    def neighbors(self, v: NodeID) -> Tuple[NodeID, ...]:
        """Outgoing neighbours of ``v``; empty for ids outside ``[0, n)``."""
        if 0 <= v < self._n:
            return self._adj[v]
        return ()

    def duration_of(self, v: NodeID) -> Optional[Distance]:
        """Return the explicit duration of ``v``, or None when absent."""
        if 0 <= v < self._n and self._duration_present[v]:
            return int(self._duration_values[v])
        return None

    def durations(self) -> Mapping[NodeID, Distance]:
        """Read-only mapping of nodes that carry an explicit duration."""
        return self._durations_view

    def duration_vector(self) -> np.ndarray:
        """Read-only int64 vector of durations with absent entries as 0."""
        return self._duration_values

    def edges(self) -> List[EdgeTuple]:
        """All edges as ``(from, to)`` pairs in adjacency order."""
        return [(u, v) for u, row in enumerate(self._adj) for v in row]

    def edge_count(self) -> int:
        """Number of adjacency entries, duplicates and self-loops included."""
        return sum(len(row) for row in self._adj)


class GraphBuilder:
    """
    Mutable accumulator producing an immutable :class:`Graph`.

    The node count grows automatically to cover the largest referenced index.
    Methods return ``self`` so calls can be chained.
    """

    def __init__(self) -> None:
        self._n = 0
        self._adj: List[List[NodeID]] = []
        self._durations: Dict[NodeID, int] = {}

    @property
    def node_count(self) -> int:
        """Current node count."""
        return self._n

    def has_duration(self, node: NodeID) -> bool:
        """Return True if ``node`` already has an explicit duration."""
        return node in self._durations

    def ensure_n(self, n: int) -> GraphBuilder:
        """
        Grow the node count to at least ``n``. Never shrinks.

        Args:
            n: Minimum node count.

        Returns:
            This builder.
        """
        while self._n < n:
            self._adj.append([])
            self._n += 1
        return self

    def add_edge(self, u: NodeID, v: NodeID) -> GraphBuilder:
        """
        Append the directed edge ``u -> v``.

        Self-loops and duplicate edges are accepted.

        Raises:
            ValueError: If either endpoint is negative.
        """
        if u < 0 or v < 0:
            raise ValueError(f"Edge endpoints must be non-negative, got ({u}, {v}).")
        self.ensure_n(max(u, v) + 1)
        self._adj[u].append(v)
        return self

    def set_duration(self, node: NodeID, duration: int) -> GraphBuilder:
        """
        Set (or overwrite) the duration of ``node``.

        Raises:
            ValueError: If ``node`` is negative.
        """
        if node < 0:
            raise ValueError(f"Node id must be non-negative, got {node}.")
        self.ensure_n(node + 1)
        self._durations[node] = int(duration)
        return self

    def build(self) -> Graph:
        """Return an immutable snapshot of the accumulated graph."""
        return Graph(self._n, self._adj, self._durations)
