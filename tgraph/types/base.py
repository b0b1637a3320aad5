"""Base type aliases and sentinels for graph algorithms."""

from __future__ import annotations

from typing import Tuple

#: Dense integer node identifier in ``[0, n)``.
NodeID = int

#: Vertex-weighted path distance (sum of node durations along a path).
Distance = int

#: Directed edge as a ``(from, to)`` pair of node ids.
EdgeTuple = Tuple[NodeID, NodeID]

#: Distance of a node not reachable by a shortest-path relaxation.
#: A quarter of the int64 range so that ``INF + duration`` cannot overflow.
INF: Distance = (2**63 - 1) // 4

#: Distance of a node not reachable by a longest-path relaxation.
NEG_INF: Distance = -(2**63) // 4

#: Predecessor slot value meaning "no predecessor".
NO_PRED: NodeID = -1
