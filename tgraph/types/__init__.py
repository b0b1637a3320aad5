"""Shared typing constructs for tgraph.

Public type aliases and distance sentinels used across the algorithms. Contains
no runtime logic.
"""

from tgraph.types.base import INF, NEG_INF, NO_PRED, Distance, EdgeTuple, NodeID

__all__ = [
    "NodeID",
    "Distance",
    "EdgeTuple",
    "INF",
    "NEG_INF",
    "NO_PRED",
]
