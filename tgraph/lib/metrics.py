"""Per-call work counters for graph algorithms.

A metrics object is created by the caller, passed into exactly one algorithm
call and read afterwards. Counters are plain integers; instances are not meant
to be shared across concurrent calls.
"""

from __future__ import annotations

import time
from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Metrics(Protocol):
    """Counting interface accepted by every algorithm."""

    def inc_dfs_visit(self) -> None: ...

    def inc_dfs_edge(self) -> None: ...

    def inc_relaxation(self) -> None: ...

    @property
    def dfs_visits(self) -> int: ...

    @property
    def dfs_edges(self) -> int: ...

    @property
    def relaxations(self) -> int: ...

    def elapsed_ms(self) -> int: ...


class TimerMetrics:
    """Counts DFS visits, DFS edges and relaxations; measures time since creation."""

    __slots__ = ("_dfs_visits", "_dfs_edges", "_relaxations", "_start_ns")

    def __init__(self) -> None:
        self._dfs_visits = 0
        self._dfs_edges = 0
        self._relaxations = 0
        self._start_ns = time.perf_counter_ns()

    def __repr__(self) -> str:
        return (
            f"TimerMetrics(dfs_visits={self._dfs_visits}, dfs_edges={self._dfs_edges}, "
            f"relaxations={self._relaxations})"
        )

    def inc_dfs_visit(self) -> None:
        self._dfs_visits += 1

    def inc_dfs_edge(self) -> None:
        self._dfs_edges += 1

    def inc_relaxation(self) -> None:
        self._relaxations += 1

    @property
    def dfs_visits(self) -> int:
        return self._dfs_visits

    @property
    def dfs_edges(self) -> int:
        return self._dfs_edges

    @property
    def relaxations(self) -> int:
        return self._relaxations

    @property
    def operations_count(self) -> int:
        """Sum of all counters; an approximate proxy for algorithmic work."""
        return self._dfs_visits + self._dfs_edges + self._relaxations

    def elapsed_ns(self) -> int:
        """Nanoseconds since this object was created."""
        return time.perf_counter_ns() - self._start_ns

    def elapsed_ms(self) -> int:
        """Whole milliseconds since this object was created."""
        return self.elapsed_ns() // 1_000_000

    def to_dict(self) -> Dict[str, int]:
        """Return counters as a plain dict."""
        return {
            "dfs_visits": self._dfs_visits,
            "dfs_edges": self._dfs_edges,
            "relaxations": self._relaxations,
            "operations_count": self.operations_count,
        }
