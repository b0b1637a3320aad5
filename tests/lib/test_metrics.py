"""Tests for tgraph.lib.metrics counters."""

import time

from tgraph.lib.metrics import Metrics, TimerMetrics


class TestTimerMetrics:
    """Tests for TimerMetrics."""

    def test_counters_start_at_zero(self):
        """A new instance reports zero for every counter."""
        m = TimerMetrics()
        assert m.to_dict() == {
            "dfs_visits": 0,
            "dfs_edges": 0,
            "relaxations": 0,
            "operations_count": 0,
        }

    def test_increments(self):
        """Each inc_* call bumps its counter; operations_count is their sum."""
        m = TimerMetrics()
        m.inc_dfs_visit()
        m.inc_dfs_visit()
        m.inc_dfs_edge()
        m.inc_relaxation()
        assert (m.dfs_visits, m.dfs_edges, m.relaxations) == (2, 1, 1)
        assert m.operations_count == 4
        assert "dfs_visits=2" in repr(m)

    def test_elapsed(self):
        """Elapsed time is measured from construction."""
        m = TimerMetrics()
        time.sleep(0.002)
        assert m.elapsed_ns() >= 2_000_000
        assert m.elapsed_ms() >= 1

    def test_satisfies_protocol(self):
        """TimerMetrics satisfies the Metrics protocol; a plain object does not."""
        assert isinstance(TimerMetrics(), Metrics)
        assert not isinstance(object(), Metrics)
