"""Tests for tgraph.lib.algorithms.types.PathResult."""

import numpy as np
import pytest

from tgraph.lib.algorithms.types import PathResult
from tgraph.types.base import INF, NO_PRED


class TestPathResult:
    """Tests for PathResult construction and accessors."""

    def test_mapping_predecessors(self):
        """A predecessor mapping is exposed as-is and drives reconstruction."""
        result = PathResult(0, [0, 1, 2], {1: 0, 2: 1})
        assert result.predecessors() == {1: 0, 2: 1}
        assert result.predecessor_of(0) == NO_PRED
        assert result.reconstruct_path(2) == [0, 1, 2]

    def test_dense_predecessors(self):
        """A dense vector with NO_PRED equals the equivalent mapping."""
        result = PathResult(0, [0, 1, 2], [NO_PRED, 0, 1])
        assert result == PathResult(0, [0, 1, 2], {1: 0, 2: 1})

    def test_dense_predecessors_length_mismatch(self):
        """A dense vector of the wrong length raises ValueError naming both lengths."""
        with pytest.raises(ValueError, match="2 entries, expected 3"):
            PathResult(0, [0, 1, 2], [NO_PRED, 0])

    def test_no_predecessors(self):
        """Without predecessors only the source is reachable."""
        result = PathResult(2, [INF, INF, 0])
        assert result.predecessors() == {}
        assert result.reconstruct_path(2) == [2]
        assert result.reconstruct_path(0) == []

    def test_distance_to_out_of_range(self):
        """Out-of-range ids report INF and NO_PRED."""
        result = PathResult(0, [5])
        assert result.distance_to(3) == INF
        assert result.distance_to(-1) == INF
        assert result.predecessor_of(3) == NO_PRED

    def test_distances_returns_copy(self):
        """distances() returns an int64 copy that does not alias internal state."""
        result = PathResult(0, [0, 7])
        dist = result.distances()
        dist[1] = 99
        assert result.distance_to(1) == 7
        assert dist.dtype == np.int64

    def test_inputs_are_copied(self):
        """Mutating the constructor inputs does not change the result."""
        dist = [0, 4]
        pred = {1: 0}
        result = PathResult(0, dist, pred)
        dist[1] = 100
        pred[1] = 5
        assert result.distance_to(1) == 4
        assert result.predecessor_of(1) == 0

    def test_predecessor_view_read_only(self):
        """The predecessor view rejects assignment."""
        result = PathResult(0, [0, 1], {1: 0})
        with pytest.raises(TypeError):
            result.predecessors()[1] = 3

    def test_unhashable(self):
        """PathResult defines equality and is therefore unhashable."""
        with pytest.raises(TypeError):
            hash(PathResult(0, [0]))

    def test_equality_considers_source(self):
        """Results with different sources are not equal."""
        assert PathResult(0, [0, 0]) != PathResult(1, [0, 0])
        assert len(PathResult(0, [0, 0])) == 2
