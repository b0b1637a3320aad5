"""Shared graph fixtures.

Diagrams use ``node[duration]``.
"""

from __future__ import annotations

import pytest

from tgraph.lib.graph import Graph, GraphBuilder


@pytest.fixture
def diamond() -> Graph:
    #        1[2]
    #      ↗      ↘
    #  0[1]        3[3]
    #      ↘      ↗
    #        2[5]
    return (
        GraphBuilder()
        .add_edge(0, 1)
        .add_edge(1, 3)
        .add_edge(0, 2)
        .add_edge(2, 3)
        .set_duration(0, 1)
        .set_duration(1, 2)
        .set_duration(2, 5)
        .set_duration(3, 3)
        .build()
    )


@pytest.fixture
def cycle2() -> Graph:
    # 0 ⇄ 1
    return GraphBuilder().add_edge(0, 1).add_edge(1, 0).build()


@pytest.fixture
def chain3() -> Graph:
    # 0 → 1 → 2
    return GraphBuilder().add_edge(0, 1).add_edge(1, 2).build()


@pytest.fixture
def empty_graph() -> Graph:
    return GraphBuilder().build()


@pytest.fixture
def mixed() -> Graph:
    # Components: {0, 1, 2} (cycle), {3, 4} (cycle), {5} (isolated),
    # {6} (self-loop). Cross edges: 6 -> 0 and a duplicated 2 -> 3.
    return (
        GraphBuilder()
        .ensure_n(7)
        .add_edge(0, 1)
        .add_edge(1, 2)
        .add_edge(2, 0)
        .add_edge(2, 3)
        .add_edge(2, 3)
        .add_edge(3, 4)
        .add_edge(4, 3)
        .add_edge(6, 6)
        .add_edge(6, 0)
        .build()
    )


@pytest.fixture
def project_dag() -> Graph:
    # Task DAG with an unset duration on node 4 and two independent branches.
    #
    #  0[3] → 1[4] → 3[2] → 5[1]
    #     ↘          ↗
    #      2[6] ─────        4[-] → 5
    return (
        GraphBuilder()
        .add_edge(0, 1)
        .add_edge(0, 2)
        .add_edge(1, 3)
        .add_edge(2, 3)
        .add_edge(3, 5)
        .add_edge(4, 5)
        .set_duration(0, 3)
        .set_duration(1, 4)
        .set_duration(2, 6)
        .set_duration(3, 2)
        .set_duration(5, 1)
        .build()
    )
