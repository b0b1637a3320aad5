"""Condensation DAG construction and task-order derivation.

Collapsing every strongly connected component into a single vertex always
yields a DAG, so a topological order of the condensation is valid even when the
original graph is cyclic. Flattening that component order back to member
nodes gives a task order in which every inter-component edge points forward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from tgraph.lib.algorithms.scc import SCCResult, kosaraju_scc
from tgraph.lib.algorithms.topo import topological_order
from tgraph.lib.graph import Graph
from tgraph.lib.metrics import Metrics
from tgraph.logging import get_logger
from tgraph.types.base import EdgeTuple, NodeID

logger = get_logger(__name__)


@dataclass(frozen=True)
class Condensation:
    """DAG of strongly connected components.

    Attributes:
        component_count: Number of component vertices.
        adjacency: Sorted, de-duplicated successor components per component.
        edges: Flat ``(from, to)`` component edge list in adjacency order.
    """

    component_count: int
    adjacency: Tuple[Tuple[int, ...], ...]
    edges: Tuple[Tuple[int, int], ...]

    @property
    def edge_count(self) -> int:
        return len(self.edges)


def condensation_from_edges(
    n: int, edges: Iterable[EdgeTuple], scc: SCCResult
) -> Condensation:
    """
    Build the condensation from a node count, an edge list and its SCCs.

    Edges with an endpoint outside ``[0, n)`` are ignored. Intra-component
    edges collapse away; parallel inter-component edges are merged.

    Args:
        n: Node count of the original graph.
        edges: Original ``(u, v)`` edges.
        scc: Components of the same graph.

    Returns:
        Condensation with no self-loops.
    """
    comp_ids = scc.component_ids
    bound = min(n, len(comp_ids))
    k = scc.component_count
    successors: List[Set[int]] = [set() for _ in range(k)]

    for u, v in edges:
        if not (0 <= u < bound and 0 <= v < bound):
            continue
        cu, cv = int(comp_ids[u]), int(comp_ids[v])
        if cu != cv:
            successors[cu].add(cv)

    adjacency = tuple(tuple(sorted(outs)) for outs in successors)
    dag_edges = tuple((i, to) for i, outs in enumerate(adjacency) for to in outs)
    return Condensation(component_count=k, adjacency=adjacency, edges=dag_edges)


def build_condensation(graph: Graph, scc: SCCResult) -> Condensation:
    """Build the condensation DAG of ``graph`` given its SCCs."""
    return condensation_from_edges(graph.node_count, graph.edges(), scc)


def derive_task_order(
    component_order: Iterable[int], scc: SCCResult
) -> List[NodeID]:
    """
    Flatten a component order into a node order.

    Member lists of the named components are concatenated in order. Component
    ids outside ``[0, component_count)`` are skipped.

    Args:
        component_order: Component ids, typically a topological order of the
            condensation.
        scc: Components the ids refer to.

    Returns:
        Node ids.
    """
    comps = scc.components
    out: List[NodeID] = []
    for cid in component_order:
        if 0 <= cid < len(comps):
            out.extend(comps[cid])
    return out


def task_order(graph: Graph, metrics: Optional[Metrics] = None) -> List[NodeID]:
    """
    Order all nodes so every edge between different components points forward.

    Runs SCC detection, condensation, topological sort of the condensation and
    flattening. Nodes inside one component keep their component order.

    Args:
        graph: Input graph; cycles allowed.
        metrics: Optional counters shared by the SCC and sort steps.

    Returns:
        A permutation of ``range(graph.node_count)``.
    """
    scc = kosaraju_scc(graph, metrics)
    cond = build_condensation(graph, scc)
    comp_order = topological_order(cond.adjacency, metrics)
    order = derive_task_order(comp_order, scc)
    logger.debug(
        f"Task order: {graph.node_count} nodes, {cond.component_count} components, "
        f"{cond.edge_count} condensation edges"
    )
    return order
