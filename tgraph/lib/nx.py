"""NetworkX graph conversion utilities.

Convert between NetworkX directed graphs and :class:`tgraph.lib.graph.Graph`.

Example:
    >>> import networkx as nx
    >>> from tgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_node("fetch", duration=3)
    >>> G.add_edge("fetch", "build")
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["build"]
    1
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from tgraph.lib.graph import Graph, GraphBuilder


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and dense integer ids.

    Attributes:
        to_index: Maps original node names to ids.
        to_name: Maps ids back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from names listed in id order."""
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name={i: name for i, name in enumerate(names)},
        )

    def __len__(self) -> int:
        return len(self.to_index)

    def names(self, ids: List[int]) -> List[Hashable]:
        """Translate a list of ids (e.g. a path) back to names."""
        return [self.to_name[i] for i in ids]


def from_networkx(
    nx_graph: Any,
    duration_attr: str = "duration",
) -> Tuple[Graph, NodeMap]:
    """
    Convert a NetworkX directed graph to a Graph.

    Nodes receive ids in ``nx_graph.nodes`` iteration order. Node attribute
    ``duration_attr``, when present and not None, becomes the node duration.
    Every edge becomes one adjacency entry, so a MultiDiGraph keeps its
    parallel edges.

    Args:
        nx_graph: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        duration_attr: Node attribute holding the duration.

    Returns:
        ``(graph, node_map)``.

    Raises:
        TypeError: If ``nx_graph`` is undirected.
    """
    if not nx_graph.is_directed():
        raise TypeError("from_networkx expects a directed graph")

    node_map = NodeMap.from_names(list(nx_graph.nodes))
    builder = GraphBuilder().ensure_n(len(node_map))

    for name, attrs in nx_graph.nodes(data=True):
        value: Optional[Any] = attrs.get(duration_attr)
        if value is not None:
            builder.set_duration(node_map.to_index[name], int(value))

    for u, v in nx_graph.edges():
        builder.add_edge(node_map.to_index[u], node_map.to_index[v])

    return builder.build(), node_map


def to_networkx(graph: Graph, duration_attr: str = "duration") -> nx.MultiDiGraph:
    """
    Convert a Graph to an ``nx.MultiDiGraph``.

    Nodes are ``0..n-1``; nodes with an explicit duration carry it under
    ``duration_attr``. Duplicate adjacency entries become parallel edges.
    """
    G = nx.MultiDiGraph()
    for v in range(graph.node_count):
        duration = graph.duration_of(v)
        if duration is None:
            G.add_node(v)
        else:
            G.add_node(v, **{duration_attr: duration})
    G.add_edges_from(graph.edges())
    return G
