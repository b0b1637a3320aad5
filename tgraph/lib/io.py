from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

import yaml

from tgraph.lib.graph import Graph, GraphBuilder
from tgraph.logging import get_logger
from tgraph.types.base import EdgeTuple, NodeID

logger = get_logger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_int(value: Any) -> int:
    """Lenient integer conversion for numbers and numeric strings."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return int(str(value).strip())


def _parse_node_key(key: Any) -> Union[int, None]:
    try:
        return _as_int(key)
    except ValueError:
        return None


def graph_builder_from_dict(data: Mapping[str, Any]) -> GraphBuilder:
    """
    Populate a GraphBuilder from a parsed graph description.

    Supported keys, applied in this order:
        - ``nodes``: list of node ids; sizes the graph to ``max(nodes) + 1``.
        - ``durations``: ``{node: value}``. Keys that are not integers are ignored.
        - ``edges``: ``[u, v]`` pairs or ``{"u": .., "v": .., "w": ..}`` objects.
          Other entries are ignored.
        - ``weight_model``: when ``"node"`` (any case), each node without an
          explicit duration takes the maximum ``w`` of its outgoing edge objects.
          This is an inference heuristic kept for compatibility with existing
          inputs; it changes what "duration" means for such graphs.
        - ``n``: integer node count, applied last via ``ensure_n``.

    Node ids, edge endpoints, durations and weights must be numbers or numeric
    strings. A value such as ``"abc"`` or ``null`` is rejected instead of being
    read as 0, so malformed graphs fail loudly (in batch reports they become
    error records).

    Args:
        data: Mapping produced by a JSON/YAML parser.

    Returns:
        The populated builder.

    Raises:
        ValueError: If a node id is negative or a numeric field is not numeric.
    """
    builder = GraphBuilder()
    weight_model = data.get("weight_model")
    node_weights = isinstance(weight_model, str) and weight_model.lower() == "node"

    nodes = data.get("nodes")
    if isinstance(nodes, list):
        ids = [_as_int(v) for v in nodes]
        builder.ensure_n(max(ids, default=-1) + 1)

    durations = data.get("durations")
    if isinstance(durations, Mapping):
        for key, value in durations.items():
            node = _parse_node_key(key)
            if node is None:
                continue
            builder.set_duration(node, _as_int(value))

    inferred: Dict[NodeID, int] = {}
    edges = data.get("edges")
    if isinstance(edges, list):
        for entry in edges:
            if isinstance(entry, (list, tuple)) and len(entry) >= 2:
                builder.add_edge(_as_int(entry[0]), _as_int(entry[1]))
            elif isinstance(entry, Mapping) and "u" in entry and "v" in entry:
                u, v = _as_int(entry["u"]), _as_int(entry["v"])
                builder.add_edge(u, v)
                if node_weights and "w" in entry:
                    w = _as_int(entry["w"])
                    inferred[u] = max(inferred.get(u, w), w)

    for node, value in inferred.items():
        if not builder.has_duration(node):
            builder.set_duration(node, value)

    n = data.get("n")
    if _is_int(n):
        builder.ensure_n(n)

    return builder


def graph_from_dict(data: Mapping[str, Any]) -> Graph:
    """Build an immutable Graph from a parsed graph description."""
    return graph_builder_from_dict(data).build()


def named_graph_from_dict(data: Mapping[str, Any]) -> Tuple[Graph, List[str]]:
    """
    Build a Graph and node names from a component-listing description.

    Accepted shapes:
        - ``{"n": 5, "edges": [[0, 1], ...]}``: names are ``"0".."n-1"``; edges
          with an endpoint outside ``[0, n)`` are dropped.
        - ``{"vertices": ["A", "B"], "edges": [["A", "B"], ...]}``: edges naming
          unknown vertices are dropped.
        - ``{"edges": [[0, 1], ...]}``: ``n`` is the largest id plus one.

    Raises:
        ValueError: If none of the shapes match.
    """
    raw_edges = data.get("edges")
    pairs = [
        e for e in (raw_edges if isinstance(raw_edges, list) else [])
        if isinstance(e, (list, tuple)) and len(e) >= 2
    ]

    if "n" in data:
        n = _as_int(data["n"])
        edges: List[EdgeTuple] = []
        for e in pairs:
            u, v = _as_int(e[0]), _as_int(e[1])
            if 0 <= u < n and 0 <= v < n:
                edges.append((u, v))
        names = [str(i) for i in range(n)]
    elif isinstance(data.get("vertices"), list):
        names = [str(name) for name in data["vertices"]]
        index = {name: i for i, name in enumerate(names)}
        n = len(names)
        edges = [
            (index[str(a)], index[str(b)])
            for a, b, *_ in pairs
            if str(a) in index and str(b) in index
        ]
    elif isinstance(raw_edges, list):
        edges = [(_as_int(e[0]), _as_int(e[1])) for e in pairs]
        n = max((max(u, v) for u, v in edges), default=-1) + 1
        names = [str(i) for i in range(n)]
    else:
        raise ValueError("Unrecognized graph format")

    builder = GraphBuilder().ensure_n(n)
    for u, v in edges:
        builder.add_edge(u, v)
    return builder.build(), names


def load_document(path: Union[str, Path]) -> Any:
    """
    Read a JSON or YAML document into plain Python data.

    Files ending in ``.yaml`` or ``.yml`` are parsed with ``yaml.safe_load``;
    everything else as JSON.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    logger.debug(f"Loaded {path} ({type(data).__name__})")
    return data


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a graph description file and build its Graph."""
    data = load_document(path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Graph description in {path} must be an object")
    return graph_from_dict(data)
