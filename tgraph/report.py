"""Per-graph analysis reports.

A report record bundles the SCC decomposition, condensation size, topological
order and (for graphs flagged ``metadata.is_dag``) shortest and critical paths
of one graph description, each with its operation count and wall time.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

from tgraph.config import REPORT_CONFIG
from tgraph.lib.algorithms.condensation import build_condensation
from tgraph.lib.algorithms.dag_paths import (
    critical_path,
    critical_path_sink,
    shortest_path,
)
from tgraph.lib.algorithms.path_utils import describe_path
from tgraph.lib.algorithms.scc import kosaraju_scc
from tgraph.lib.algorithms.topo import topological_order
from tgraph.lib.io import graph_from_dict, load_document
from tgraph.lib.metrics import TimerMetrics
from tgraph.logging import get_logger
from tgraph.types.base import INF, NEG_INF
from tgraph.utils.files import ensure_parent_dir

logger = get_logger(__name__)

T = TypeVar("T")


def _int_field(gnode: Mapping[str, Any], key: str, default: int = -1) -> int:
    value = gnode.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _text_field(gnode: Mapping[str, Any], key: str) -> str:
    """String fields verbatim; other JSON values as their JSON text (``true``, ``null``)."""
    if key not in gnode:
        return ""
    value = gnode[key]
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _is_dag(gnode: Mapping[str, Any]) -> bool:
    metadata = gnode.get("metadata")
    return isinstance(metadata, Mapping) and bool(metadata.get("is_dag", False))


def _timed(call: Callable[[TimerMetrics], T]) -> Tuple[T, int, int]:
    """Run ``call`` with fresh metrics; return (result, operations, elapsed ns)."""
    metrics = TimerMetrics()
    start = time.perf_counter_ns()
    result = call(metrics)
    elapsed = time.perf_counter_ns() - start
    return result, metrics.operations_count, elapsed


def process_graph(gnode: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Analyze a single graph description and return its report record.

    Args:
        gnode: Parsed graph description (see ``tgraph.lib.io``) optionally
            carrying ``id``, ``source``, ``density``, ``variant``,
            ``weight_model`` and ``metadata.is_dag``.

    Returns:
        JSON-serializable report dict.
    """
    graph_id = _int_field(gnode, "id")
    out: Dict[str, Any] = {"graph_id": graph_id}

    g = graph_from_dict(gnode)
    logger.info(
        f"Built graph id={graph_id} nodes={g.node_count} edges={g.edge_count()}"
    )

    source = _int_field(gnode, "source")
    out["input_stats"] = {
        "vertices": g.node_count,
        "edges": g.edge_count(),
        "density": _text_field(gnode, "density"),
        "variant": _text_field(gnode, "variant"),
        "source": source,
        "weight_model": _text_field(gnode, "weight_model"),
    }

    total_ops = 0
    total_ns = 0

    scc, scc_ops, scc_ns = _timed(lambda m: kosaraju_scc(g, m))
    out["kosaraju_scc"] = {
        "num_sccs": scc.component_count,
        "sccs": [list(comp) for comp in scc.components],
        "operations_count": scc_ops,
        "execution_time_ns": scc_ns,
    }
    total_ops += scc_ops
    total_ns += scc_ns
    logger.debug(f"SCC id={graph_id} comps={scc.component_count} ops={scc_ops}")

    cond = build_condensation(g, scc)
    out["condensation_graph"] = {
        "vertices": cond.component_count,
        "edges": cond.edge_count,
    }

    topo, topo_ops, topo_ns = _timed(lambda m: topological_order(g.adjacency(), m))
    out["topological_sort"] = {
        "topological_order": topo,
        "operations_count": topo_ops,
        "execution_time_ns": topo_ns,
    }
    total_ops += topo_ops
    total_ns += topo_ns

    is_dag = _is_dag(gnode)

    paths: Dict[str, Any] = {}
    sp_ops = sp_ns = 0
    if is_dag:
        sp, sp_ops, sp_ns = _timed(lambda m: shortest_path(g, source, m))
        for v, dist in enumerate(sp.distances().tolist()):
            if v == source or dist == INF:
                continue
            paths[str(v)] = describe_path(g, sp, v).to_dict()
    out["shortest_path"] = {
        "source": source,
        "destination": "all_reachable",
        "paths": paths,
        "operations_count": sp_ops,
        "execution_time_ns": sp_ns,
    }
    total_ops += sp_ops
    total_ns += sp_ns

    longest: Dict[str, Any] = {
        "critical_path_length": 0,
        "critical_path": [],
        "node_durations": [],
    }
    lp_ops = lp_ns = 0
    if is_dag:
        cp, lp_ops, lp_ns = _timed(lambda m: critical_path(g, m))
        sink = critical_path_sink(cp)
        if sink != -1:
            detail = describe_path(g, cp, sink)
            length = detail.length
            longest = {
                "critical_path_length": 0 if length == NEG_INF else length,
                "critical_path": list(detail.path),
                "node_durations": list(detail.node_durations),
            }
    longest["operations_count"] = lp_ops
    longest["execution_time_ns"] = lp_ns
    out["longest_path"] = longest
    total_ops += lp_ops
    total_ns += lp_ns

    out["total_operations_count"] = total_ops
    out["total_execution_time_ns"] = total_ns
    logger.info(
        f"Finished graph id={graph_id} total_ops={total_ops} total_ns={total_ns}"
    )
    return out


def generate_report(document: Any) -> List[Dict[str, Any]]:
    """
    Build report records for a single graph or a ``{"graphs": [...]}`` batch.

    In batch mode a graph that fails is replaced by
    ``{"graph_id": <id or -1>, "error": "<Type>: <message>"}`` and the
    remaining graphs are still processed.

    Args:
        document: Parsed input document.

    Returns:
        List of report records.

    Raises:
        ValueError: If ``document`` is not an object.
    """
    if not isinstance(document, Mapping):
        raise ValueError("Report input must be a JSON object")

    graphs = document.get("graphs")
    if not isinstance(graphs, list):
        return [process_graph(document)]

    records: List[Dict[str, Any]] = []
    for idx, gnode in enumerate(graphs):
        gnode = gnode if isinstance(gnode, Mapping) else {}
        logger.info(f"Processing graph index={idx} id={gnode.get('id', '?')}")
        try:
            records.append(process_graph(gnode))
        except Exception as exc:
            logger.exception(f"Error processing graph index={idx}")
            records.append(
                {
                    "graph_id": _int_field(gnode, "id"),
                    "error": f"{type(exc).__name__}: {exc}",
                }
            )
    return records


def write_report(
    input_path: Union[str, Path], output_path: Union[str, Path]
) -> List[Dict[str, Any]]:
    """
    Read a graph document, generate its report and write it as JSON.

    Returns:
        The written report records.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    logger.info(f"Reading graphs from: {input_path}")
    records = generate_report(load_document(input_path))

    ensure_parent_dir(output_path)
    output_path.write_text(
        json.dumps(records, indent=REPORT_CONFIG.json_indent), encoding="utf-8"
    )
    logger.info(f"Report written to: {output_path}")
    return records


def summarize_record(record: Mapping[str, Any]) -> Optional[str]:
    """One-line human summary of a report record; None for error records."""
    if "error" in record:
        return None
    stats = record["input_stats"]
    return (
        f"graph {record['graph_id']}: {stats['vertices']} nodes, {stats['edges']} edges, "
        f"{record['kosaraju_scc']['num_sccs']} SCCs, "
        f"critical path {record['longest_path']['critical_path_length']}"
    )
