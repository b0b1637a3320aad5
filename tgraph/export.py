"""Flatten report records into CSV tables.

Each report file holds a list of report records (see ``tgraph.report``). The
records are split into per-algorithm tables plus a summary table of graphs for
which every section is present.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from tgraph.config import REPORT_CONFIG
from tgraph.lib.io import load_document
from tgraph.logging import get_logger
from tgraph.utils.files import list_report_files

logger = get_logger(__name__)

INPUT_COLUMNS = [
    "graph_id",
    "vertices",
    "edges",
    "density",
    "variant",
    "source",
    "weight_model",
]

TABLE_COLUMNS: Dict[str, List[str]] = {
    "scc": INPUT_COLUMNS + ["num_sccs", "operations_count", "execution_time_ns"],
    "topo": INPUT_COLUMNS + ["operations_count", "execution_time_ns"],
    "shortest_path": INPUT_COLUMNS
    + ["operations_count", "execution_time_ns", "paths"],
    "longest_path": INPUT_COLUMNS
    + [
        "critical_path_length",
        "critical_path",
        "node_durations",
        "operations_count",
        "execution_time_ns",
    ],
    "summary": INPUT_COLUMNS + ["total_operations_count", "total_execution_time_ns"],
}

SECTIONS = {
    "scc": "kosaraju_scc",
    "topo": "topological_sort",
    "shortest_path": "shortest_path",
    "longest_path": "longest_path",
}


def _compact(values: Any) -> str:
    return json.dumps(list(values or []), separators=(",", ":"))


def _reachable_nodes(paths: Optional[Mapping[str, Any]]) -> str:
    """Bracketed, sorted list of every node appearing on any reported path."""
    nodes = set()
    for info in (paths or {}).values():
        if isinstance(info, Mapping):
            nodes.update(int(v) for v in info.get("path") or [])
    return "[" + ",".join(str(v) for v in sorted(nodes)) + "]"


def _section_row(table: str, base: Dict[str, Any], section: Mapping[str, Any]) -> Dict[str, Any]:
    row = dict(base)
    if table == "scc":
        row["num_sccs"] = section["num_sccs"]
    elif table == "shortest_path":
        row["paths"] = _reachable_nodes(section.get("paths"))
    elif table == "longest_path":
        row["critical_path_length"] = section["critical_path_length"]
        row["critical_path"] = _compact(section.get("critical_path"))
        row["node_durations"] = _compact(section.get("node_durations"))
    row["operations_count"] = section["operations_count"]
    row["execution_time_ns"] = section["execution_time_ns"]
    return row


def collect_report_tables(records: Iterable[Mapping[str, Any]]) -> Dict[str, pd.DataFrame]:
    """
    Split report records into DataFrames keyed by table name.

    Error records are skipped. Rows are sorted by ``graph_id``. A ``summary``
    row is produced only for graphs with all four algorithm sections.

    Args:
        records: Report records.

    Returns:
        ``{"scc", "topo", "shortest_path", "longest_path", "summary"}`` -> DataFrame
        with the columns of ``TABLE_COLUMNS``.
    """
    rows: Dict[str, List[Dict[str, Any]]] = {name: [] for name in TABLE_COLUMNS}

    for record in records:
        if not isinstance(record, Mapping) or "input_stats" not in record:
            continue
        stats = record["input_stats"]
        base = {"graph_id": record["graph_id"]}
        base.update({col: stats.get(col) for col in INPUT_COLUMNS[1:]})

        present = 0
        total_ops = 0
        total_ns = 0
        for table, key in SECTIONS.items():
            section = record.get(key)
            if not isinstance(section, Mapping):
                continue
            row = _section_row(table, base, section)
            rows[table].append(row)
            present += 1
            total_ops += int(row["operations_count"])
            total_ns += int(row["execution_time_ns"])

        if present == len(SECTIONS):
            summary = dict(base)
            summary["total_operations_count"] = total_ops
            summary["total_execution_time_ns"] = total_ns
            rows["summary"].append(summary)

    tables: Dict[str, pd.DataFrame] = {}
    for name, columns in TABLE_COLUMNS.items():
        df = pd.DataFrame(rows[name], columns=columns)
        if not df.empty:
            df = df.sort_values("graph_id", kind="stable").reset_index(drop=True)
        tables[name] = df
    return tables


def export_csv(report_dir: Path, output_dir: Optional[Path] = None) -> List[Path]:
    """
    Read every report file in ``report_dir`` and write CSV tables.

    Args:
        report_dir: Directory with ``report_*.json`` files.
        output_dir: Target directory; defaults to ``report_dir``.

    Returns:
        Paths of written CSV files. Tables without rows are not written.
    """
    report_dir = Path(report_dir)
    output_dir = Path(output_dir) if output_dir is not None else report_dir

    records: List[Mapping[str, Any]] = []
    for path in list_report_files(report_dir):
        data = load_document(path)
        if not isinstance(data, list):
            logger.warning(f"Skipping {path}: expected a list of report records")
            continue
        records.extend(r for r in data if isinstance(r, Mapping))

    tables = collect_report_tables(records)
    written: List[Path] = []
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, df in tables.items():
        if df.empty:
            continue
        target = output_dir / REPORT_CONFIG.csv_files[name]
        df.to_csv(target, index=False)
        written.append(target)
        logger.info(f"Wrote {len(df)} rows to {target}")
    return written
