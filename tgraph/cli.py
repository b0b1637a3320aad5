"""Command-line interface for tgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from tgraph.export import export_csv
from tgraph.lib.algorithms.condensation import build_condensation, task_order
from tgraph.lib.algorithms.scc import kosaraju_scc
from tgraph.lib.io import load_document, load_graph, named_graph_from_dict
from tgraph.logging import get_logger, set_global_log_level
from tgraph.report import summarize_record, write_report
from tgraph.utils.files import list_input_files, report_path_for_input

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string: ``"12.3 ms"`` or ``"1.23 s"``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _show_components(path: Path) -> None:
    """Print SCCs with node names and the condensation DAG."""
    data = load_document(path)
    if not isinstance(data, dict):
        raise ValueError(f"Unrecognized graph format in {path}")
    graph, names = named_graph_from_dict(data)
    scc = kosaraju_scc(graph)

    print(f"Strongly connected components (count = {scc.component_count}):")
    for i, comp in enumerate(scc.components):
        labels = [names[v] if v < len(names) else str(v) for v in comp]
        print(f"Component {i} (size={len(comp)}): {labels}")

    cond = build_condensation(graph, scc)
    print(f"\nCondensation DAG: components = {cond.component_count}")
    print("Adjacency lists:")
    for i, outs in enumerate(cond.adjacency):
        print(f"C{i} -> {list(outs)}")
    print("Edge list (component->component):")
    for u, v in cond.edges:
        print(f"{u} -> {v}")


def _show_order(path: Path) -> None:
    """Print the SCC-respecting task order of a graph."""
    graph = load_graph(path)
    order = task_order(graph)
    print(" ".join(str(v) for v in order))


def _run_reports(path: Path, output: Optional[Path]) -> List[Path]:
    """Write reports for one description file or every input file of a directory."""
    if path.is_dir():
        inputs = list_input_files(path)
        if not inputs:
            logger.warning(f"No input files found in {path}")
        targets = [(p, report_path_for_input(p, output)) for p in inputs]
    elif path.is_file():
        if output is not None and output.suffix.lower() == ".json":
            target = output
        else:
            target = report_path_for_input(path, output)
        targets = [(path, target)]
    else:
        raise FileNotFoundError(path)

    written: List[Path] = []
    for src, dst in targets:
        records = write_report(src, dst)
        for record in records:
            line = summarize_record(record)
            if line is None:
                print(f"graph {record.get('graph_id')}: ERROR {record.get('error')}")
            else:
                print(line)
        print(f"Report written to: {dst}")
        written.append(dst)
    return written


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``tgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="tgraph",
        description="Analyze task dependency graphs: SCCs, task order, critical paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{components,order,report,export-csv}",
    )

    components_parser = subparsers.add_parser(
        "components", help="List strongly connected components and the condensation"
    )
    components_parser.add_argument("graph", type=Path, help="Graph description file")

    order_parser = subparsers.add_parser(
        "order", help="Print a task order that respects dependencies between SCCs"
    )
    order_parser.add_argument("graph", type=Path, help="Graph description file")

    report_parser = subparsers.add_parser(
        "report", help="Write analysis reports for graph descriptions"
    )
    report_parser.add_argument(
        "input", type=Path, help="Description file or directory of input_*.json files"
    )
    report_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Report file (single input) or output directory",
    )

    export_parser = subparsers.add_parser(
        "export-csv", help="Flatten report_*.json files into CSV tables"
    )
    export_parser.add_argument("reports", type=Path, help="Directory with reports")
    export_parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Output directory"
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    start = perf_counter()
    try:
        if args.command == "components":
            _show_components(args.graph)
        elif args.command == "order":
            _show_order(args.graph)
        elif args.command == "report":
            _run_reports(args.input, args.output)
        elif args.command == "export-csv":
            written = export_csv(args.reports, args.output)
            for path in written:
                print(f"CSV written to: {path}")
            if not written:
                print("No report rows found")
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        print(f"ERROR: File not found: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command {args.command} failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"Command {args.command} completed in {_format_duration(perf_counter() - start)}")


if __name__ == "__main__":
    main()
