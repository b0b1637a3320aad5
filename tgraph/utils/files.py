"""File discovery and output path helpers for batch report runs.

Graph descriptions are picked up as ``input_*.json`` and reports written as
``report_*.json`` (prefixes configurable via ``REPORT_CONFIG``). A report for
``input_small.json`` is named ``report_small.json``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from tgraph.config import REPORT_CONFIG
from tgraph.logging import get_logger

logger = get_logger(__name__)


def _list_matching(directory: Path, match: Callable[[str], bool]) -> List[Path]:
    if not directory.is_dir():
        logger.warning(f"Provided path is not a directory: {directory}")
        return []
    return sorted(
        p for p in directory.iterdir() if p.is_file() and match(p.name)
    )


def list_input_files(directory: Path) -> List[Path]:
    """Return graph description files in ``directory`` sorted by name."""
    return _list_matching(Path(directory), REPORT_CONFIG.is_input_name)


def list_report_files(directory: Path) -> List[Path]:
    """Return report files in ``directory`` sorted by name."""
    return _list_matching(Path(directory), REPORT_CONFIG.is_report_name)


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def report_path_for_input(input_path: Path, output_dir: Optional[Path] = None) -> Path:
    """
    Derive the report path for a graph description file.

    Args:
        input_path: Description file, e.g. ``data/input_small.json``.
        output_dir: Target directory; defaults to the input's directory.

    Returns:
        ``<output_dir>/report_small.json`` for the example above. Stems without
        the input prefix are kept whole: ``tasks.json`` -> ``report_tasks.json``.
    """
    input_path = Path(input_path)
    stem = input_path.stem
    if stem.startswith(REPORT_CONFIG.input_prefix):
        stem = stem[len(REPORT_CONFIG.input_prefix) :]
    base = Path(output_dir) if output_dir is not None else input_path.parent
    return base / f"{REPORT_CONFIG.report_prefix}{stem}{REPORT_CONFIG.json_suffix}"
