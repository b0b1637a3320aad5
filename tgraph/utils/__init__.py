"""Utility helpers used across tgraph.

Small, self-contained helpers that do not depend on the algorithm modules.
"""

from tgraph.utils.files import (
    ensure_parent_dir,
    list_input_files,
    list_report_files,
    report_path_for_input,
)

__all__ = [
    "ensure_parent_dir",
    "list_input_files",
    "list_report_files",
    "report_path_for_input",
]
