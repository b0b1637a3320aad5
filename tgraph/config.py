"""Configuration classes for tgraph reporting and export."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ReportConfig:
    """File naming and formatting used by the report and CSV export layers."""

    # Graph description files picked up from a directory
    input_prefix: str = "input_"

    # Report files written by ``report`` and read back by ``export-csv``
    report_prefix: str = "report_"

    json_suffix: str = ".json"

    # Indentation of written report JSON
    json_indent: int = 2

    # CSV file name per exported table
    csv_files: Dict[str, str] = field(
        default_factory=lambda: {
            "scc": "scc_results.csv",
            "topo": "topo_results.csv",
            "shortest_path": "shortest_path_results.csv",
            "longest_path": "longest_path_results.csv",
            "summary": "summary_results.csv",
        }
    )

    def is_input_name(self, name: str) -> bool:
        """Return True if ``name`` looks like a graph description file."""
        return name.startswith(self.input_prefix) and name.endswith(self.json_suffix)

    def is_report_name(self, name: str) -> bool:
        """Return True if ``name`` looks like a generated report file."""
        return name.startswith(self.report_prefix) and name.endswith(self.json_suffix)


# Global configuration instance
REPORT_CONFIG = ReportConfig()
