"""Tests for tgraph.report per-graph report records."""

import json
import logging

import pytest

from tgraph.report import generate_report, process_graph, summarize_record, write_report

DIAMOND_DOC = {
    "id": 1,
    "n": 4,
    "edges": [[0, 1], [1, 3], [0, 2], [2, 3]],
    "durations": {"0": 1, "1": 2, "2": 5, "3": 3},
    "source": 0,
    "density": "sparse",
    "variant": "dag",
    "metadata": {"is_dag": True},
}


@pytest.fixture
def diamond_doc():
    return json.loads(json.dumps(DIAMOND_DOC))


class TestProcessGraph:
    """Tests for process_graph."""

    def test_input_stats(self, diamond_doc):
        """Input stats echo the graph size and descriptive fields."""
        record = process_graph(diamond_doc)
        assert record["graph_id"] == 1
        assert record["input_stats"] == {
            "vertices": 4,
            "edges": 4,
            "density": "sparse",
            "variant": "dag",
            "source": 0,
            "weight_model": "",
        }

    def test_non_string_fields_as_json_text(self, diamond_doc):
        """Non-string descriptive fields are reported as their JSON text."""
        diamond_doc["density"] = True
        diamond_doc["variant"] = None
        diamond_doc["weight_model"] = 0.5
        stats = process_graph(diamond_doc)["input_stats"]
        assert stats["density"] == "true"
        assert stats["variant"] == "null"
        assert stats["weight_model"] == "0.5"

    def test_scc_and_topo_sections(self, diamond_doc):
        """SCC, condensation and topological sections for the diamond."""
        record = process_graph(diamond_doc)
        scc = record["kosaraju_scc"]
        assert scc["num_sccs"] == 4
        assert scc["sccs"] == [[0], [2], [1], [3]]
        assert scc["operations_count"] == 16
        assert record["condensation_graph"] == {"vertices": 4, "edges": 4}
        assert record["topological_sort"]["topological_order"] == [0, 2, 1, 3]
        assert record["topological_sort"]["operations_count"] == 8

    def test_shortest_paths(self, diamond_doc):
        """Shortest paths list every reachable destination except the source."""
        section = process_graph(diamond_doc)["shortest_path"]
        assert section["source"] == 0
        assert section["destination"] == "all_reachable"
        assert section["paths"] == {
            "1": {"path": [0, 1], "node_durations": [1, 2], "path_length": 3},
            "2": {"path": [0, 2], "node_durations": [1, 5], "path_length": 6},
            "3": {"path": [0, 1, 3], "node_durations": [1, 2, 3], "path_length": 6},
        }
        assert section["operations_count"] == 12

    def test_critical_path(self, diamond_doc):
        """The longest-path section holds the critical path and totals add up."""
        record = process_graph(diamond_doc)
        longest = record["longest_path"]
        assert longest["critical_path_length"] == 9
        assert longest["critical_path"] == [0, 2, 3]
        assert longest["node_durations"] == [1, 5, 3]
        assert longest["operations_count"] == 12
        assert record["total_operations_count"] == 16 + 8 + 12 + 12
        assert record["total_execution_time_ns"] >= 0

    def test_paths_skipped_without_dag_flag(self, diamond_doc):
        """Path sections stay empty unless metadata.is_dag is true."""
        diamond_doc["metadata"] = {"is_dag": False}
        record = process_graph(diamond_doc)
        assert record["shortest_path"]["paths"] == {}
        assert record["shortest_path"]["operations_count"] == 0
        assert record["longest_path"]["critical_path"] == []
        assert record["longest_path"]["critical_path_length"] == 0
        assert record["total_operations_count"] == 16 + 8

    def test_unreachable_nodes_omitted(self, diamond_doc):
        """Destinations not reachable from the source are left out."""
        diamond_doc["source"] = 2
        paths = process_graph(diamond_doc)["shortest_path"]["paths"]
        assert set(paths) == {"3"}

    def test_defaults_for_missing_fields(self):
        """Missing id and source default to -1; text fields to an empty string."""
        record = process_graph({"edges": [[0, 1]]})
        assert record["graph_id"] == -1
        assert record["input_stats"]["source"] == -1
        assert record["input_stats"]["density"] == ""

    def test_result_is_json_serializable(self, diamond_doc):
        """The record serializes to JSON without custom encoders."""
        json.dumps(process_graph(diamond_doc))


class TestGenerateReport:
    """Tests for generate_report."""

    def test_single_graph(self, diamond_doc):
        """A single graph object yields one record."""
        records = generate_report(diamond_doc)
        assert len(records) == 1
        assert records[0]["graph_id"] == 1

    def test_batch_with_failure(self, diamond_doc, caplog):
        """A failing graph becomes an error record and the batch continues."""
        bad = {"id": 2, "edges": [[-1, 0]]}
        caplog.set_level(logging.ERROR, logger="tgraph.report")
        records = generate_report({"graphs": [diamond_doc, bad, {"id": 3, "n": 1}]})
        assert [r["graph_id"] for r in records] == [1, 2, 3]
        assert records[1] == {
            "graph_id": 2,
            "error": "ValueError: Edge endpoints must be non-negative, got (-1, 0).",
        }
        assert "kosaraju_scc" in records[2]
        assert any("index=1" in r.getMessage() for r in caplog.records)

    def test_non_object_rejected(self):
        """A document that is not an object raises ValueError."""
        with pytest.raises(ValueError):
            generate_report([1, 2])


def test_write_report(tmp_path, diamond_doc):
    """write_report creates parent directories and writes the returned records."""
    src = tmp_path / "input_diamond.json"
    src.write_text(json.dumps({"graphs": [diamond_doc]}))
    dst = tmp_path / "out" / "report_diamond.json"
    records = write_report(src, dst)
    assert json.loads(dst.read_text()) == records


def test_summarize_record(diamond_doc):
    """Summary lines describe successful records; error records give None."""
    line = summarize_record(process_graph(diamond_doc))
    assert line == "graph 1: 4 nodes, 4 edges, 4 SCCs, critical path 9"
    assert summarize_record({"graph_id": 5, "error": "boom"}) is None
