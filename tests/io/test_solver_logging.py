# tests/io/test_solver_logging.py
import io
import json
import logging

from graph_path.domain.entities.geography import Graph, GraphNode, Point
from graph_path.domain.solver import Solver
from graph_path.io.solver_logging import SolverLogging, default_json_logger


def _logger(name):
    buf = io.StringIO()
    log = logging.getLogger(name)
    log.handlers.clear()
    log.propagate = False
    default_json_logger(name=name, level="DEBUG", stream=buf)
    return log, buf


def _lines(buf):
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def _graph():
    return Graph.with_nodes(
        [
            GraphNode(1, Point(0, 0), (2, 99)),
            GraphNode(2, Point(0, 3), (1, 3)),
            GraphNode(3, Point(4, 3), (2,)),
        ]
    )


def test_solve_emits_start_and_end_json():
    log, buf = _logger("graph_path.test.info")
    hooks = SolverLogging(run_id="r-1", logger=log)
    Solver(_graph(), hooks=hooks).solve_given(1, 3)

    rows = _lines(buf)
    assert [r["msg"] for r in rows] == ["solve_start", "solve_end"]
    end = rows[-1]
    assert end["level"] == "INFO" and end["run_id"] == "r-1"
    assert end["state"] == "solved" and end["hops"] == 2 and end["length"] == 7.0


def test_failed_solve_logs_warning_with_reason():
    log, buf = _logger("graph_path.test.warn")
    Solver(_graph(), hooks=SolverLogging(logger=log)).solve_given(1, 42)
    end = _lines(buf)[-1]
    assert end["level"] == "WARNING"
    assert end["reason"] == "endpoint_not_found"


def test_debug_samples_expansions_and_dangling_links():
    log, buf = _logger("graph_path.test.debug")
    hooks = SolverLogging(logger=log, debug=True, sample_every=2)
    Solver(_graph(), hooks=hooks).solve_given(1, 3)
    rows = _lines(buf)
    expands = [r for r in rows if r["msg"] == "expand"]
    assert [r["node_id"] for r in expands] == [2]  # 2nd of 3 expansions
    assert any(r["msg"] == "dangling_neighbor" and r["neighbor"] == 99 for r in rows)
