# graph_path/domain/results.py
from dataclasses import dataclass

from graph_path.domain.entities.geography import Graph
from graph_path.domain.errors import (
    EmptyGraphError,
    EndpointNotFoundError,
    FailureReason,
    GraphPathError,
    InconsistentGraphError,
    NoPathError,
    SameEndpointError,
    SearchBudgetError,
    SingleNodeError,
)
from graph_path.domain.path import Path


@dataclass(frozen=True)
class Solved:
    path: Path
    graph: Graph

    ok = True

    def unwrap(self) -> Path:
        return self.path


@dataclass(frozen=True)
class Unsolved:
    graph: Graph
    reason: FailureReason
    detail: dict  # ids/budget that produced the failure

    ok = False

    @property
    def error(self) -> GraphPathError:
        d = self.detail
        match self.reason:
            case FailureReason.EMPTY_GRAPH:
                return EmptyGraphError()
            case FailureReason.SINGLE_NODE:
                return SingleNodeError()
            case FailureReason.SAME_ENDPOINT:
                return SameEndpointError(d["node_id"])
            case FailureReason.ENDPOINT_NOT_FOUND:
                return EndpointNotFoundError(d["node_id"])
            case FailureReason.NO_PATH:
                return NoPathError(d["start"], d["end"])
            case FailureReason.INCONSISTENT_GRAPH:
                return InconsistentGraphError(d["a"], d["b"])
            case FailureReason.BUDGET_EXHAUSTED:
                return SearchBudgetError(d["budget"])
        raise ValueError(f"unknown failure reason {self.reason!r}")

    def unwrap(self) -> Path:
        raise self.error


SolveResult = Solved | Unsolved
