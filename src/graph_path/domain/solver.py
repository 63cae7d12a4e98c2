# graph_path/domain/solver.py
import heapq
import time
from collections.abc import Iterator
from enum import Enum
from typing import Literal

from graph_path.domain.entities.geography import Graph, GraphNode
from graph_path.domain.errors import FailureReason, NotAdjacentError, SolverStateError
from graph_path.domain.hooks import NoopHooks, SolverHooks
from graph_path.domain.path import PathBuilder
from graph_path.domain.results import SolveResult, Solved, Unsolved

AsymmetricEdges = Literal["exclude", "explore"]


class SolverState(Enum):
    UNSTARTED = "unstarted"
    SEARCHING = "searching"
    SOLVED = "solved"
    UNSOLVED = "unsolved"


class Solver:
    """
    Single-use shortest-path solver (Dijkstra, Euclidean edge weights).

    The solver holds the graph for the duration of one solve and hands it
    back inside the result, solved or not.

    asymmetric_edges:
      • "exclude": follow a neighbor link only if the target lists the source back.
      • "explore": follow raw links; an asymmetric hop on the winning path
        turns the result into INCONSISTENT_GRAPH.
    max_expansions: optional cap on settled nodes (None = unbounded).
    """

    def __init__(
        self,
        graph: Graph,
        *,
        hooks: SolverHooks | None = None,
        asymmetric_edges: AsymmetricEdges = "exclude",
        max_expansions: int | None = None,
        tie_epsilon: float = 1e-12,
    ):
        if asymmetric_edges not in ("exclude", "explore"):
            raise ValueError(f"Unknown asymmetric_edges policy {asymmetric_edges!r}")
        if max_expansions is not None and max_expansions < 1:
            raise ValueError("max_expansions must be >= 1")
        self._graph = graph
        self._hooks = hooks or NoopHooks()
        self.asymmetric_edges = asymmetric_edges
        self.max_expansions = max_expansions
        self.eps = tie_epsilon
        self._state = SolverState.UNSTARTED
        self._t0 = 0.0
        self._settled = 0

    @property
    def state(self) -> SolverState:
        return self._state

    # --------------- Entry points -----------------------------

    def solve_all(self) -> SolveResult:
        """Solve between the smallest and the largest node id."""
        self._claim()
        g = self._graph
        return self._solve(g.min_id(), g.max_id())

    def solve_given(self, start: int, end: int) -> SolveResult:
        self._claim()
        return self._solve(start, end)

    # --------------- Helpers ----------------------------------

    def _claim(self) -> None:
        if self._state is not SolverState.UNSTARTED:
            raise SolverStateError(self._state)
        self._state = SolverState.SEARCHING
        self._t0 = time.perf_counter()

    def _fail(self, reason: FailureReason, start, end, /, **detail) -> Unsolved:
        self._state = SolverState.UNSOLVED
        self._hooks.solve_end(
            start=start,
            end=end,
            state=self._state.value,
            reason=reason.value,
            settled=self._settled,
            wall_ms=(time.perf_counter() - self._t0) * 1000,
        )
        return Unsolved(self._graph, reason, detail)

    def _solve(self, start: int | None, end: int | None) -> SolveResult:
        g = self._graph
        self._hooks.solve_start(start=start, end=end, nodes=len(g))
        if len(g) == 0:
            return self._fail(FailureReason.EMPTY_GRAPH, start, end)
        if len(g) == 1:
            return self._fail(FailureReason.SINGLE_NODE, start, end)
        if start == end:
            return self._fail(FailureReason.SAME_ENDPOINT, start, end, node_id=start)
        for nid in (start, end):
            # id 0 never names a node, so it is simply not found here
            if nid not in g:
                return self._fail(FailureReason.ENDPOINT_NOT_FOUND, start, end, node_id=nid)
        return self._search(start, end)

    def _edges(self, node: GraphNode) -> Iterator[int]:
        g = self._graph
        # iterate each distinct neighbor once; the node data is left as is
        for v in dict.fromkeys(node.neighbors):
            if v == node.id:
                continue
            if v == 0 or v not in g:
                self._hooks.error(reason="dangling_neighbor", node_id=node.id, neighbor=v)
                continue
            if self.asymmetric_edges == "exclude" and not g.is_adjacent(node.id, v):
                continue
            yield v

    def _search(self, start: int, end: int) -> SolveResult:
        g = self._graph
        dist: dict[int, float] = {start: 0.0}
        pred: dict[int, int] = {}
        settled: set[int] = set()
        frontier: list[tuple[float, int]] = [(0.0, start)]

        while frontier:
            d, u = heapq.heappop(frontier)
            if u in settled:
                continue
            if self.max_expansions is not None and len(settled) >= self.max_expansions:
                return self._fail(
                    FailureReason.BUDGET_EXHAUSTED, start, end, budget=self.max_expansions
                )
            settled.add(u)
            self._settled = len(settled)
            self._hooks.expand(u, dist=d, frontier=len(frontier), settled=len(settled))
            if u == end:
                return self._assemble(start, end, pred)

            for v in self._edges(g.get_node(u)):
                if v in settled:
                    continue
                nd = d + g.edge_length(u, v)
                best = dist.get(v)
                if best is None or nd < best - self.eps:
                    dist[v], pred[v] = nd, u
                    heapq.heappush(frontier, (nd, v))
                elif abs(nd - best) <= self.eps and u < pred[v]:
                    # equal cost: smaller predecessor id wins
                    pred[v] = u

        return self._fail(FailureReason.NO_PATH, start, end, start=start, end=end)

    def _assemble(self, start: int, end: int, pred: dict[int, int]) -> SolveResult:
        ids = [end]
        while ids[-1] != start:
            ids.append(pred[ids[-1]])
        ids.reverse()

        builder = PathBuilder(self._graph)
        try:
            for nid in ids:
                builder.push_node(nid)
        except NotAdjacentError as exc:
            builder.into_graph()
            self._hooks.error(reason="inconsistent_graph", a=exc.last_id, b=exc.node_id)
            return self._fail(
                FailureReason.INCONSISTENT_GRAPH, start, end, a=exc.last_id, b=exc.node_id
            )
        path = builder.build()
        graph = builder.into_graph()

        self._state = SolverState.SOLVED
        self._hooks.solve_end(
            start=start,
            end=end,
            state=self._state.value,
            reason=None,
            settled=self._settled,
            wall_ms=(time.perf_counter() - self._t0) * 1000,
            hops=path.hops,
            length=path.length,
        )
        return Solved(path, graph)


# Convenience shorthands
def solve_all(graph: Graph, **solver_kw) -> SolveResult:
    return Solver(graph, **solver_kw).solve_all()


def solve_given(graph: Graph, start: int, end: int, **solver_kw) -> SolveResult:
    return Solver(graph, **solver_kw).solve_given(start, end)
