# graph_path/domain/hooks.py
from typing import Protocol


class SolverHooks(Protocol):
    def solve_start(self, *, start, end, nodes): ...
    def expand(self, node_id: int, *, dist, frontier, settled): ...
    def solve_end(self, *, start, end, state, reason, settled, wall_ms, **extra): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def solve_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def solve_end(self, **_):
        pass

    def error(self, **_):
        pass
