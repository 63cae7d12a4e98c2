# graph_path/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from graph_path.config.models import RunModel
from graph_path.domain.entities.geography import Graph
from graph_path.domain.hooks import NoopHooks, SolverHooks
from graph_path.domain.results import SolveResult
from graph_path.domain.solver import Solver
from graph_path.io.graph_loader import resolve_graph
from graph_path.io.solver_logging import SolverLogging  # JSON logs


@dataclass
class App:
    model: RunModel
    graph: Graph
    hooks: SolverHooks

    def solver(self, graph: Graph | None = None) -> Solver:
        s = self.model.solver
        return Solver(
            graph if graph is not None else self.graph,
            hooks=self.hooks,
            asymmetric_edges=s.asymmetric_edges,
            max_expansions=s.max_expansions,
            tie_epsilon=s.tie_epsilon,
        )

    def run(self) -> SolveResult:
        """Solve the configured endpoints, or lowest-to-highest id when none are set.
        The graph comes back in the result and is stored again for the next run."""
        solver = self.solver()
        if self.model.start is None:
            result = solver.solve_all()
        else:
            result = solver.solve_given(self.model.start, self.model.end)
        self.graph = result.graph
        return result


def build(
    cfg: RunModel | Mapping,
    *,
    use_logging: bool = True,
    logger: logging.Logger | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, RunModel) else RunModel.model_validate(cfg)

    # 1) Graph (may raise GraphLoadError / DuplicateIdError / InvalidIdError)
    graph = resolve_graph(model.graph)

    # 2) Hooks
    hooks = (
        SolverLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            logger=logger,
        )
        if use_logging
        else NoopHooks()
    )
    return App(model, graph, hooks)
