# io/solver_logging.py
import json
import logging
import sys

from graph_path.domain.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def default_json_logger(name="graph_path", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    elif stream is not None:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler):
                h.setStream(stream)
    logger.setLevel(level)
    return logger


class SolverLogging(NoopHooks):
    """
    Structured JSON logs for one or more solves.
    INFO: solve_start / solve_end. DEBUG (debug=True): sampled node expansions.
    """

    WARN_REASONS = {"dangling_neighbor"}

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or default_json_logger(level=level)
        self.expanded = 0

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    # solver lifecycle

    def solve_start(self, *, start, end, nodes):
        self.expanded = 0
        self._emit("INFO", "solve_start", start=start, end=end, nodes=nodes)

    def expand(self, node_id, *, dist, frontier, settled):
        self.expanded += 1
        if self.debug and (self.expanded % self.sample_every) == 0:
            self._emit("DEBUG", "expand", node_id=node_id, dist=dist, frontier=frontier, settled=settled)

    def solve_end(self, *, start, end, state, reason, settled, wall_ms, **extra):
        level = "INFO" if reason is None else "WARNING"
        self._emit(
            level,
            "solve_end",
            start=start,
            end=end,
            state=state,
            reason=reason,
            settled=settled,
            wall_ms=round(wall_ms, 3),
            **extra,
        )

    def error(self, *, reason: str, **kw):
        if reason in self.WARN_REASONS:
            if self.debug:
                self._emit("WARNING", reason, **kw)
            return
        self._emit("ERROR", "solver_error", reason=reason, **kw)
