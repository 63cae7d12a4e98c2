"""Solve a shortest path over a JSON graph file."""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from graph_path.app.build import build
from graph_path.domain.errors import GraphPathError
from graph_path.domain.results import Solved
from graph_path.io.solver_logging import default_json_logger


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graph-path", description=__doc__)
    parser.add_argument("filename", help="Path to graph JSON file.")
    parser.add_argument("--start", type=int, help="Start node id (default: lowest id).")
    parser.add_argument("--end", type=int, help="End node id (default: highest id).")
    parser.add_argument(
        "--asymmetric-edges",
        choices=("exclude", "explore"),
        default="exclude",
        help="How to treat neighbor links listed on one side only.",
    )
    parser.add_argument("--max-expansions", type=int, help="Give up after settling N nodes.")
    parser.add_argument(
        "--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR")
    )
    parser.add_argument("--run-id", default="cli")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the solver CLI. Logs go to stderr, the result to stdout."""

    args = _parser().parse_args(argv)
    cfg = {
        "run_id": args.run_id,
        "graph": {"by": "path", "file": args.filename},
        "start": args.start,
        "end": args.end,
        "solver": {
            "asymmetric_edges": args.asymmetric_edges,
            "max_expansions": args.max_expansions,
        },
        "log": {"level": args.log_level, "debug": args.log_level == "DEBUG"},
    }
    try:
        app = build(cfg, logger=default_json_logger(level=args.log_level, stream=sys.stderr))
    except (GraphPathError, ValidationError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    result = app.run()
    if isinstance(result, Solved):
        print(json.dumps({"status": "solved", **result.path.to_dict()}))
        return 0
    print(json.dumps({"status": "unsolved", "reason": result.reason.value, "error": str(result.error)}))
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
