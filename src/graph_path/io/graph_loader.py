# graph_path/io/graph_loader.py
import json
from pathlib import Path

from pydantic import ValidationError

from graph_path.config.models import GraphByPath, GraphInline, GraphModel, GraphRef
from graph_path.domain.entities.geography import Graph
from graph_path.domain.errors import GraphLoadError


def parse_graph(text: str | bytes) -> Graph:
    """Parse the JSON wire format. Schema problems become GraphLoadError;
    domain problems (duplicate or zero ids) keep their own type."""
    try:
        model = GraphModel.model_validate_json(text)
    except ValidationError as exc:
        raise GraphLoadError(f"invalid graph document: {exc.error_count()} error(s)\n{exc}") from exc
    return model.to_graph()


def load_graph(path: str | Path) -> Graph:
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise GraphLoadError(f"could not read {path}: {exc}") from exc
    return parse_graph(raw)


def dump_graph(graph: Graph, *, indent: int | None = 2) -> str:
    return json.dumps(GraphModel.from_graph(graph).model_dump(), indent=indent)


def resolve_graph(ref: GraphRef) -> Graph:
    if isinstance(ref, GraphByPath):
        return load_graph(ref.file)
    if isinstance(ref, GraphInline):
        return ref.graph.to_graph()
    raise ValueError(f"Unsupported graph ref {ref!r}")
