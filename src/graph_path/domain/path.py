# graph_path/domain/path.py
from dataclasses import dataclass

from graph_path.domain.entities.geography import Graph, Segment
from graph_path.domain.errors import BuilderConsumedError, NotAdjacentError, UnknownNodeError


@dataclass(frozen=True)
class Path:
    node_ids: tuple[int, ...]
    length: float
    segments: tuple[Segment, ...] = ()

    @property
    def start_id(self) -> int | None:
        return self.node_ids[0] if self.node_ids else None

    @property
    def end_id(self) -> int | None:
        return self.node_ids[-1] if self.node_ids else None

    @property
    def hops(self) -> int:
        return max(0, len(self.node_ids) - 1)

    def to_dict(self) -> dict:
        return {"nodes": list(self.node_ids), "length": self.length, "hops": self.hops}


class PathBuilder:
    """
    Grows a path one node id at a time over a Graph it uses exclusively.
    Every append checks that the new node and the current end list each
    other as neighbors; nodes are referenced by id only.
    """

    def __init__(self, graph: Graph):
        self._graph: Graph | None = graph
        self._ids: list[int] = []
        self._segments: list[Segment] = []
        self._length = 0.0

    def _g(self) -> Graph:
        if self._graph is None:
            raise BuilderConsumedError()
        return self._graph

    def push_node(self, node_id: int) -> None:
        g = self._g()
        node = g.get_node(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        if not self._ids:
            self._ids.append(node_id)
            return
        last = g.get_node(self._ids[-1])
        if not g.is_adjacent(last.id, node_id):
            raise NotAdjacentError(last.id, node_id)
        step = last.coords.distance_to(node.coords)
        self._segments.append(Segment(last.coords, node.coords, step, edge=(last.id, node_id)))
        self._ids.append(node_id)
        self._length += step

    def current_start_id(self) -> int | None:
        self._g()
        return self._ids[0] if self._ids else None

    def current_end_id(self) -> int | None:
        self._g()
        return self._ids[-1] if self._ids else None

    @property
    def node_ids(self) -> tuple[int, ...]:
        self._g()
        return tuple(self._ids)

    @property
    def length(self) -> float:
        self._g()
        return self._length

    def __len__(self) -> int:
        self._g()
        return len(self._ids)

    def build(self) -> Path:
        self._g()
        return Path(tuple(self._ids), self._length, tuple(self._segments))

    def into_graph(self) -> Graph:
        g = self._g()
        self._graph = None
        self._ids.clear()
        self._segments.clear()
        self._length = 0.0
        return g
