import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from graph_path.domain.errors import DuplicateIdError, InvalidIdError


# Core geometry types used by the graph and paths
@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    length: float
    edge: tuple[int, int]  # (from_id, to_id)


@dataclass(frozen=True, order=True)
class GraphNode:
    """A vertex. Equality, hashing and ordering look at ``id`` only."""

    id: int
    coords: Point = field(compare=False)
    neighbors: tuple[int, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if self.id <= 0:
            raise InvalidIdError(self.id)
        if not isinstance(self.neighbors, tuple):
            object.__setattr__(self, "neighbors", tuple(self.neighbors))

    def is_neighbor(self, node_id: int) -> bool:
        return node_id in self.neighbors


class Graph:
    """Read-only collection of GraphNodes indexed by id."""

    def __init__(self, nodes: Iterable[GraphNode] | Mapping[int, GraphNode] = ()):
        items = list(nodes.items()) if isinstance(nodes, Mapping) else [(n.id, n) for n in nodes]
        self._nodes: dict[int, GraphNode] = {}
        for _, n in items:
            if n.id in self._nodes:
                raise DuplicateIdError(n.id)
            self._nodes[n.id] = n
        for key, n in items:
            if key != n.id:
                raise ValueError(f"node keyed as {key} has id {n.id}")

    @classmethod
    def with_nodes(cls, nodes: Iterable[GraphNode]) -> "Graph":
        return cls(nodes)

    @classmethod
    def _from_index(cls, index: dict[int, GraphNode]) -> "Graph":
        # index already checked by another Graph
        g = cls.__new__(cls)
        g._nodes = dict(index)
        return g

    @property
    def nodes(self) -> Mapping[int, GraphNode]:
        return MappingProxyType(self._nodes)

    def get_node(self, node_id: int) -> GraphNode | None:
        if node_id == 0:
            raise InvalidIdError(node_id)
        return self._nodes.get(node_id)

    def node_count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(sorted(self._nodes.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self._nodes.keys() != other._nodes.keys():
            return False
        # node equality is id-only, so compare the payload explicitly
        return all(
            (n.coords, n.neighbors) == (other._nodes[i].coords, other._nodes[i].neighbors)
            for i, n in self._nodes.items()
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)})"

    def min_id(self) -> int | None:
        return min(self._nodes.values()).id if self._nodes else None

    def max_id(self) -> int | None:
        return max(self._nodes.values()).id if self._nodes else None

    def is_adjacent(self, a: int, b: int) -> bool:
        """Both nodes exist and list each other as neighbors."""
        na, nb = self._nodes.get(a), self._nodes.get(b)
        if na is None or nb is None:
            return False
        return na.is_neighbor(b) and nb.is_neighbor(a)

    def edge_length(self, a: int, b: int) -> float:
        return self._nodes[a].coords.distance_to(self._nodes[b].coords)

    def copy(self) -> "Graph":
        # nodes are frozen, sharing them is safe
        return Graph._from_index(self._nodes)
