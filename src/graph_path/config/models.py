import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from graph_path.domain.entities.geography import Graph, GraphNode, Point

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]
UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]


# ----------------- WIRE FORMAT ---------------------


class PointModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x: Int32
    y: Int32


class GraphNodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: UInt32  # 0 is rejected when the domain node is built
    coords: PointModel
    children: list[UInt32] = Field(default_factory=list)

    def to_node(self) -> GraphNode:
        return GraphNode(
            id=self.id,
            coords=Point(self.coords.x, self.coords.y),
            neighbors=tuple(self.children),
        )


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[GraphNodeModel] = Field(default_factory=list)

    def to_graph(self) -> Graph:
        # duplicates are a domain error, not a schema one
        return Graph.with_nodes(n.to_node() for n in self.nodes)

    @classmethod
    def from_graph(cls, graph: Graph) -> "GraphModel":
        return cls(
            nodes=[
                GraphNodeModel(
                    id=n.id,
                    coords=PointModel(x=n.coords.x, y=n.coords.y),
                    children=list(n.neighbors),
                )
                for n in graph
            ]
        )


# ----------------- RUN ---------------------


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


class SolverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    asymmetric_edges: Literal["exclude", "explore"] = "exclude"
    max_expansions: int | None = Field(default=None, ge=1)
    tie_epsilon: float = Field(default=1e-12, ge=0.0)


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json"] = "json"

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    graph: GraphModel


GraphRef = Annotated[GraphByPath | GraphInline, Field(discriminator="by")]


class RunModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    graph: GraphRef
    start: UInt32 | None = None
    end: UInt32 | None = None
    solver: SolverModel = SolverModel()
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _endpoints_together(self):
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be given together")
        return self
