# graph_path/domain/errors.py
from enum import Enum


class GraphPathError(Exception):
    """Base for every recoverable error raised by graph_path."""


# ------------- Structural: malformed input graphs --------------------


class StructuralError(GraphPathError):
    pass


class DuplicateIdError(StructuralError):
    def __init__(self, node_id: int):
        super().__init__(f"duplicate node id {node_id}")
        self.node_id = node_id


class InvalidIdError(StructuralError):
    def __init__(self, node_id: int = 0):
        super().__init__(f"invalid node id {node_id} (ids are positive, 0 is reserved)")
        self.node_id = node_id


class InconsistentGraphError(StructuralError):
    def __init__(self, a: int, b: int):
        super().__init__(f"nodes {a} and {b} do not list each other as neighbors")
        self.a, self.b = a, b


# ------------- Query: request cannot be satisfied --------------------


class QueryError(GraphPathError):
    pass


class EmptyGraphError(QueryError):
    def __init__(self):
        super().__init__("graph has no nodes")


class SingleNodeError(QueryError):
    def __init__(self):
        super().__init__("graph only has one node")


class SameEndpointError(QueryError):
    def __init__(self, node_id: int):
        super().__init__(f"start and end are both {node_id}")
        self.node_id = node_id


class EndpointNotFoundError(QueryError):
    def __init__(self, node_id: int):
        super().__init__(f"could not find start/end node {node_id}")
        self.node_id = node_id


class UnknownNodeError(QueryError):
    def __init__(self, node_id: int):
        super().__init__(f"node {node_id} is not in the graph")
        self.node_id = node_id


# ------------- Search ------------------------------------------------


class SearchError(GraphPathError):
    pass


class NoPathError(SearchError):
    def __init__(self, start: int, end: int):
        super().__init__(f"no path from {start} to {end}")
        self.start, self.end = start, end


class SearchBudgetError(SearchError):
    def __init__(self, budget: int):
        super().__init__(f"search budget of {budget} expansions exhausted")
        self.budget = budget


# ------------- Loading -----------------------------------------------


class GraphLoadError(GraphPathError):
    pass


# ------------- Contract violations (programming errors) --------------


class ContractViolation(AssertionError):
    """Raised when a caller breaks an invariant that code is supposed to
    enforce by construction. Not meant to be handled."""


class NotAdjacentError(ContractViolation):
    def __init__(self, last_id: int, node_id: int):
        super().__init__(f"node {node_id} is not adjacent to path end {last_id}")
        self.last_id, self.node_id = last_id, node_id


class BuilderConsumedError(ContractViolation):
    def __init__(self):
        super().__init__("path builder was consumed by into_graph()")


class SolverStateError(ContractViolation):
    def __init__(self, state):
        super().__init__(f"solver already ran (state={state.value})")
        self.state = state


class FailureReason(Enum):
    EMPTY_GRAPH = "empty_graph"
    SINGLE_NODE = "single_node"
    SAME_ENDPOINT = "same_endpoint"
    ENDPOINT_NOT_FOUND = "endpoint_not_found"
    NO_PATH = "no_path"
    INCONSISTENT_GRAPH = "inconsistent_graph"
    BUDGET_EXHAUSTED = "budget_exhausted"
