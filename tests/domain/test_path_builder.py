# tests/domain/test_path_builder.py
import itertools
import math

import pytest

from graph_path.domain.entities.geography import Graph, GraphNode, Point
from graph_path.domain.errors import (
    BuilderConsumedError,
    ContractViolation,
    NotAdjacentError,
    UnknownNodeError,
)
from graph_path.domain.path import PathBuilder


@pytest.fixture
def line_graph() -> Graph:
    # 1 -- 2 -- 3, plus 4 which lists 3 but 3 does not list 4
    return Graph.with_nodes(
        [
            GraphNode(1, Point(0, 0), (2,)),
            GraphNode(2, Point(3, 4), (1, 3)),
            GraphNode(3, Point(3, 10), (2,)),
            GraphNode(4, Point(0, 10), (3,)),
        ]
    )


def test_empty_builder_has_no_ends(line_graph):
    b = PathBuilder(line_graph)
    assert b.current_start_id() is None and b.current_end_id() is None
    assert len(b) == 0 and b.length == 0.0


def test_first_push_always_succeeds(line_graph):
    b = PathBuilder(line_graph)
    b.push_node(4)
    assert b.current_start_id() == b.current_end_id() == 4
    assert b.length == 0.0


def test_push_accumulates_euclidean_length(line_graph):
    b = PathBuilder(line_graph)
    for i in (1, 2, 3):
        b.push_node(i)
    assert b.node_ids == (1, 2, 3)
    assert (b.current_start_id(), b.current_end_id()) == (1, 3)
    assert math.isclose(b.length, 5.0 + 6.0)

    path = b.build()
    assert path.hops == 2
    assert [s.edge for s in path.segments] == [(1, 2), (2, 3)]
    assert math.isclose(sum(s.length for s in path.segments), path.length)


def test_unknown_node_is_a_query_error(line_graph):
    b = PathBuilder(line_graph)
    with pytest.raises(UnknownNodeError):
        b.push_node(42)


def test_one_sided_link_is_a_contract_violation(line_graph):
    b = PathBuilder(line_graph)
    b.push_node(3)
    with pytest.raises(NotAdjacentError) as ei:
        b.push_node(4)
    assert isinstance(ei.value, ContractViolation)
    # the failed push leaves the path untouched
    assert b.node_ids == (3,)


def test_adjacency_check_matches_symmetric_relation(line_graph):
    for a, c in itertools.permutations([1, 2, 3, 4], 2):
        b = PathBuilder(line_graph)
        b.push_node(a)
        if line_graph.is_adjacent(a, c):
            b.push_node(c)
            assert b.current_end_id() == c
        else:
            with pytest.raises(NotAdjacentError):
                b.push_node(c)


def test_into_graph_returns_same_graph_and_consumes(line_graph):
    b = PathBuilder(line_graph)
    b.push_node(1)
    g = b.into_graph()
    assert g is line_graph
    with pytest.raises(BuilderConsumedError):
        b.push_node(2)
    with pytest.raises(BuilderConsumedError):
        b.current_end_id()


def test_every_accessor_fails_after_into_graph(line_graph):
    b = PathBuilder(line_graph)
    b.push_node(1)
    b.push_node(2)
    b.into_graph()
    for use in (lambda: b.node_ids, lambda: b.length, lambda: len(b), b.build):
        with pytest.raises(BuilderConsumedError):
            use()
