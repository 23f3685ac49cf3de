"""Tests for MapService, the component the API talks to."""

import threading

import pytest

from map_routing.adapters.graph import DijkstraRouteSolver, InMemoryGraphStore
from map_routing.domain.models import NOT_FOUND_DISTANCE, Edge, Node, RouteFailure
from map_routing.services import MapService


@pytest.fixture
def service():
    return MapService(store=InMemoryGraphStore(), route_solver=DijkstraRouteSolver())


@pytest.fixture
def abc_map():
    return [
        Node("A", (Edge("B", 2), Edge("C", 10))),
        Node("B", (Edge("C", 3),)),
        Node("C"),
    ]


def test_get_map_before_set_is_empty(service):
    assert service.get_map() == []
    assert service.map_state() == "unset"


def test_set_then_get_round_trips(service, abc_map):
    service.set_map(abc_map)

    assert service.get_map() == abc_map
    assert service.map_state() == "loaded"


def test_set_empty_map_reads_back_empty(service):
    service.set_map([])

    assert service.get_map() == []
    assert service.map_state() == "empty"


def test_get_map_returns_independent_copy(service, abc_map):
    service.set_map(abc_map)

    first = service.get_map()
    first.clear()
    abc_map.pop()

    assert [n.name for n in service.get_map()] == ["A", "B", "C"]


def test_shortest_path_prefers_cheaper_detour(service, abc_map):
    service.set_map(abc_map)

    route = service.shortest_path("A", "C")

    assert list(route.path) == ["A", "B", "C"]
    assert route.distance == 5


def test_shortest_path_to_self(service, abc_map):
    service.set_map(abc_map)

    for node in abc_map:
        route = service.shortest_path(node.name, node.name)
        assert list(route.path) == [node.name]
        assert route.distance == 0


@pytest.mark.parametrize("start,end", [("X", "C"), ("A", "X"), ("X", "Y"), ("a", "c")])
def test_unknown_nodes_are_not_found(service, abc_map, start, end):
    service.set_map(abc_map)

    route = service.shortest_path(start, end)

    assert route.path == ()
    assert route.distance == NOT_FOUND_DISTANCE
    assert route.failure is RouteFailure.UNKNOWN_NODE


def test_unreachable_node_is_not_found(service, abc_map):
    service.set_map(abc_map)

    route = service.shortest_path("C", "A")

    assert route.distance == NOT_FOUND_DISTANCE
    assert route.failure is RouteFailure.NO_PATH


def test_shortest_path_on_unset_map(service):
    route = service.shortest_path("A", "B")

    assert route.failure is RouteFailure.UNKNOWN_NODE


def test_readers_see_pre_or_post_swap_snapshot(service):
    # Old map: A->B costs 1. New map: A->B costs 2 via C. Any mix would
    # produce a different answer.
    old = [Node("A", (Edge("B", 1),)), Node("B")]
    new = [Node("A", (Edge("C", 1),)), Node("C", (Edge("B", 1),)), Node("B")]
    service.set_map(old)

    results = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            route = service.shortest_path("A", "B")
            results.append((route.path, route.distance))

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in readers:
        t.start()
    for i in range(200):
        service.set_map(new if i % 2 == 0 else old)
    stop.set()
    for t in readers:
        t.join()

    assert results
    assert set(results) <= {(("A", "B"), 1), (("A", "C", "B"), 2)}


def test_edge_lists_are_copied_on_set_and_get(service):
    edges = [Edge("B", 1)]
    service.set_map([Node("A", edges), Node("B")])

    edges.append(Edge("Z", 9))
    with pytest.raises(AttributeError):
        service.get_map()[0].edges.clear()

    stored = service.get_map()[0]
    assert stored.edges == (Edge("B", 1),)
    assert isinstance(stored.edges, tuple)
    assert list(service.shortest_path("A", "B").path) == ["A", "B"]
