"""End-to-end tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from map_routing.api import create_app
from map_routing.config import AppConfig, AuthConfig
from map_routing.container import Container
from map_routing.domain.models import AccessLevel

READ_KEY = "read-key"
WRITE_KEY = "write-key"

READ = {"X-Api-Key": READ_KEY}
WRITE = {"X-Api-Key": WRITE_KEY}

ABC_MAP = [
    {"name": "A", "edges": [{"target": "B", "distance": 2}, {"target": "C", "distance": 10}]},
    {"name": "B", "edges": [{"target": "C", "distance": 3}]},
    {"name": "C", "edges": []},
]


@pytest.fixture
def client():
    config = AppConfig(
        auth=AuthConfig(
            api_keys={READ_KEY: AccessLevel.READ, WRITE_KEY: AccessLevel.READ_WRITE}
        )
    )
    app = create_app(Container.create_default(config))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def loaded(client):
    response = client.post("/api/map/SetMap", json=ABC_MAP, headers=WRITE)
    assert response.status_code == 200
    return client


class TestAuthentication:
    def test_missing_key_is_rejected(self, client):
        response = client.get("/api/map/GetMap")

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "API Key missing"

    def test_unknown_key_is_rejected(self, client):
        response = client.get("/api/map/GetMap", headers={"X-Api-Key": "bogus"})

        assert response.status_code == 401
        assert response.text == "Invalid API Key"

    def test_read_key_cannot_set_map(self, client):
        response = client.post("/api/map/SetMap", json=ABC_MAP, headers=READ)

        assert response.status_code == 401
        assert response.text == "Insufficient permissions"
        # Rejected before the map was touched
        assert client.get("/api/map/GetMap", headers=READ).status_code == 400

    def test_write_key_can_read(self, loaded):
        response = loaded.get("/api/map/GetMap", headers=WRITE)

        assert response.status_code == 200

    def test_auth_checked_before_parameters(self, client):
        response = client.get("/api/map/ShortestRoute")

        assert response.status_code == 401


class TestSetAndGetMap:
    def test_get_before_set(self, client):
        response = client.get("/api/map/GetMap", headers=READ)

        assert response.status_code == 400
        assert response.text == "Map has not been set."

    def test_set_then_get(self, loaded):
        response = loaded.get("/api/map/GetMap", headers=READ)

        assert response.status_code == 200
        assert response.json() == ABC_MAP

    def test_missing_edges_default_to_empty(self, client):
        client.post("/api/map/SetMap", json=[{"name": "solo"}], headers=WRITE)

        response = client.get("/api/map/GetMap", headers=READ)

        assert response.json() == [{"name": "solo", "edges": []}]

    def test_empty_map_is_rejected(self, client):
        response = client.post("/api/map/SetMap", json=[], headers=WRITE)

        assert response.status_code == 400
        assert response.text == "Invalid graph data."

    def test_missing_body_is_rejected(self, client):
        response = client.post("/api/map/SetMap", headers=WRITE)

        assert response.status_code == 400
        assert response.text == "Invalid graph data."

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "A"},
            [{"edges": []}],
            [{"name": "A", "edges": [{"target": "B"}]}],
            [{"name": "A", "edges": [{"target": "B", "distance": "far"}]}],
        ],
    )
    def test_malformed_map_is_rejected(self, client, body):
        response = client.post("/api/map/SetMap", json=body, headers=WRITE)

        assert response.status_code == 400
        assert response.text == "Invalid graph data."

    def test_negative_weights_are_accepted(self, client):
        body = [{"name": "A", "edges": [{"target": "B", "distance": -4}]}, {"name": "B"}]

        response = client.post("/api/map/SetMap", json=body, headers=WRITE)

        assert response.status_code == 200
        stored = client.get("/api/map/GetMap", headers=READ).json()
        assert stored[0]["edges"] == [{"target": "B", "distance": -4}]

    def test_set_replaces_previous_map(self, loaded):
        loaded.post("/api/map/SetMap", json=[{"name": "X", "edges": []}], headers=WRITE)

        response = loaded.get("/api/map/GetMap", headers=READ)

        assert [n["name"] for n in response.json()] == ["X"]


class TestShortestRoute:
    def test_route_is_concatenated_names(self, loaded):
        response = loaded.get("/api/map/ShortestRoute", params={"from": "A", "to": "C"}, headers=READ)

        assert response.status_code == 200
        assert response.text == "ABC"

    def test_distance_is_integer(self, loaded):
        response = loaded.get("/api/map/ShortestDistance", params={"from": "A", "to": "C"}, headers=READ)

        assert response.status_code == 200
        assert response.json() == 5

    def test_same_node(self, loaded):
        route = loaded.get("/api/map/ShortestRoute", params={"from": "B", "to": "B"}, headers=READ)
        distance = loaded.get("/api/map/ShortestDistance", params={"from": "B", "to": "B"}, headers=READ)

        assert route.text == "B"
        assert distance.json() == 0

    @pytest.mark.parametrize("endpoint", ["ShortestRoute", "ShortestDistance"])
    @pytest.mark.parametrize("params", [{}, {"from": "A"}, {"to": "C"}, {"from": "", "to": "C"}])
    def test_missing_parameters(self, loaded, endpoint, params):
        response = loaded.get(f"/api/map/{endpoint}", params=params, headers=READ)

        assert response.status_code == 400
        assert response.text == "Parameters 'from' and 'to' are required."

    @pytest.mark.parametrize("endpoint", ["ShortestRoute", "ShortestDistance"])
    @pytest.mark.parametrize("start,end", [("A", "Q"), ("Q", "A"), ("C", "A")])
    def test_unknown_node_or_no_path(self, loaded, endpoint, start, end):
        response = loaded.get(f"/api/map/{endpoint}", params={"from": start, "to": end}, headers=READ)

        assert response.status_code == 400
        assert response.text == "Unknown node names or no path found."


def test_health_reports_map_state(client):
    assert client.get("/health").json() == {"status": "ok", "state": "unset", "nodes": 0}

    client.post("/api/map/SetMap", json=ABC_MAP, headers=WRITE)

    assert client.get("/health").json() == {"status": "ok", "state": "loaded", "nodes": 3}
