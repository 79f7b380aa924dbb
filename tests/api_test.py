import pytest
from fastapi.testclient import TestClient

from pathgraph.main import app
from pathgraph.store import STORE

@pytest.fixture
def client() -> TestClient:
    return TestClient(app)

def build_triangle(client: TestClient) -> None:
    for node in ("a", "b", "c"):
        assert client.post("/addNode", json={"id": node}).status_code == 200
    for a, b, w in [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)]:
        assert client.post("/addEdge", json={"from": a, "to": b, "weight": w}).status_code == 200

# -----------------------------
# Mutations
# -----------------------------

def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}

def test_add_node(client):
    resp = client.post("/addNode", json={"id": "a"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "node_count": 1, "edge_count": 0}
    assert STORE.has_node("A")

def test_add_duplicate_node_conflicts(client):
    client.post("/addNode", json={"id": "A"})
    resp = client.post("/addNode", json={"id": "a"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "DUPLICATE_NODE"
    assert STORE.node_count == 1

def test_add_empty_node_is_bad_request(client):
    resp = client.post("/addNode", json={"id": "  "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "EMPTY_ID"

def test_add_edge_to_missing_node(client):
    client.post("/addNode", json={"id": "A"})
    resp = client.post("/addEdge", json={"from": "A", "to": "B", "weight": 1})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "MISSING_ENDPOINT"
    assert STORE.edge_count == 0

@pytest.mark.parametrize("body, detail", [
    ({"from": "A", "to": "B", "weight": -2}, "INVALID_WEIGHT"),
    ({"from": "A", "to": "A", "weight": 1}, "SELF_LOOP"),
    ({"from": "", "to": "B", "weight": 1}, "EMPTY_ID"),
    ({"from": "A", "to": "B", "weight": True}, "INVALID_WEIGHT"),
    ({"from": "A", "to": "B", "weight": False}, "INVALID_WEIGHT"),
    ({"from": "A", "to": "B", "weight": "heavy"}, "INVALID_WEIGHT"),
    ({"from": "A", "to": "B", "weight": None}, "INVALID_WEIGHT"),
])
def test_add_edge_invalid_input(client, body, detail):
    client.post("/addNode", json={"id": "A"})
    client.post("/addNode", json={"id": "B"})
    resp = client.post("/addEdge", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == detail
    assert STORE.edge_count == 0

def test_add_edge_numeric_string_weight(client):
    client.post("/addNode", json={"id": "A"})
    client.post("/addNode", json={"id": "B"})
    resp = client.post("/addEdge", json={"from": "A", "to": "B", "weight": "2.5"})
    assert resp.status_code == 200
    assert STORE.get_snapshot().edges[0].weight == 2.5

def test_add_edge_missing_field_fails_validation(client):
    resp = client.post("/addEdge", json={"from": "A", "weight": 1})
    assert resp.status_code == 422

def test_get_graph(client):
    build_triangle(client)
    graph = client.get("/getGraph").json()
    assert graph["nodes"] == ["A", "B", "C"]
    assert graph["edges"][0] == {"from": "A", "to": "B", "weight": 1.0, "label": "1"}
    assert len(graph["edges"]) == 3

def test_clear(client):
    build_triangle(client)
    resp = client.post("/clear")
    assert resp.json() == {"ok": True, "node_count": 0, "edge_count": 0}
    assert client.get("/getGraph").json() == {"nodes": [], "edges": []}

# -----------------------------
# Paths
# -----------------------------

def test_shortest_path(client):
    build_triangle(client)
    resp = client.get("/shortestPath", params={"source": "a", "target": "c"})
    assert resp.status_code == 200
    assert resp.json() == {
        "source": "A",
        "target": "C",
        "path": ["A", "B", "C"],
        "total_cost": 2.0,
        "reachable": True,
    }

def test_shortest_path_unreachable_after_clear(client):
    build_triangle(client)
    client.post("/clear")
    body = client.get("/shortestPath", params={"source": "A", "target": "C"}).json()
    assert body["reachable"] is False
    assert body["total_cost"] is None
    assert body["path"] == ["C"]

def test_shortest_path_requires_both_ids(client):
    assert client.get("/shortestPath", params={"source": "A"}).status_code == 422

# -----------------------------
# Events
# -----------------------------

def test_events_newest_first_with_limit(client):
    build_triangle(client)
    client.get("/shortestPath", params={"source": "A", "target": "C"})
    events = client.get("/events", params={"limit": 2}).json()
    assert [e["type"] for e in events] == ["path_computed", "edge_added"]

def test_events_since_filter(client):
    client.post("/addNode", json={"id": "A"})
    assert client.get("/events", params={"since": "2999-01-01T00:00:00Z"}).json() == []
    events = client.get("/events", params={"since": "2000-01-01T00:00:00"}).json()
    assert [e["type"] for e in events] == ["node_added"]

def test_events_invalid_since(client):
    resp = client.get("/events", params={"since": "yesterday"})
    assert resp.status_code == 400
