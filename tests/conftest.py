"""
Pytest configuration and shared fixtures.
"""

import pytest

from pathgraph.models import STATE
from pathgraph.store import STORE, GraphStore


@pytest.fixture(autouse=True)
def reset_state():
    """Empty the shared store and event log before and after each test."""
    STORE.clear()
    STATE["events"] = []
    yield
    STORE.clear()
    STATE["events"] = []


@pytest.fixture
def store() -> GraphStore:
    """A fresh store, independent of the one the API uses."""
    return GraphStore()


@pytest.fixture
def triangle(store: GraphStore) -> GraphStore:
    """A-B (1), B-C (1), A-C (5): the detour through B is cheaper than the direct edge."""
    for node in ("A", "B", "C"):
        store.add_node(node)
    store.add_edge("A", "B", 1)
    store.add_edge("B", "C", 1)
    store.add_edge("A", "C", 5)
    return store
