from typing import Any, List, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

# -----------------------------
# Domain Models (Pydantic)
# -----------------------------

class Edge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(alias="from")
    to: str
    weight: float = 1.0

    @computed_field
    @property
    def label(self) -> str:
        # connection label shown next to the edge, e.g. "2.5" or "12345678"
        if self.weight.is_integer():
            return str(int(self.weight))
        return repr(self.weight)

class Graph(BaseModel):
    """Read-only view of the graph at one instant (nodes and edges in insertion order)."""
    model_config = ConfigDict(frozen=True)

    nodes: Tuple[str, ...] = ()
    edges: Tuple[Edge, ...] = ()

class PathResult(BaseModel):
    """
    Outcome of a shortest path query.

    total_cost is None when the target cannot be reached from the source;
    path then holds only the target id.
    """
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    path: List[str]
    total_cost: Optional[float] = None

    @computed_field
    @property
    def reachable(self) -> bool:
        return self.total_cost is not None

class Event(BaseModel):
    time: str
    type: str
    detail: dict

# -----------------------------
# API Schemas
# -----------------------------

class AddNodeRequest(BaseModel):
    id: str

class AddEdgeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    # passed through untouched; the store decides what counts as a weight
    weight: Any = 1.0

class MutationResponse(BaseModel):
    ok: bool
    node_count: int
    edge_count: int

# -----------------------------
# In-memory State (resets on restart)
# -----------------------------

STATE: Dict[str, List] = {
    "events": [],
}
