from typing import List, Dict, Optional
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from pathgraph import config
from pathgraph.models import *
from pathgraph.store import STORE, RejectReason
# -----------------------------
# App Setup
# -----------------------------

app = FastAPI(
    title="Network Graph Path API",
    version="0.1.0",
    description=(
        "Build a weighted, undirected graph and query shortest paths.\n\n"
        "Endpoints provided: /addNode, /addEdge, /clear, /getGraph, /shortestPath, /events.\n"
        "State is in-memory and resets on restart."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# Helpers
# -----------------------------

_REJECT_STATUS: Dict[RejectReason, int] = {
    RejectReason.EMPTY_ID: 400,
    RejectReason.INVALID_WEIGHT: 400,
    RejectReason.SELF_LOOP: 400,
    RejectReason.MISSING_ENDPOINT: 404,
    RejectReason.DUPLICATE_NODE: 409,
}

def _reject(reason: Optional[RejectReason]) -> HTTPException:
    if reason is None:
        # state changed between the attempt and the explanation
        return HTTPException(status_code=409, detail="mutation rejected")
    return HTTPException(status_code=_REJECT_STATUS[reason], detail=reason.value)

def _mutation_response(ok: bool) -> MutationResponse:
    return MutationResponse(ok=ok, node_count=STORE.node_count, edge_count=STORE.edge_count)

def _parse_utc(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

# -----------------------------
# Endpoints
# -----------------------------

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.get("/events", response_model=List[Event])
async def get_events(limit: Optional[int] = None, since: Optional[str] = None):
    """
    Retrieve events newest first, optionally limited and filtered by a 'since' timestamp (ISO 8601).
    """
    events = STATE.get("events", [])

    if since is not None:
        try:
            since_dt = _parse_utc(since)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid ISO 8601 timestamp for 'since'")
        events = [e for e in events if _parse_utc(e.time) > since_dt]

    if limit is not None:
        events = events[-limit:] if limit > 0 else []

    return events[::-1]

@app.post("/addNode", response_model=MutationResponse, tags=["graph"])
async def add_node(req: AddNodeRequest) -> MutationResponse:
    if not STORE.add_node(req.id):
        raise _reject(STORE.explain_node(req.id))
    return _mutation_response(True)

@app.post("/addEdge", response_model=MutationResponse, tags=["graph"])
async def add_edge(req: AddEdgeRequest) -> MutationResponse:
    if not STORE.add_edge(req.from_, req.to, req.weight):
        raise _reject(STORE.explain_edge(req.from_, req.to, req.weight))
    return _mutation_response(True)

@app.post("/clear", response_model=MutationResponse, tags=["graph"])
async def clear() -> MutationResponse:
    STORE.clear()
    return _mutation_response(True)

@app.get("/getGraph", response_model=Graph, tags=["graph"])
async def get_graph() -> Graph:
    return STORE.get_snapshot()

@app.get("/shortestPath", response_model=PathResult, tags=["paths"])
async def shortest_path(source: str, target: str) -> PathResult:
    # an unreachable target is a normal answer: total_cost is null
    return STORE.shortest_path(source, target)

# -----------------------------
# Run (if executed directly)
# -----------------------------

# Use: uvicorn pathgraph.main:app --reload // or python -m pathgraph.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pathgraph.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
