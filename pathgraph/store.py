import threading
from enum import Enum
from typing import Any, Dict, List, Optional

from pathgraph.models import Edge, Graph, PathResult
from pathgraph.helpers import coerce_weight, log_event, normalize_id
from pathgraph import algo_funcs

class RejectReason(str, Enum):
    EMPTY_ID = "EMPTY_ID"
    DUPLICATE_NODE = "DUPLICATE_NODE"
    INVALID_WEIGHT = "INVALID_WEIGHT"
    SELF_LOOP = "SELF_LOOP"
    MISSING_ENDPOINT = "MISSING_ENDPOINT"

class GraphStore:
    """
    Owns the graph's nodes and edges.

    - node ids are normalized (stripped, upper-cased) and unique
    - an edge may only join two distinct nodes that already exist
    - rejected mutations return False and leave the graph untouched
    - every mutation and query is recorded in the event log

    The event log (STATE["events"]) is process-wide: every store writes to
    the same log, which is what /events serves.
    """

    def __init__(self) -> None:
        # dict keeps insertion order; values unused
        self._nodes: Dict[str, None] = {}
        self._edges: List[Edge] = []
        self._lock = threading.RLock()

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_node(self, node_id: Any) -> bool:
        return normalize_id(node_id) in self._nodes

    # -----------------------------
    # Validation
    # -----------------------------

    def explain_node(self, node_id: Any) -> Optional[RejectReason]:
        """Why add_node(node_id) would be rejected right now, or None if it would succeed."""
        node_id = normalize_id(node_id)
        if not node_id:
            return RejectReason.EMPTY_ID
        if node_id in self._nodes:
            return RejectReason.DUPLICATE_NODE
        return None

    def explain_edge(self, from_: Any, to: Any, weight: Any) -> Optional[RejectReason]:
        """Why add_edge(from_, to, weight) would be rejected right now, or None if it would succeed."""
        a, b = normalize_id(from_), normalize_id(to)
        if not a or not b:
            return RejectReason.EMPTY_ID
        if coerce_weight(weight) is None:
            return RejectReason.INVALID_WEIGHT
        if a == b:
            return RejectReason.SELF_LOOP
        if a not in self._nodes or b not in self._nodes:
            return RejectReason.MISSING_ENDPOINT
        return None

    # -----------------------------
    # Mutations
    # -----------------------------

    def add_node(self, node_id: Any) -> bool:
        with self._lock:
            reason = self.explain_node(node_id)
            node_id = normalize_id(node_id)
            if reason is not None:
                log_event("node_rejected", {"id": node_id, "reason": reason.value})
                return False
            self._nodes[node_id] = None
            log_event("node_added", {"id": node_id})
            return True

    def add_edge(self, from_: Any, to: Any, weight: Any) -> bool:
        with self._lock:
            reason = self.explain_edge(from_, to, weight)
            a, b = normalize_id(from_), normalize_id(to)
            if reason is not None:
                log_event("edge_rejected", {"from": a, "to": b, "weight": repr(weight), "reason": reason.value})
                return False
            # parallel edges between the same pair are kept; the cheaper one wins in path search
            edge = Edge(from_=a, to=b, weight=coerce_weight(weight))
            self._edges.append(edge)
            log_event("edge_added", {"from": a, "to": b, "weight": edge.weight})
            return True

    def clear(self) -> None:
        with self._lock:
            removed = {"nodes": len(self._nodes), "edges": len(self._edges)}
            self._nodes = {}
            self._edges = []
            log_event("graph_cleared", removed)

    remove_all = clear

    # -----------------------------
    # Queries
    # -----------------------------

    def get_snapshot(self) -> Graph:
        # Edge and Graph are frozen, so the tuples detach the snapshot from later mutations
        with self._lock:
            return Graph(nodes=tuple(self._nodes), edges=tuple(self._edges))

    def shortest_path(self, source: Any, target: Any) -> PathResult:
        with self._lock:
            result = algo_funcs.shortest_path(self.get_snapshot(), source, target)
            log_event("path_computed", {
                "source": result.source,
                "target": result.target,
                "path": result.path,
                "total_cost": result.total_cost,
            })
            return result

# single store shared by the API (state resets on restart)
STORE = GraphStore()
