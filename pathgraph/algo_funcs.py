import heapq
import itertools
from typing import Dict, List, Set, Tuple

from pathgraph.models import Graph, PathResult
from pathgraph.helpers import normalize_id

# -----------------------------
# Pathfinding
# -----------------------------

def shortest_path(graph: Graph, source: str, target: str) -> PathResult:
    """
    Dijkstra's algorithm over a graph snapshot (non-negative weights, undirected edges).

    Frontier entries are (distance, insertion sequence, node); among equal
    distances the node pushed first is expanded first, so results are
    deterministic for a given edge insertion order. Stale entries are skipped
    on extraction instead of being removed from the heap. The search stops
    as soon as the target is extracted.

    When the target cannot be reached (including an unknown source) the
    result carries total_cost=None and a path of just the target.
    """
    start = normalize_id(source)
    goal = normalize_id(target)
    unreachable = PathResult(source=start, target=goal, path=[goal], total_cost=None)

    if start not in set(graph.nodes):
        return unreachable
    if start == goal:
        return PathResult(source=start, target=goal, path=[start], total_cost=0.0)

    # construct adjacency list
    adj: Dict[str, List[Tuple[str, float]]] = {}
    for e in graph.edges:
        adj.setdefault(e.from_, []).append((e.to, e.weight))
        adj.setdefault(e.to, []).append((e.from_, e.weight))  # bidirectional

    # a node missing from dist has not been reached yet
    dist: Dict[str, float] = {start: 0.0}
    prev: Dict[str, str] = {}
    finalized: Set[str] = set()
    seq = itertools.count()
    heap = [(0.0, next(seq), start)]

    while heap:
        d, _, node = heapq.heappop(heap)
        if node in finalized:
            continue
        finalized.add(node)
        if node == goal:
            break
        for nbr, w in adj.get(node, []):
            candidate = d + w
            if nbr not in dist or candidate < dist[nbr]:
                dist[nbr] = candidate
                prev[nbr] = node
                heapq.heappush(heap, (candidate, next(seq), nbr))

    if goal not in dist:
        return unreachable

    path = [goal]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return PathResult(source=start, target=goal, path=path, total_cost=dist[goal])
