# dijkstra_baseline.py
import heapq
from typing import List

from graph_store import GraphStore

INF = float('inf')


def all_distances_from_one(graph: GraphStore, start: int) -> List[float]:
    """
    Standard Dijkstra with heapq and no decrease-key: an improved distance is
    pushed as a new (dist, v) entry and older entries for v are skipped when
    popped. Stops once the queue is empty or every vertex is final.
    Returns dist list (float), INF where unreachable.
    """
    graph.check_vertex(start)
    n = graph.N
    dist = [INF] * n
    finalized = [False] * n
    dist[start] = 0.0
    pq = [(0.0, start)]
    remaining = n
    while pq and remaining:
        d, u = heapq.heappop(pq)
        # stale entry or already settled
        if finalized[u] or d > dist[u]:
            continue
        finalized[u] = True
        remaining -= 1
        for v, w in graph.adj[u]:
            if finalized[v]:
                continue
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
    return dist
