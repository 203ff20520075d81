# dijkstra.py
# Shortest distances on a GraphStore driven by the indexed min-heap.
#
#   shortest_dist(g, a, b)               single pair, stops once b is extracted
#   all_distances_from_one_heap(g, a)    single source, runs the heap dry
#   all_distances(g)                     N x N matrix, one heap run per row
#
# Unreachable vertices keep the INF sentinel; callers test for it explicitly.

from typing import List

from dijkstra_baseline import all_distances_from_one
from graph_store import GraphStore
from indexed_heap import INF, IndexedMinHeap


def _relax(graph, pq, u, du):
    """Decrease-key every live neighbor of u that du + w improves."""
    if du == INF:
        # u and everything still in pq are unreachable
        return
    for v, w in graph.adj[u]:
        if not pq.is_present(v):
            continue
        nd = du + w
        if nd < pq.distance_of(v):
            pq.decrease_key(v, nd)


def shortest_dist(graph: GraphStore, a: int, b: int) -> float:
    """
    Distance from a to b, or INF when b cannot be reached from a.
    """
    graph.check_vertex(a)
    graph.check_vertex(b)
    n = graph.N
    dist = [INF] * n

    pq = IndexedMinHeap(n)
    pq.initialize(a)

    # at most N extractions
    for _ in range(n):
        u, d = pq.extract_min()
        if u == b:
            return d
        if d < dist[u]:
            dist[u] = d
        _relax(graph, pq, u, dist[u])

    return dist[b]


def all_distances_from_one_heap(graph: GraphStore, a: int) -> List[float]:
    """
    Distances from a to every vertex, computed with the indexed heap.

    Each vertex leaves the heap exactly once, so its distance is final the
    moment it is extracted.
    """
    graph.check_vertex(a)
    n = graph.N
    dist = [INF] * n

    pq = IndexedMinHeap(n)
    pq.initialize(a)

    for _ in range(n):
        u, d = pq.extract_min()
        if d < dist[u]:
            dist[u] = d
        _relax(graph, pq, u, dist[u])

    return dist


def all_distances(graph: GraphStore) -> List[List[float]]:
    """
    All-pairs matrix m with m[a][b] the distance from a to b.

    On a symmetric graph (every edge inserted as undirected) the lower
    triangle is copied from rows already computed, so m is exactly symmetric.
    Directed graphs keep each row as computed.
    """
    mirror = graph.symmetric
    ans = []
    for i in range(graph.N):
        row = all_distances_from_one_heap(graph, i)
        if mirror:
            for j in range(i):
                row[j] = ans[j][i]
        ans.append(row)
    return ans


class Dijkstra:
    """Owns a GraphStore and answers distance queries against it."""

    def __init__(self, n: int):
        self.graph = GraphStore(n)

    def add_edge(self, a, b, d, undirected=False):
        self.graph.add_edge(a, b, d, undirected)

    def shortest_dist(self, a, b):
        return shortest_dist(self.graph, a, b)

    def all_distances_from_one(self, a):
        return all_distances_from_one(self.graph, a)

    def all_distances_from_one_heap(self, a):
        return all_distances_from_one_heap(self.graph, a)

    def all_distances(self):
        return all_distances(self.graph)
