# graph_store.py
# Adjacency store shared by every shortest-distance query.
#
#   adj[u] = [(v, w), ...]   # insertion order kept, duplicates allowed
#
# The store is filled once through add_edge() and only read afterwards.

import math
from typing import Iterable, List, Tuple


class GraphStore:
    """Weighted graph on vertices 0..N-1 held as per-vertex (neighbor, weight) lists."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.N = n
        self.M = 0                              # directed adjacency entries
        self.adj: List[List[Tuple[int, float]]] = [[] for _ in range(n)]
        # stays True while every edge between distinct vertices was mirrored
        self.symmetric = True

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[int, int, float]], undirected=False):
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(u, v, w, undirected)
        return g

    def check_vertex(self, v):
        if not (0 <= v < self.N):
            raise IndexError(f"vertex index out of bounds: {v} (N={self.N})")

    def add_edge(self, a, b, weight, undirected=False):
        """
        Append (b, weight) to a's list; with undirected=True also (a, weight) to b's.
        """
        self.check_vertex(a)
        self.check_vertex(b)
        w = float(weight)
        if math.isnan(w) or math.isinf(w) or w < 0:
            raise ValueError(f"edge weight must be finite and non-negative, got {weight!r}")

        self.adj[a].append((b, w))
        self.M += 1
        if undirected:
            self.adj[b].append((a, w))
            self.M += 1
        elif a != b:
            self.symmetric = False

    def neighbors(self, v):
        return self.adj[v]

    def degree(self, v):
        return len(self.adj[v])

    def __len__(self):
        return self.N

    def __repr__(self):
        return f"GraphStore(N={self.N}, M={self.M}, symmetric={self.symmetric})"
