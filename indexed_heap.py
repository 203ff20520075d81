# indexed_heap.py
# Array-backed binary min-heap over (vertex, distance) entries with a location
# table, so decrease_key() works in place.
#
# Layout (1-based, slot[0] unused):
#   slot[1..len]  heap entries, min-heap under (distance, vertex)
#   loc[v]        slot currently holding v, or ABSENT after extraction
#
# Invariant: for every live v, slot[loc[v]].vertex == v.

import math

INF = math.inf
ABSENT = 0


class HeapEntry:
    """A vertex and its current distance estimate. Ordered by (distance, vertex)."""
    __slots__ = ("vertex", "distance")

    def __init__(self, vertex, distance):
        self.vertex = vertex
        self.distance = distance

    def __lt__(self, other):
        # plain float compare, no truncation; ties go to the smaller id
        if self.distance != other.distance:
            return self.distance < other.distance
        return self.vertex < other.vertex

    def __repr__(self):
        return f"HeapEntry(vertex={self.vertex}, distance={self.distance})"


class IndexedMinHeap:
    def __init__(self, n: int):
        self.n = n
        self.slot = [None] * (n + 1)
        self.loc = [ABSENT] * n
        self.len = 0

    # ---------------- internal helpers ----------------

    def _less(self, i, j):
        return self.slot[i] < self.slot[j]

    def _swap(self, i, j):
        s = self.slot
        s[i], s[j] = s[j], s[i]
        self.loc[s[i].vertex] = i
        self.loc[s[j].vertex] = j

    def _sift_up(self, i):
        while i > 1:
            parent = i // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i):
        n = self.len
        while 2 * i <= n:
            child = 2 * i
            if child + 1 <= n and self._less(child + 1, child):
                child += 1
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child

    # ---------------- public API ----------------

    def initialize(self, source):
        """
        Put every vertex in the heap once: source at the root with distance 0,
        the rest in id order with INF. That layout already satisfies the heap
        property, so no sifting is needed.
        """
        if not (0 <= source < self.n):
            raise IndexError(f"source out of bounds: {source} (n={self.n})")
        self.slot[1] = HeapEntry(source, 0.0)
        self.loc[source] = 1
        for v in range(self.n):
            if v == source:
                continue
            ind = v + 2 if v < source else v + 1
            self.slot[ind] = HeapEntry(v, INF)
            self.loc[v] = ind
        self.len = self.n

    def extract_min(self):
        """Remove and return (vertex, distance) of the smallest entry."""
        if self.len == 0:
            raise IndexError("extract_min from an empty heap")
        top = self.slot[1]
        last = self.slot[self.len]
        self.slot[self.len] = None
        self.len -= 1
        if self.len > 0:
            self.slot[1] = last
            self.loc[last.vertex] = 1
            self._sift_down(1)
        else:
            self.slot[1] = None
        self.loc[top.vertex] = ABSENT
        return top.vertex, top.distance

    def decrease_key(self, vertex, distance):
        if not self.is_present(vertex):
            raise KeyError(f"vertex {vertex} is not in the heap")
        i = self.loc[vertex]
        entry = self.slot[i]
        if not distance < entry.distance:
            raise ValueError(
                f"decrease_key needs a smaller distance for vertex {vertex}: "
                f"{distance} >= {entry.distance}")
        entry.distance = distance
        self._sift_up(i)

    def is_present(self, vertex):
        if not (0 <= vertex < self.n):
            return False
        return 0 < self.loc[vertex] <= self.len

    def distance_of(self, vertex):
        if not self.is_present(vertex):
            raise KeyError(f"vertex {vertex} is not in the heap")
        return self.slot[self.loc[vertex]].distance

    def peek(self):
        if self.len == 0:
            raise IndexError("peek at an empty heap")
        top = self.slot[1]
        return top.vertex, top.distance

    def __contains__(self, vertex):
        return self.is_present(vertex)

    def __len__(self):
        return self.len

    def __bool__(self):
        return self.len > 0
