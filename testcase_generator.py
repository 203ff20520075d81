import random


def random_connected_edges(N, extra_edges=None, max_weight=20, seed=None, integer_weights=True):
    """
    Random connected graph on vertices 0..N-1 as a list of (u, v, w).

    Step 1 builds a random spanning tree, step 2 adds `extra_edges` more edges
    (default N-1) with no self-loops and no parallel edges.
    """
    rng = random.Random(seed)
    if extra_edges is None:
        extra_edges = max(0, N - 1)

    def weight():
        if integer_weights:
            return rng.randint(1, max_weight)
        return rng.uniform(0.0, max_weight)

    adj = []
    existing_edges = set()   # canonical (small, large) pairs

    # --- Step 1: spanning tree ---
    for i in range(1, N):
        j = rng.randrange(0, i)
        adj.append((j, i, weight()))
        existing_edges.add((j, i))

    # --- Step 2: extra edges, capped by what a simple graph can hold ---
    extra_edges = min(extra_edges, N * (N - 1) // 2 - len(existing_edges))
    count = 0
    while count < extra_edges:
        u = rng.randrange(0, N)
        v = rng.randrange(0, N)
        if u == v:
            continue
        edge = tuple(sorted((u, v)))
        if edge in existing_edges:
            continue
        adj.append((edge[1], edge[0], weight()))
        existing_edges.add(edge)
        count += 1

    return adj
