from __future__ import annotations

import numpy as np


def floyd_warshall(adjacency: np.ndarray) -> np.ndarray:
    """All-pairs shortest distances over a symmetric weight matrix.

    Returns a float matrix where ``inf`` marks an unreachable pair.
    Weights of 0 mean "no edge"; the diagonal is always 0.
    """
    n = adjacency.shape[0]
    dist = np.where(adjacency > 0, adjacency, np.inf).astype(float)
    np.fill_diagonal(dist, 0.0)

    # Passes over k must stay sequential: pass k reads the matrix left by k-1.
    # Row k and column k do not change during pass k, so the (i, j) sweep can
    # be done in one vectorized step.
    for k in range(n):
        via_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        np.minimum(dist, via_k, out=dist)
    return dist
