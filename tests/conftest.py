import numpy as np
import pytest


def random_adjacency(n, p, seed, max_weight=4):
    """Symmetric random weight matrix with no self loops."""
    rng = np.random.default_rng(seed)
    mask = rng.random((n, n)) < p
    weights = rng.integers(1, max_weight + 1, size=(n, n))
    upper = np.triu(mask * weights, 1)
    return (upper + upper.T).tolist()


def path_adjacency(n):
    adj = [[0] * n for _ in range(n)]
    for i in range(n - 1):
        adj[i][i + 1] = adj[i + 1][i] = 1
    return adj


def cycle_adjacency(n):
    adj = path_adjacency(n)
    adj[0][n - 1] = adj[n - 1][0] = 1
    return adj


@pytest.fixture
def path3():
    return [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
