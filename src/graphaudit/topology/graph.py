from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from graphaudit.errors import InvalidGraphError, InvalidNodeError
from graphaudit.topology.distance import floyd_warshall

logger = logging.getLogger(__name__)

Bridge = Tuple[int, int]
MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]


# Path lengths are summed in float64; with weights capped here every
# distance stays an exactly representable integer.
MAX_WEIGHT = 2**31 - 1


def _as_adjacency(data: MatrixLike) -> np.ndarray:
    try:
        arr = np.array(data)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidGraphError(f"Adjacency data is not a matrix of integers: {e}") from e

    if arr.size == 0:
        if arr.ndim == 1 or arr.shape == (0, 0):
            return np.zeros((0, 0), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidGraphError(f"Adjacency matrix must be square, got shape {arr.shape}")

    # Python ints beyond int64 come back as dtype=object.
    if arr.dtype.kind not in "iu":
        raise InvalidGraphError(
            f"Adjacency weights must be integers between 0 and {MAX_WEIGHT}, got dtype {arr.dtype}"
        )

    negative = np.argwhere(arr < 0)
    if len(negative):
        row, col = (int(x) for x in negative[0])
        raise InvalidGraphError(f"Edge {row} to {col} has negative weight {arr[row, col]}")

    too_heavy = np.argwhere(arr > MAX_WEIGHT)
    if len(too_heavy):
        row, col = (int(x) for x in too_heavy[0])
        raise InvalidGraphError(f"Edge {row} to {col} weighs {arr[row, col]}, above the maximum {MAX_WEIGHT}")

    arr = arr.astype(np.int64)

    # Compare the lower triangle against its transposed cell.
    asymmetric = np.argwhere(np.tril(arr != arr.T))
    if len(asymmetric):
        row, col = (int(x) for x in asymmetric[0])
        raise InvalidGraphError(f"Edge {row} to {col} is not undirected")
    return arr


class Graph:
    """Immutable undirected weighted graph backed by an adjacency matrix.

    Nodes: integer indices 0..node_count-1
    Edges: positive entries of the symmetric adjacency matrix (value = weight)

    All-pairs shortest distances are computed once, on construction, and every
    metric is derived from them. Operations that "remove" something return a
    new Graph; the receiver is never changed, so one instance can be shared
    between threads without locking.
    """

    def __init__(self, adjacency: MatrixLike) -> None:
        arr = _as_adjacency(adjacency)
        arr.setflags(write=False)
        self._adjacency = arr
        self._dist = floyd_warshall(arr)
        self._dist.setflags(write=False)

    @classmethod
    def from_file(cls, path: str) -> "Graph":
        from graphaudit.io.matrix_reader import MatrixReader

        return cls(MatrixReader(path).read())

    def __repr__(self) -> str:
        return f"Graph(node_count={self.node_count}, edge_count={self.edge_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return np.array_equal(self._adjacency, other._adjacency)

    def __hash__(self) -> int:
        return hash((self._adjacency.shape, self._adjacency.tobytes()))

    # ------------------------------------------------------------------
    # Basic attributes
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return int(self._adjacency.shape[0])

    @property
    def nodes(self) -> range:
        return range(self.node_count)

    @property
    def edge_count(self) -> int:
        # Undirected: only the lower triangle (diagonal included) is counted.
        return int(np.count_nonzero(np.tril(self._adjacency)))

    @property
    def adjacency(self) -> List[List[int]]:
        return self._adjacency.tolist()

    @property
    def distance_matrix(self) -> List[List[Optional[int]]]:
        """Shortest distances; None marks an unreachable pair."""
        return [[int(d) if np.isfinite(d) else None for d in row] for row in self._dist]

    def edges(self) -> List[Bridge]:
        """Edges as (smaller, larger) index pairs in lower-triangle scan order."""
        return [
            (node2, node1)
            for node1 in self.nodes
            for node2 in range(node1 + 1)
            if self._adjacency[node1, node2] > 0
        ]

    def _ensure_valid_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise InvalidNodeError(node, self.node_count)

    def weight(self, a: int, b: int) -> int:
        self._ensure_valid_node(a)
        self._ensure_valid_node(b)
        return int(self._adjacency[a, b])

    def distance(self, a: int, b: int) -> Optional[int]:
        self._ensure_valid_node(a)
        self._ensure_valid_node(b)
        d = self._dist[a, b]
        return int(d) if np.isfinite(d) else None

    # ------------------------------------------------------------------
    # Topology queries
    # ------------------------------------------------------------------

    def degree(self, node: int) -> int:
        self._ensure_valid_node(node)
        return int(np.count_nonzero(self._adjacency[node]))

    def reachable_nodes(self, start: int) -> List[int]:
        """All nodes at finite distance from ``start`` (``start`` included).

        Reachability goes through the distance matrix, so paths of any length
        count, not just direct neighbours.
        """
        self._ensure_valid_node(start)
        return np.flatnonzero(np.isfinite(self._dist[start])).tolist()

    def connected_components(self) -> Iterator[List[int]]:
        """Yield each connected component as an ascending list of nodes.

        Starts from the smallest unvisited node, emits everything it reaches,
        then moves on to the next unvisited node until none are left.
        """
        unvisited = list(self.nodes)
        while unvisited:
            component = self.reachable_nodes(unvisited[0])
            members = set(component)
            unvisited = [n for n in unvisited if n not in members]
            yield component

    def component_count(self) -> int:
        return sum(1 for _ in self.connected_components())

    @property
    def is_connected(self) -> bool:
        # Reachability is symmetric and transitive, so node 0 stands in for all.
        if self.node_count == 0:
            return True
        return bool(np.all(np.isfinite(self._dist[0])))

    def eccentricity(self, node: int) -> Optional[int]:
        """Distance to the farthest node; None for every node of a disconnected graph."""
        self._ensure_valid_node(node)
        if not self.is_connected:
            return None
        return int(self._dist[node].max())

    def _eccentricities(self) -> List[int]:
        if self.node_count == 0 or not self.is_connected:
            return []
        return [int(x) for x in self._dist.max(axis=1)]

    @property
    def diameter(self) -> Optional[int]:
        ecc = self._eccentricities()
        return max(ecc) if ecc else None

    @property
    def radius(self) -> Optional[int]:
        ecc = self._eccentricities()
        return min(ecc) if ecc else None

    @property
    def center(self) -> List[int]:
        ecc = self._eccentricities()
        if not ecc:
            return []
        radius = min(ecc)
        return [node for node, e in enumerate(ecc) if e == radius]

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def remove_node(self, node: int) -> "Graph":
        """New graph without ``node``; remaining nodes keep their relative order."""
        self._ensure_valid_node(node)
        reduced = np.delete(np.delete(self._adjacency, node, axis=0), node, axis=1)
        return Graph(reduced)

    def remove_edge(self, a: int, b: int) -> "Graph":
        """New graph with the edge a-b removed (a no-op edge is fine)."""
        self._ensure_valid_node(a)
        self._ensure_valid_node(b)
        adjacency = self._adjacency.copy()
        adjacency[a, b] = 0
        adjacency[b, a] = 0
        return Graph(adjacency)
