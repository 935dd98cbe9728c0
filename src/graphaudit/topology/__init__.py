from .distance import floyd_warshall
from .graph import Bridge, Graph
from .separators import (
    articulation_points,
    articulation_points_parallel,
    bridges,
    bridges_parallel,
)

__all__ = [
    "Bridge",
    "Graph",
    "floyd_warshall",
    "articulation_points",
    "articulation_points_parallel",
    "bridges",
    "bridges_parallel",
]
