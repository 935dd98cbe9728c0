from .errors import ConfigurationError, GraphError, InvalidGraphError, InvalidNodeError
from .topology import (
    Graph,
    articulation_points,
    articulation_points_parallel,
    bridges,
    bridges_parallel,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "GraphError",
    "InvalidGraphError",
    "InvalidNodeError",
    "ConfigurationError",
    "articulation_points",
    "articulation_points_parallel",
    "bridges",
    "bridges_parallel",
]
