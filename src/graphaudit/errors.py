"""
Exceptions raised by graph construction, queries and configuration loading.
"""


class GraphError(Exception):
    """Base exception class for graphaudit errors."""
    pass


class InvalidGraphError(GraphError):
    """Raised when adjacency data cannot form an undirected graph."""
    pass


class InvalidNodeError(GraphError, IndexError):
    """Raised when a node index is outside [0, node_count)."""

    def __init__(self, node: int, node_count: int):
        super().__init__(f"Invalid node {node} (graph has {node_count} node(s))")
        self.node = node
        self.node_count = node_count


class ConfigurationError(GraphError):
    """Raised when a settings file is invalid."""
    pass
