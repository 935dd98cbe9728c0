import logging
import time
from typing import Optional

from graphaudit.config import AnalysisSettings
from graphaudit.models import GraphReport
from graphaudit.topology import (
    Graph,
    articulation_points,
    articulation_points_parallel,
    bridges,
    bridges_parallel,
)

logger = logging.getLogger(__name__)


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0


class GraphAnalyzer:
    """Orchestrates the metric computations for one graph."""

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()
        self.last_load_ms: Optional[float] = None

    def load(self, filepath: str) -> Graph:
        """Read a matrix file and build the graph (distances included)."""
        t0 = time.perf_counter()
        graph = Graph.from_file(filepath)
        self.last_load_ms = _elapsed_ms(t0)
        logger.info("Loaded %r from %s in %.1f ms", graph, filepath, self.last_load_ms)
        return graph

    def analyze(self, graph: Graph) -> GraphReport:
        """Compute every metric of ``graph``."""
        timings = {}
        if self.last_load_ms is not None:
            timings["load"] = self.last_load_ms

        t0 = time.perf_counter()
        if self.settings.parallel:
            aps = articulation_points_parallel(graph, max_workers=self.settings.max_workers)
        else:
            aps = list(articulation_points(graph))
        timings["articulation_points"] = _elapsed_ms(t0)
        logger.info("Articulation points: %d found in %.1f ms", len(aps), timings["articulation_points"])

        t0 = time.perf_counter()
        if self.settings.parallel:
            found = bridges_parallel(graph, max_workers=self.settings.max_workers)
        else:
            found = list(bridges(graph))
        timings["bridges"] = _elapsed_ms(t0)
        logger.info("Bridges: %d found in %.1f ms", len(found), timings["bridges"])

        return GraphReport(
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            degrees=[graph.degree(n) for n in graph.nodes],
            components=list(graph.connected_components()),
            eccentricities=[graph.eccentricity(n) for n in graph.nodes],
            diameter=graph.diameter,
            radius=graph.radius,
            center=graph.center,
            articulation_points=sorted(aps),
            bridges=sorted(found),
            parallel=self.settings.parallel,
            timings_ms=timings,
        )
