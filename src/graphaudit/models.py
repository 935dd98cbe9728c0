from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class GraphReport:
    """All metrics of one analyzed graph."""

    node_count: int
    edge_count: int
    degrees: List[int]
    components: List[List[int]]
    eccentricities: List[Optional[int]]  # None = infinite (disconnected graph)
    diameter: Optional[int]
    radius: Optional[int]
    center: List[int]
    articulation_points: List[int]
    bridges: List[Tuple[int, int]]
    parallel: bool = False
    timings_ms: Dict[str, float] = field(default_factory=dict)

    @property
    def is_connected(self) -> bool:
        return len(self.components) <= 1

    def component_of(self) -> List[int]:
        """Component index for every node."""
        index = [0] * self.node_count
        for i, comp in enumerate(self.components):
            for node in comp:
                index[node] = i
        return index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "degrees": list(self.degrees),
            "components": [list(c) for c in self.components],
            "eccentricities": list(self.eccentricities),
            "diameter": self.diameter,
            "radius": self.radius,
            "center": list(self.center),
            "articulation_points": list(self.articulation_points),
            "bridges": [list(b) for b in self.bridges],
            "parallel": self.parallel,
            "timings_ms": {k: round(v, 3) for k, v in self.timings_ms.items()},
        }
