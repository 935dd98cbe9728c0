import pandas as pd

from graphaudit.models import GraphReport


class NodeTableReporter:
    """Per-node metrics table (one CSV row per node)."""

    def build(self, report: GraphReport) -> pd.DataFrame:
        aps = set(report.articulation_points)
        center = set(report.center)
        component = report.component_of()
        rows = []
        for node in range(report.node_count):
            ecc = report.eccentricities[node]
            rows.append({
                "node": node,
                "degree": report.degrees[node],
                "eccentricity": "" if ecc is None else ecc,
                "component": component[node],
                "is_articulation_point": node in aps,
                "in_center": node in center,
            })
        return pd.DataFrame(
            rows,
            columns=["node", "degree", "eccentricity", "component", "is_articulation_point", "in_center"],
        )

    def generate(self, report: GraphReport, output_path: str) -> pd.DataFrame:
        df = self.build(report)
        df.to_csv(output_path, index=False)
        return df
