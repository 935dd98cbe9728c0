from __future__ import annotations

import json
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from graphaudit.config import AnalysisSettings
from graphaudit.models import GraphReport


def _fmt(value: Optional[int]) -> str:
    return "inf" if value is None else str(value)


def print_distance_matrix(matrix: Sequence[Sequence[Optional[int]]], console: Optional[Console] = None) -> None:
    """Distance matrix as a table; unreachable cells are left blank."""
    console = console or Console()
    console.print("Distance matrix (blank = infinite):")
    table = Table(show_lines=False)
    table.add_column("", style="bold", justify="right")
    for col in range(len(matrix)):
        table.add_column(str(col), justify="right")
    for row, values in enumerate(matrix):
        table.add_row(str(row), *("" if v is None else str(v) for v in values))
    console.print(table)


def _listing(values: List[str], limit: int) -> str:
    shown = ", ".join(values[:limit])
    if len(values) > limit:
        shown += f", ... ({len(values) - limit} more)"
    return shown


def print_terminal_summary(
    report: GraphReport,
    distance_matrix: Optional[Sequence[Sequence[Optional[int]]]] = None,
    settings: Optional[AnalysisSettings] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Prints the graph metrics to the terminal.
    The distance matrix is only shown for graphs smaller than
    settings.matrix_preview_limit.
    """
    console = console or Console()
    settings = settings or AnalysisSettings()

    console.print("[bold blue]GRAPH ANALYSIS:[/bold blue]")
    if distance_matrix is not None and report.node_count < settings.matrix_preview_limit:
        print_distance_matrix(distance_matrix, console=console)

    table = Table(title="Graph Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(report.node_count))
    table.add_row("Edges", str(report.edge_count))
    table.add_row("Components", str(len(report.components)))
    table.add_row("Diameter", _fmt(report.diameter))
    table.add_row("Radius", _fmt(report.radius))
    console.print(table)

    limit = settings.listing_limit
    console.print("Node degrees:")
    console.print(_listing([f"[{n}]: {d}" for n, d in enumerate(report.degrees)], limit), markup=False)

    console.print(f"The graph has {len(report.components)} component(s):")
    for comp in report.components:
        console.print(json.dumps(comp), markup=False)

    console.print("Node eccentricities:")
    console.print(_listing([f"[{n}]: {_fmt(e)}" for n, e in enumerate(report.eccentricities)], limit), markup=False)

    console.print(f"Center: {json.dumps(report.center)}", markup=False)

    mode = "parallel" if report.parallel else "sequential"
    ap_ms = report.timings_ms.get("articulation_points", 0.0)
    br_ms = report.timings_ms.get("bridges", 0.0)
    console.print(f"Articulation points ({mode}, {ap_ms:.0f} ms): {json.dumps(report.articulation_points)}", markup=False)
    console.print(f"Bridges ({mode}, {br_ms:.0f} ms): {json.dumps([list(b) for b in report.bridges])}", markup=False)
