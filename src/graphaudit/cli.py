import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from graphaudit.analyzer import GraphAnalyzer
from graphaudit.config import AnalysisSettings, load_settings
from graphaudit.errors import GraphError
from graphaudit.reports.csv_report import NodeTableReporter
from graphaudit.reports.json_report import JSONReporter
from graphaudit.reports.terminal_report import print_terminal_summary


app = typer.Typer(add_completion=False)
console = Console()

MATRIX_PATTERNS = ("*.csv", "*.txt", "*.tsv")


def _find_matrix_files(directory: Path) -> List[Path]:
    found = set()
    for pattern in MATRIX_PATTERNS:
        found.update(directory.glob(pattern))
    return sorted(found, key=lambda p: p.name)


def _choose_file(directory: Path) -> Path:
    """Interactive file selection from the working directory."""
    files = _find_matrix_files(directory)
    if not files:
        raise typer.BadParameter(f"No matrix files ({', '.join(MATRIX_PATTERNS)}) found in {directory}")

    console.print(f"[bold blue]FILES FOUND IN {directory.resolve()}:[/bold blue]")
    console.print(", ".join(f"[{idx}] {f.name}" for idx, f in enumerate(files)), markup=False)
    while True:
        choice = typer.prompt("Which file should be read (CTRL+C to abort)?", type=int)
        if 0 <= choice < len(files):
            return files[choice]
        console.print(f"[yellow]Enter a number between 0 and {len(files) - 1}.[/yellow]")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def main(
    matrix_file: Optional[str] = typer.Argument(None, help="Adjacency matrix file. Prompts for one in the current directory when omitted."),
    config: Optional[str] = typer.Option(None, "--config", help="Settings JSON file"),
    parallel: Optional[bool] = typer.Option(None, "--parallel/--sequential", help="Run articulation point / bridge detection on a thread pool"),
    workers: Optional[int] = typer.Option(None, "--workers", help="Thread pool size for --parallel"),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Output JSON report path"),
    out_csv: Optional[str] = typer.Option(None, "--out-csv", help="Output per-node CSV table path"),
    out_png: Optional[str] = typer.Option(None, "--out-png", help="Output distance-matrix heat map PNG path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Analyze an undirected weighted graph given as an adjacency matrix."""
    _configure_logging(verbose)

    try:
        settings = load_settings(config) if config else AnalysisSettings()
        settings = settings.override(parallel=parallel, max_workers=workers)
    except (GraphError, OSError) as e:
        console.print(f"[bold red]Invalid settings:[/bold red] {e}")
        raise typer.Exit(code=1)

    path = Path(matrix_file) if matrix_file else _choose_file(Path.cwd())

    analyzer = GraphAnalyzer(settings)
    try:
        graph = analyzer.load(str(path))
    except (GraphError, FileNotFoundError) as e:
        console.print(f"[bold red]Cannot read graph:[/bold red] {e}")
        raise typer.Exit(code=1)

    console.print(f"\nGraph loaded in {analyzer.last_load_ms:.0f} ms.\n")
    report = analyzer.analyze(graph)

    print_terminal_summary(report, distance_matrix=graph.distance_matrix, settings=settings, console=console)

    if out_json:
        JSONReporter().generate(report, out_json)
        console.print(f"[green]OK[/green] JSON report saved to: {out_json}")

    if out_csv:
        NodeTableReporter().generate(report, out_csv)
        console.print(f"[green]OK[/green] Node table saved to: {out_csv}")

    if out_png:
        if graph.node_count == 0:
            console.print("[yellow]Skipping heat map: the graph has no nodes.[/yellow]")
        else:
            from graphaudit.reports.viz import plot_distance_matrix

            plot_distance_matrix(graph, out_png)
            console.print(f"[green]OK[/green] Heat map saved to: {out_png}")


if __name__ == "__main__":
    app()
