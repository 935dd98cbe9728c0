from graphaudit.analyzer import GraphAnalyzer
from graphaudit.config import AnalysisSettings
from graphaudit.topology import Graph

from conftest import random_adjacency


def test_path_report(path3):
    report = GraphAnalyzer().analyze(Graph(path3))
    assert report.node_count == 3
    assert report.edge_count == 2
    assert report.degrees == [1, 2, 1]
    assert report.components == [[0, 1, 2]]
    assert report.eccentricities == [2, 1, 2]
    assert report.diameter == 2
    assert report.radius == 1
    assert report.center == [1]
    assert report.articulation_points == [1]
    assert report.bridges == [(0, 1), (1, 2)]
    assert report.is_connected
    assert set(report.timings_ms) == {"articulation_points", "bridges"}


def test_parallel_report_matches_sequential():
    g = Graph(random_adjacency(18, 0.12, seed=11))
    seq = GraphAnalyzer(AnalysisSettings(parallel=False)).analyze(g)
    par = GraphAnalyzer(AnalysisSettings(parallel=True, max_workers=4)).analyze(g)
    assert par.parallel
    assert seq.to_dict()["bridges"] == par.to_dict()["bridges"]
    assert seq.articulation_points == par.articulation_points
    assert seq.components == par.components


def test_load_records_timing(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("0,1\n1,0\n", encoding="utf-8")
    analyzer = GraphAnalyzer()
    graph = analyzer.load(str(p))
    report = analyzer.analyze(graph)
    assert "load" in report.timings_ms
    assert report.bridges == [(0, 1)]


def test_disconnected_report():
    g = Graph([[0, 1, 0], [1, 0, 0], [0, 0, 0]])
    report = GraphAnalyzer().analyze(g)
    assert not report.is_connected
    assert report.eccentricities == [None, None, None]
    assert report.component_of() == [0, 0, 1]
    d = report.to_dict()
    assert d["diameter"] is None
    assert d["center"] == []
