import pytest

from graphaudit.errors import InvalidGraphError
from graphaudit.io import MatrixReader
from graphaudit.topology import Graph


def test_any_delimiter_and_blank_lines(tmp_path):
    p = tmp_path / "graph.csv"
    p.write_text("0;1;0\n\n1,0,1\r\n0\t1\t0\n   \n", encoding="utf-8")
    assert MatrixReader(str(p)).read() == [[0, 1, 0], [1, 0, 1], [0, 1, 0]]


def test_other_characters_are_ignored(tmp_path):
    p = tmp_path / "graph.txt"
    p.write_text("# header without numbers\nrow a: 0 | 12\nrow b: 12 | 0\n", encoding="utf-8")
    # "row a" has no digits of its own, only the weights are picked up
    assert MatrixReader(str(p)).read() == [[0, 12], [12, 0]]


def test_utf8_bom(tmp_path):
    p = tmp_path / "bom.csv"
    p.write_bytes("\ufeff0,1\n1,0\n".encode("utf-8"))
    assert MatrixReader(str(p)).read() == [[0, 1], [1, 0]]


def test_wrong_row_length(tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text("0,1,0\n1,0\n0,1,0\n", encoding="utf-8")
    with pytest.raises(InvalidGraphError, match="Row 2 .*Expected: 3"):
        MatrixReader(str(p)).read()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MatrixReader(str(tmp_path / "nope.csv")).read()


def test_graph_from_file(tmp_path):
    p = tmp_path / "path.tsv"
    p.write_text("0\t1\t0\n1\t0\t1\n0\t1\t0\n", encoding="utf-8")
    g = Graph.from_file(str(p))
    assert g.diameter == 2


def test_asymmetric_file_rejected(tmp_path):
    p = tmp_path / "directed.csv"
    p.write_text("0,1\n0,0\n", encoding="utf-8")
    with pytest.raises(InvalidGraphError):
        Graph.from_file(str(p))


def test_empty_file_gives_empty_graph(tmp_path):
    p = tmp_path / "empty.csv"
    p.write_text("\n\n", encoding="utf-8")
    assert Graph.from_file(str(p)).node_count == 0


def test_oversized_weight_in_file_rejected(tmp_path):
    p = tmp_path / "huge.csv"
    p.write_text("0,123456789012345678901234\n123456789012345678901234,0\n", encoding="utf-8")
    with pytest.raises(InvalidGraphError):
        Graph.from_file(str(p))
