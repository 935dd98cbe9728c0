import json
import os
import subprocess
import sys
from pathlib import Path

from typer.testing import CliRunner

from graphaudit.cli import app

SRC = Path(__file__).resolve().parents[1] / "src"


def _write_matrix(path: Path) -> Path:
    path.write_text("0;1;0;0\n1;0;1;0\n0;1;0;1\n0;0;1;0\n", encoding="utf-8")
    return path


def test_cli_smoke(tmp_path: Path):
    sample = _write_matrix(tmp_path / "path4.csv")
    out_json = tmp_path / "report.json"
    out_csv = tmp_path / "nodes.csv"

    env = dict(**os.environ)
    env["PYTHONPATH"] = str(SRC)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [
        sys.executable,
        "-m",
        "graphaudit",
        str(sample),
        "--parallel",
        "--workers",
        "2",
        "--out-json",
        str(out_json),
        "--out-csv",
        str(out_csv),
    ]

    r = subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )

    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    assert out_json.exists()
    assert out_csv.exists()

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["articulation_points"] == [1, 2]
    assert data["bridges"] == [[0, 1], [1, 2], [2, 3]]
    assert data["parallel"] is True


def test_cli_missing_file(tmp_path: Path):
    result = CliRunner().invoke(app, [str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
    assert "Cannot read graph" in result.output


def test_cli_invalid_graph(tmp_path: Path):
    bad = tmp_path / "bad.csv"
    bad.write_text("0,1\n0,0\n", encoding="utf-8")
    result = CliRunner().invoke(app, [str(bad)])
    assert result.exit_code == 1
    assert "not undirected" in result.output


def test_cli_prompts_for_file(tmp_path: Path, monkeypatch):
    _write_matrix(tmp_path / "b.csv")
    (tmp_path / "a.txt").write_text("0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(app, [], input="7\n1\n")
    assert result.exit_code == 0, result.output
    assert "[0] a.txt, [1] b.csv" in result.output
    assert "Bridges (sequential" in result.output


def test_cli_config_file(tmp_path: Path):
    sample = _write_matrix(tmp_path / "g.csv")
    cfg = tmp_path / "settings.json"
    cfg.write_text(json.dumps({"parallel": True, "max_workers": 2}), encoding="utf-8")
    out_png = tmp_path / "dist.png"
    result = CliRunner().invoke(app, [str(sample), "--config", str(cfg), "--out-png", str(out_png)])
    assert result.exit_code == 0, result.output
    assert "Bridges (parallel" in result.output
    assert out_png.exists()


def test_cli_oversized_weight(tmp_path: Path):
    bad = tmp_path / "huge.csv"
    bad.write_text("0 99999999999999999999999\n99999999999999999999999 0\n", encoding="utf-8")
    result = CliRunner().invoke(app, [str(bad)])
    assert result.exit_code == 1
    assert "Cannot read graph" in result.output
