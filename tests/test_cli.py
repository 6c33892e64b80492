from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from arcset.cli import app
from arcset.config import get_settings
from arcset.fas.base import FeedbackArcSetHeuristic
from arcset.graph import DiGraph

runner = CliRunner()


def test_heuristics_list_and_describe() -> None:
    res = runner.invoke(app, ["heuristics", "list"])
    assert res.exit_code == 0
    assert res.output.split() == ["divide_and_conquer", "greedy"]

    res = runner.invoke(app, ["heuristics", "describe", "--name", "greedy"])
    assert res.exit_code == 0
    assert json.loads(res.output)["name"] == "greedy"

    res = runner.invoke(app, ["heuristics", "describe", "--name", "nope"])
    assert res.exit_code == 1


def test_info(fixtures_dir: Path) -> None:
    res = runner.invoke(app, ["info", str(fixtures_dir / "dag.metis")])
    assert res.exit_code == 0
    assert "vertices: 5" in res.output
    assert "cyclic: False" in res.output


def test_solve(fixtures_dir: Path, tmp_path: Path) -> None:
    res = runner.invoke(
        app,
        [
            "--log-level", "info",
            "solve", str(fixtures_dir / "multi_cycles.metis"),
            "--heuristic", "divide_and_conquer",
            "--runs-dir", str(tmp_path / "out"),
            "--run-id", "cli",
            "--dot",
        ],
    )  # fmt: skip
    assert res.exit_code == 0, res.output
    assert "Run success." in res.output
    assert (tmp_path / "out" / "cli" / "report.md").exists()
    assert (tmp_path / "out" / "cli" / "graph.dot").exists()


def test_solve_error_exit_codes(fixtures_dir: Path, tmp_path: Path) -> None:
    res = runner.invoke(app, ["solve", str(tmp_path / "missing.metis")])
    assert res.exit_code == 2

    res = runner.invoke(app, ["solve", str(fixtures_dir / "triangle.metis"), "--heuristic", "exact"])
    assert res.exit_code == 1
    assert "Unknown heuristic" in res.output

    bad = tmp_path / "bad.metis"
    bad.write_text("2 1\n7\n", encoding="utf-8")
    res = runner.invoke(app, ["solve", str(bad)])
    assert res.exit_code == 1
    assert "outside 1..2" in res.output


def test_generate_then_bench(tmp_path: Path) -> None:
    inst = tmp_path / "rand.metis"
    res = runner.invoke(
        app, ["generate", "--vertices", "25", "--probability", "0.2", "--seed", "3", "--out", str(inst)]
    )
    assert res.exit_code == 0, res.output
    assert inst.exists()

    out_csv = tmp_path / "bench.csv"
    res = runner.invoke(app, ["bench", str(inst), "--heuristic", "greedy", "--out", str(out_csv)])
    assert res.exit_code == 0, res.output
    lines = out_csv.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "instance,vertices,edges,heuristic,fas_size,seconds,valid"
    assert len(lines) == 2
    assert "greedy" in res.output


class _RemovesNothing(FeedbackArcSetHeuristic):
    name = "removes_nothing"

    def compute(self, graph: DiGraph) -> set:
        return set()


def _edge_count_mismatch(tmp_path: Path) -> Path:
    inst = tmp_path / "mismatch.metis"
    inst.write_text("2 5\n2\n1\n", encoding="utf-8")
    return inst


def test_unknown_log_level_is_a_usage_error() -> None:
    res = runner.invoke(app, ["--log-level", "basic_format", "heuristics", "list"])
    assert res.exit_code == 2
    assert "divide_and_conquer" not in res.output


def test_solve_exits_nonzero_when_verification_fails(
    fixtures_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("arcset.pipeline.run.get_heuristic", lambda name: _RemovesNothing())

    res = runner.invoke(app, ["solve", str(fixtures_dir / "triangle.metis"), "--run-id", "broken"])

    assert res.exit_code == 1
    assert "Run failed." in res.output
    assert (tmp_path / "runs" / "broken" / "report.md").exists()


def test_bench_exits_nonzero_on_invalid_row(fixtures_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("arcset.pipeline.bench.get_heuristic", lambda name: _RemovesNothing())

    res = runner.invoke(app, ["bench", str(fixtures_dir / "triangle.metis"), "--heuristic", "greedy"])

    assert res.exit_code == 1
    assert "invalid feedback arc set" in res.output


def test_strict_flag_rejects_edge_count_mismatch(tmp_path: Path) -> None:
    inst = _edge_count_mismatch(tmp_path)

    res = runner.invoke(app, ["info", str(inst)])
    assert res.exit_code == 0, res.output
    assert "edges: 2" in res.output

    for args in (["info", str(inst)], ["solve", str(inst)], ["bench", str(inst)]):
        res = runner.invoke(app, [*args, "--strict"])
        assert res.exit_code == 1, args
        assert "declares 5 edges" in res.output


def test_strict_metis_setting_applies_to_info(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    inst = _edge_count_mismatch(tmp_path)
    monkeypatch.setenv("ARCSET_STRICT_METIS", "true")
    get_settings.cache_clear()

    res = runner.invoke(app, ["info", str(inst)])

    assert res.exit_code == 1
    assert "declares 5 edges" in res.output


def test_unreadable_instances_exit_with_error(tmp_path: Path) -> None:
    binary = tmp_path / "binary.metis"
    binary.write_bytes(b"\xff\xfe\x00")

    for args in (["info", str(binary)], ["solve", str(binary)], ["bench", str(binary)], ["info", str(tmp_path)]):
        res = runner.invoke(app, args)
        assert res.exit_code == 1, args
        assert "ERROR:" in res.output
