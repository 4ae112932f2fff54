"""
Tests for the command line driver: gen / solve / bench.
"""

import csv

import pytest

from crucible import Grid
from crucible.cli import main, parse_coord


def costs_by_variant(out):
    costs = {}
    for line in out.splitlines():
        if "cost=" not in line:
            continue
        fields = [f.strip() for f in line.split("|")]
        name = fields[0].split("::")[-1].strip()
        cost = next(f for f in fields if f.startswith("cost=")).split("=", 1)[1].strip()
        costs[name] = cost
    return costs


# ========== solve ==========

def test_solve_runs_both_variants(grid_files, capsys):
    main(["solve", "--grid", str(grid_files / "sample_1.txt")])
    costs = costs_by_variant(capsys.readouterr().out)
    assert costs == {"crucible": "102", "ultra": "94"}


def test_solve_custom_bounds(grid_files, capsys):
    main(["solve", "--grid", str(grid_files / "sample_2.txt"), "--min-run", "4", "--max-run", "10"])
    assert costs_by_variant(capsys.readouterr().out) == {"custom": "71"}


def test_solve_reports_unreachable(tmp_path, capsys):
    p = tmp_path / "walled.txt"
    p.write_text("11#1\n11#1\n")
    main(["solve", "--grid", str(p), "--min-run", "1", "--max-run", "3"])
    assert costs_by_variant(capsys.readouterr().out) == {"custom": "unreachable"}


def test_solve_explicit_endpoints(tmp_path, capsys):
    p = tmp_path / "flat.txt"
    p.write_text("111\n111\n111\n")
    main(["solve", "--grid", str(p), "--min-run", "1", "--max-run", "5",
          "--start", "2,0", "--goal", "0,2"])
    assert costs_by_variant(capsys.readouterr().out) == {"custom": "4"}


def test_solve_writes_png(grid_files, tmp_path):
    out = tmp_path / "img" / "s1.png"
    main(["solve", "--grid", str(grid_files / "sample_1.txt"), "--png", str(out)])
    assert (tmp_path / "img" / "s1_crucible.png").exists()
    assert (tmp_path / "img" / "s1_ultra.png").exists()


@pytest.mark.parametrize("extra", [
    ["--min-run", "4"],
    ["--min-run", "5", "--max-run", "2"],
    ["--min-run", "0", "--max-run", "3"],
    ["--start", "20,20"],
    ["--goal", "nope"],
])
def test_solve_bad_configuration_is_usage_error(grid_files, extra):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--grid", str(grid_files / "sample_1.txt")] + extra)
    assert exc.value.code == 2


def test_solve_malformed_grid_is_usage_error(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("12a\n")
    with pytest.raises(SystemExit):
        main(["solve", "--grid", str(p)])


def test_parse_coord():
    assert parse_coord("3,4") == (3, 4)


# ========== gen ==========

def test_gen_writes_loadable_grids(tmp_path, capsys):
    out = tmp_path / "gen"
    main(["gen", "--count", "3", "--rows", "5", "--cols", "6", "--seed", "7", "--out", str(out)])
    files = sorted(p.name for p in out.iterdir())
    assert files == ["grid_000.txt", "grid_001.txt", "grid_002.txt"]
    g = Grid.load(str(out / "grid_001.txt"))
    assert (g.rows, g.cols) == (5, 6)
    assert g == Grid.random(rows=5, cols=6, seed=8)
    assert capsys.readouterr().out.count("wrote") == 3


# ========== bench ==========

def test_bench_writes_csv_and_pngs(grid_files, tmp_path, capsys):
    csv_path = tmp_path / "bench.csv"
    png_dir = tmp_path / "png"
    main(["bench", "--griddir", str(grid_files), "--csv", str(csv_path), "--out", str(png_dir)])

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    got = {(r["grid"], r["variant"]): r["cost"] for r in rows}
    assert got[("sample_1.txt", "crucible")] == "102"
    assert got[("sample_1.txt", "ultra")] == "94"
    assert got[("sample_2.txt", "ultra")] == "71"
    assert (png_dir / "sample_2_ultra.png").exists()
    assert "wrote CSV:" in capsys.readouterr().out


@pytest.mark.parametrize("dims", [["--rows", "0"], ["--cols", "-1"]])
def test_gen_empty_grid_is_usage_error(tmp_path, dims):
    with pytest.raises(SystemExit) as exc:
        main(["gen", "--count", "1", "--out", str(tmp_path / "gen")] + dims)
    assert exc.value.code == 2


def test_bench_without_grids_writes_header_only_csv(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    csv_path = tmp_path / "bench.csv"
    main(["bench", "--griddir", str(empty), "--csv", str(csv_path)])

    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        assert list(reader) == []
        assert reader.fieldnames[:2] == ["grid", "variant"]
    out = capsys.readouterr().out
    assert "no .txt grids in" in out
    assert "wrote CSV:" in out
