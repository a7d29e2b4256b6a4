import pytest

import main

CSV = """u,v,capacity
S,A,10
S,B,10
A,T,10
B,T,10
A,B,1
"""


@pytest.fixture
def edges_csv(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text(CSV)
    return path


def test_main_writes_results(edges_csv, tmp_path, capsys):
    out_dir = tmp_path / "results"
    code = main.main([
        "--edges", str(edges_csv),
        "--source", "S",
        "--sink", "T",
        "--output-dir", str(out_dir),
    ])
    captured = capsys.readouterr().out

    assert code == 0
    assert "Max flow: 20" in captured
    assert "Min cut capacity: 20" in captured

    files = list(out_dir.glob("max_flow_results_*.csv"))
    assert len(files) == 1
    lines = files[0].read_text().splitlines()
    assert lines[0] == "from,to,flow,capacity"
    assert len(lines) == 5  # header + four edges carrying flow


def test_main_missing_sink(edges_csv, tmp_path, capsys):
    code = main.main([
        "--edges", str(edges_csv),
        "--source", "S",
        "--sink", "Z",
        "--output-dir", str(tmp_path),
    ])
    assert code == 1
    assert "Error" in capsys.readouterr().out


def test_main_fraction_arithmetic(edges_csv, tmp_path, capsys):
    code = main.main([
        "--edges", str(edges_csv),
        "--source", "S",
        "--sink", "T",
        "--arithmetic", "fraction",
        "--output-dir", str(tmp_path),
    ])
    assert code == 0
    assert "Max flow: 20" in capsys.readouterr().out


def test_main_ortools(edges_csv, tmp_path, capsys):
    code = main.main([
        "--edges", str(edges_csv),
        "--source", "S",
        "--sink", "T",
        "--solver", "ortools",
        "--output-dir", str(tmp_path),
    ])
    assert code == 0
    assert "Max flow: 20" in capsys.readouterr().out


def test_parse_args_defaults():
    args = main.parse_args(["--edges", "x.csv", "--source", "a", "--sink", "b"])
    assert args.arithmetic == "int"
    assert args.solver == "edmonds-karp"
    assert args.capacity_col == "capacity"


def test_main_ortools_rejects_fractional_capacities(tmp_path, capsys):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,capacity\ns,a,0.5\na,t,0.5\ns,t,1.9\n")
    code = main.main([
        "--edges", str(path),
        "--source", "s",
        "--sink", "t",
        "--arithmetic", "decimal",
        "--solver", "ortools",
        "--output-dir", str(tmp_path),
    ])
    assert code == 1
    out = capsys.readouterr().out
    assert "Error" in out
    assert "Max flow" not in out


def test_main_reports_solver_failure(edges_csv, tmp_path, capsys, monkeypatch):
    import ortools_solver

    def failing_solver(*args, **kwargs):
        raise RuntimeError("There was an issue with the max flow input. Status: 3")

    monkeypatch.setattr(ortools_solver, "ortools_max_flow", failing_solver)
    code = main.main([
        "--edges", str(edges_csv),
        "--source", "S",
        "--sink", "T",
        "--solver", "ortools",
        "--output-dir", str(tmp_path),
    ])
    assert code == 1
    assert "Error: There was an issue" in capsys.readouterr().out
