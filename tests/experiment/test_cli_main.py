from __future__ import annotations

import json
import subprocess
import sys

import pytest

from monkeysearch.experiment.cli.main import main
from monkeysearch.experiment.cli.parser import parse_args


def test_defaults():
    args = parse_args([])
    assert args.problem == "sphere"
    assert (args.pop_size, args.max_iterations) == (20, 100)
    # Dimension and box come from the problem registry unless given.
    assert (args.n_var, args.lower, args.upper) == (None, None, None)
    assert args.climbing_step == 0.2
    assert args.watch_policy == "live"
    assert args.report_interval == 10


def test_quiet_run_prints_final_solution(capsys):
    code = main(["--quiet", "--seed", "3", "--max-iterations", "5", "--n-var", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Final Solution:" in out
    assert "Position: [" in out
    assert "Fitness:" in out
    position_line = next(line for line in out.splitlines() if line.startswith("Position:"))
    assert position_line.count(",") == 2


def test_seeded_runs_are_reproducible(capsys):
    argv = ["--quiet", "--seed", "11", "--max-iterations", "8", "--problem", "rastrigin"]
    main(argv)
    first = capsys.readouterr().out
    main(argv)
    assert capsys.readouterr().out == first


def test_invalid_bounds_exit_with_error(capsys):
    code = main(["--quiet", "--lower", "5", "--upper", "1", "--max-iterations", "1"])
    err = capsys.readouterr().err
    assert code == 2
    assert "Invalid search bounds" in err


def test_invalid_pop_size_exit_with_error(capsys):
    code = main(["--quiet", "--pop-size", "0"])
    assert code == 2
    assert "pop_size" in capsys.readouterr().err


def test_unknown_problem_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        parse_args(["--problem", "banana"])


def test_quiet_and_verbose_conflict():
    with pytest.raises(SystemExit):
        parse_args(["--quiet", "--verbose"])


def test_writes_json_output(tmp_path, capsys):
    out_path = tmp_path / "nested" / "result.json"
    code = main(["--quiet", "--seed", "1", "--max-iterations", "4", "--output", str(out_path)])
    capsys.readouterr()
    assert code == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(data["X"]) == 5
    assert len(data["history"]) == 4
    assert data["n_iter"] == 4
    assert data["meta"]["seed"] == 1
    assert data["meta"]["config"]["pop_size"] == 20


def test_config_file_supplies_defaults_and_cli_overrides(tmp_path, capsys):
    spec = tmp_path / "run.json"
    spec.write_text(json.dumps({"problem": "griewank", "msa": {"pop_size": 7, "max_iterations": 3}}), encoding="utf-8")
    args = parse_args(["--config", str(spec), "--max-iterations", "9"])
    assert args.problem == "griewank"
    assert args.pop_size == 7
    assert args.max_iterations == 9

    out_path = tmp_path / "result.json"
    assert main(["--config", str(spec), "--quiet", "--seed", "0", "--output", str(out_path)]) == 0
    capsys.readouterr()
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["meta"]["problem"] == "griewank"
    assert data["n_iter"] == 3


def test_missing_config_file(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json")]) == 2
    assert "does not exist" in capsys.readouterr().err


def test_plot_option(tmp_path, capsys):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    plot_path = tmp_path / "conv.png"
    assert main(["--quiet", "--seed", "2", "--max-iterations", "3", "--plot", str(plot_path)]) == 0
    capsys.readouterr()
    assert plot_path.exists()


@pytest.mark.cli
def test_module_entrypoint():
    proc = subprocess.run(
        [sys.executable, "-m", "monkeysearch", "--max-iterations", "3", "--seed", "0"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        timeout=60,
    )
    assert proc.returncode == 0, proc.stderr.decode()
    stdout = proc.stdout.decode()
    assert "Final Solution:" in stdout
    # Progress goes through logging on stderr.
    stderr = proc.stderr.decode()
    assert "Starting Monkey Search Algorithm" in stderr
    assert "Iteration\tBest Fitness" in stderr


def test_default_problem_keeps_reference_box(tmp_path, capsys):
    out_path = tmp_path / "sphere.json"
    assert main(["--quiet", "--seed", "0", "--max-iterations", "1", "--output", str(out_path)]) == 0
    capsys.readouterr()
    meta = json.loads(out_path.read_text(encoding="utf-8"))["meta"]
    assert meta["n_var"] == 5
    assert meta["bounds"] == [-10.0, 10.0]


@pytest.mark.parametrize(
    "problem, bounds",
    [("schwefel", [-500.0, 500.0]), ("rastrigin", [-5.12, 5.12]), ("griewank", [-600.0, 600.0])],
)
def test_problem_uses_registered_box(tmp_path, capsys, problem, bounds):
    out_path = tmp_path / "result.json"
    argv = ["--problem", problem, "--quiet", "--seed", "0", "--max-iterations", "1", "--output", str(out_path)]
    assert main(argv) == 0
    capsys.readouterr()
    meta = json.loads(out_path.read_text(encoding="utf-8"))["meta"]
    assert meta["bounds"] == bounds


def test_explicit_box_overrides_registered_one(tmp_path, capsys):
    out_path = tmp_path / "result.json"
    argv = ["--problem", "schwefel", "--lower", "-50", "--upper", "50", "--n-var", "2", "--quiet"]
    assert main(argv + ["--max-iterations", "1", "--output", str(out_path)]) == 0
    capsys.readouterr()
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["meta"]["bounds"] == [-50.0, 50.0]
    assert len(data["X"]) == 2


def test_malformed_config_file_exits_with_error(tmp_path, capsys):
    spec = tmp_path / "broken.json"
    spec.write_text("{not json", encoding="utf-8")
    assert main(["--config", str(spec), "--quiet", "--max-iterations", "1"]) == 2
    assert "not valid JSON" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["quiet", "verbose"])
def test_config_flags_must_be_booleans(tmp_path, capsys, flag):
    spec = tmp_path / "run.json"
    spec.write_text(json.dumps({flag: "false"}), encoding="utf-8")
    assert main(["--config", str(spec), "--max-iterations", "1"]) == 2
    assert f"'{flag}'" in capsys.readouterr().err


def test_config_boolean_flag(tmp_path):
    spec = tmp_path / "run.json"
    spec.write_text(json.dumps({"quiet": True}), encoding="utf-8")
    assert parse_args(["--config", str(spec)]).quiet is True
