from pathlib import Path

import pytest

from bst_swap_search import cli
from scripts import run as run_script

FIXTURES = Path(__file__).parent / "fixtures" / "instances"


def test_solve_prints_swaps_and_verifies(capsys) -> None:
    exit_code = cli.main(["solve", str(FIXTURES / "small" / "three_root_right.txt")])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Solution found in 1 swaps:" in out
    assert "1. Swap node 2 (value 2) with node 0 (value 3)" in out
    assert "[solve] replay reproduced the target" in out


@pytest.mark.parametrize("strategy", ["bfs", "astar"])
def test_solve_strategies(capsys, strategy) -> None:
    exit_code = cli.main(
        ["solve", str(FIXTURES / "medium" / "five_mixed.txt"), "--strategy", strategy]
    )
    assert exit_code == 0
    assert f"search ({strategy}) done" in capsys.readouterr().out


def test_solve_invalid_input_returns_2(capsys) -> None:
    exit_code = cli.main(["solve", str(FIXTURES / "medium" / "invalid_duplicate.txt")])
    assert exit_code == 2
    assert "input error" in capsys.readouterr().out


def test_solve_missing_file_returns_2(tmp_path: Path) -> None:
    assert cli.main(["solve", str(tmp_path / "nope.txt")]) == 2


def test_solve_expansion_limit_returns_1(capsys) -> None:
    path = FIXTURES / "small" / "seven_reversed.txt"
    exit_code = cli.main(["solve", str(path), "--max-expansions", "1"])
    assert exit_code == 1
    assert "No solution found (expansion_limit)" in capsys.readouterr().out


def test_solve_rejects_bad_expansion_cap() -> None:
    path = FIXTURES / "small" / "three_root_right.txt"
    assert cli.main(["solve", str(path), "--max-expansions", "0"]) == 2


def test_target_command(capsys) -> None:
    assert cli.main(["target", "7"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "4 2 6 1 3 5 7"
    assert "L2: 1 3 5 7" in out


def test_run_script_eval_builds_module_command(tmp_path: Path, monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(run_script, "_run", lambda cmd, env=None: calls.append(cmd))
    exit_code = run_script.main(["eval", "--sizes", "3", "4", "--out", str(tmp_path)])
    assert exit_code == 0
    cmd = calls[0]
    assert cmd[1:3] == ["-m", "bst_swap_search.eval.run_eval"]
    assert cmd[cmd.index("--sizes") + 1 : cmd.index("--sizes") + 3] == ["3", "4"]


def test_run_script_invariants_requires_results(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("ARTIFACTS", str(tmp_path))
    assert run_script.main(["invariants"]) == 1


@pytest.mark.parametrize("strategy", ["bfs", "astar"])
@pytest.mark.parametrize("line", ["1 2 9", "-1 1 2"])
def test_lenient_foreign_values_exhaust(tmp_path: Path, capsys, strategy, line) -> None:
    path = tmp_path / "tree.txt"
    path.write_text(line + "\n")
    exit_code = cli.main(["solve", str(path), "--lenient", "--strategy", strategy])
    assert exit_code == 1
    assert "No solution found (frontier_empty)" in capsys.readouterr().out
