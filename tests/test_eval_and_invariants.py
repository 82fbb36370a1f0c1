import json
from pathlib import Path

import pandas as pd

from bst_swap_search.eval import invariants, run_eval
from bst_swap_search.eval.report import format_outcome, format_tree, outcome_record
from bst_swap_search.search.engine import solve_astar, solve_bfs
from bst_swap_search.tree.state import TreeState


def test_format_outcome_lists_swaps():
    text = format_outcome(solve_bfs(TreeState([3, 1, 2])))
    assert text.startswith("Solution found in 1 swaps:")
    assert "1. Swap node 2 (value 2) with node 0 (value 3)" in text


def test_format_outcome_for_exhaustion():
    text = format_outcome(solve_astar(TreeState([7, 6, 5, 4, 3, 2, 1]), max_expansions=1))
    assert text.startswith("No solution found (expansion_limit).")


def test_format_tree_groups_levels():
    assert format_tree(TreeState([4, 2, 6, 1, 3])) == "L0: 4\nL1: 2 6\nL2: 1 3"


def test_outcome_record_is_flat():
    record = outcome_record(solve_astar(TreeState([3, 1, 2])))
    assert record["solved"] is True
    assert record["swap_count"] == 1
    assert record["swap_path"] == "2:0"
    assert record["heuristic"] == "combined"
    assert record["exhausted_reason"] is None


def test_run_eval_then_invariants(tmp_path: Path):
    out_dir = tmp_path / "eval"
    exit_code = run_eval.main(
        ["--sizes", "3", "5", "--count", "2", "--seed", "4", "--out", str(out_dir)]
    )
    assert exit_code == 0

    df = pd.read_csv(out_dir / "results.csv")
    assert len(df) == 2 * 2 * 2
    assert set(df["label"]) == {"bfs", "astar"}
    assert df["verified"].all()
    summary = pd.read_csv(out_dir / "summary.csv")
    assert set(summary["size"]) == {3, 5}
    metadata = json.loads((out_dir / "metadata.json").read_text())
    assert metadata["strategies"] == ["bfs", "astar"]

    inv_dir = tmp_path / "inv"
    exit_code = invariants.main(["--results", str(out_dir / "results.csv"), "--out", str(inv_dir)])
    assert exit_code == 0
    assert (inv_dir / "report.md").exists()
    report = json.loads((inv_dir / "summary.json").read_text())
    assert report["passed"] is True


def test_run_eval_rejects_unknown_strategy(tmp_path: Path):
    exit_code = run_eval.main(["--strategies", "dfs", "--out", str(tmp_path)])
    assert exit_code == 2


def _row(label, strategy, heuristic, swap_count, **overrides):
    row = {
        "instance_id": "i0",
        "label": label,
        "strategy": strategy,
        "heuristic": heuristic,
        "solved": True,
        "swap_count": swap_count,
        "states_explored": 5,
        "verified": True,
        "exhausted_reason": None,
    }
    row.update(overrides)
    return row


def test_invariants_flag_disagreement_between_optimal_strategies():
    df = pd.DataFrame(
        [
            _row("bfs", "bfs", None, 3),
            _row("astar", "astar", "combined", 4),
            _row("astar:classic", "astar", "classic", 6),
        ]
    )
    summary = invariants.check_results(df)
    assert summary["passed"] is False
    assert summary["counts"] == {"swap_count_disagreement": 1}
    assert summary["issues"][0]["counts"] == {"bfs": 3, "astar": 4}


def test_invariants_ignore_inadmissible_labels_and_flag_drained_frontier():
    df = pd.DataFrame(
        [
            _row("bfs", "bfs", None, 3),
            _row("astar:classic", "astar", "classic", 5),
            _row(
                "astar",
                "astar",
                "combined",
                None,
                solved=False,
                verified=None,
                exhausted_reason="frontier_empty",
            ),
        ]
    )
    summary = invariants.check_results(df)
    assert summary["counts"] == {"frontier_exhausted": 1}


def test_invariants_report_schema_problems():
    summary = invariants.check_results(pd.DataFrame([{"instance_id": "x"}]))
    assert summary["counts"] == {"schema": 1}
