"""Invariant checks over eval results (strategy agreement, replay, exhaustion)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

import pandas as pd

from bst_swap_search.search.heuristics import ADMISSIBLE_HEURISTICS

REQUIRED_COLS = [
    "instance_id",
    "label",
    "strategy",
    "heuristic",
    "solved",
    "swap_count",
    "states_explored",
    "verified",
    "exhausted_reason",
]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--results", type=Path, required=True, help="Path to results.csv.")
    parser.add_argument(
        "--out",
        type=Path,
        help="Output directory (defaults to results parent / invariants).",
    )
    return parser.parse_args(argv)


def _schema(df: pd.DataFrame) -> list[dict]:
    missing = [col for col in REQUIRED_COLS if col not in df.columns]
    if missing:
        return [{"type": "schema", "detail": f"missing columns {missing}"}]
    return []


def _is_optimal_label(row: pd.Series) -> bool:
    if row["strategy"] == "bfs":
        return True
    return isinstance(row["heuristic"], str) and row["heuristic"] in ADMISSIBLE_HEURISTICS


def _agreement(df: pd.DataFrame) -> list[dict]:
    """Every optimal strategy must report the same swap count per instance."""
    issues = []
    solved = df[(df["solved"] == True) & df["swap_count"].notna()]  # noqa: E712
    optimal = solved[solved.apply(_is_optimal_label, axis=1)] if not solved.empty else solved
    for instance_id, group in optimal.groupby("instance_id"):
        counts = group["swap_count"].astype(int)
        if counts.max() != counts.min():
            issues.append(
                {
                    "type": "swap_count_disagreement",
                    "instance_id": instance_id,
                    "counts": dict(zip(group["label"], counts.tolist())),
                }
            )
    return issues


def _replay(df: pd.DataFrame) -> list[dict]:
    issues = []
    failed = df[(df["solved"] == True) & (df["verified"] != True)]  # noqa: E712
    for _, row in failed.iterrows():
        issues.append(
            {
                "type": "replay_failed",
                "instance_id": row["instance_id"],
                "label": row["label"],
            }
        )
    return issues


def _exhaustion(df: pd.DataFrame) -> list[dict]:
    """A drained frontier means the input was not a permutation of 1..n."""
    issues = []
    unsolved = df["solved"] == False  # noqa: E712
    drained = df[unsolved & (df["exhausted_reason"] == "frontier_empty")]
    for _, row in drained.iterrows():
        issues.append(
            {
                "type": "frontier_exhausted",
                "instance_id": row["instance_id"],
                "label": row["label"],
            }
        )
    return issues


def _metric_sanity(df: pd.DataFrame) -> list[dict]:
    issues = []
    negative = df[(df["swap_count"].fillna(0) < 0) | (df["states_explored"].fillna(0) < 1)]
    for _, row in negative.iterrows():
        issues.append(
            {
                "type": "metric_sanity",
                "instance_id": row["instance_id"],
                "label": row["label"],
                "detail": "negative swap count or no states explored",
            }
        )
    return issues


def _summarize(issues: Iterable[dict]) -> dict:
    issues_list = list(issues)
    grouped: dict[str, int] = {}
    for item in issues_list:
        grouped[item["type"]] = grouped.get(item["type"], 0) + 1
    return {"issues": issues_list, "counts": grouped, "passed": len(issues_list) == 0}


def _write_report(out_dir: Path, summary: dict) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    report_lines = ["# Invariants Report", ""]
    if summary["passed"]:
        report_lines.append("- All invariants passed.")
    else:
        report_lines.append(f"- Issues found: {summary['counts']}")
        for issue in summary["issues"]:
            parts = [issue["type"]]
            for key, val in issue.items():
                if key == "type":
                    continue
                parts.append(f"{key}={val}")
            report_lines.append(f"  - {'; '.join(parts)}")
    (out_dir / "report.md").write_text("\n".join(report_lines))
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2, default=str))


def check_results(df: pd.DataFrame) -> dict:
    issues = _schema(df)
    if not issues:
        issues.extend(_agreement(df))
        issues.extend(_replay(df))
        issues.extend(_exhaustion(df))
        issues.extend(_metric_sanity(df))
    return _summarize(issues)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    results_path = args.results.expanduser()
    out_dir = args.out or results_path.parent / "invariants"
    df = pd.read_csv(results_path)
    summary = check_results(df)
    _write_report(out_dir, summary)
    print(f"[invariants] wrote report to {out_dir}")
    return 0 if summary["passed"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
