"""Solve benchmark instances with several strategies and write CSV artifacts."""

from __future__ import annotations

import argparse
import json
import platform
import sys
import time
from pathlib import Path
from typing import Any, Iterable, Sequence

import networkx as nx
import pandas as pd

from bst_swap_search.benchmarks.instances import (
    Instance,
    InstanceSpec,
    load_instances,
    random_suite,
)
from bst_swap_search.search.engine import SearchConfig, solve
from bst_swap_search.search.heuristics import get_heuristic
from bst_swap_search.search.verify import VerificationError, verify_outcome
from bst_swap_search.tree.target import build_target
from bst_swap_search.eval.report import outcome_record

DEFAULT_STRATEGIES = ["bfs", "astar"]
SUMMARY_COLS = ["swap_count", "states_explored", "runtime_s"]


def _log(msg: str) -> None:
    print(f"[eval] {msg}")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[3, 5, 7], help="Tree sizes for random instances."
    )
    parser.add_argument("--count", type=int, default=5, help="Random instances per size.")
    parser.add_argument("--seed", type=int, default=0, help="Seed for random instances.")
    parser.add_argument(
        "--strategies",
        nargs="+",
        default=DEFAULT_STRATEGIES,
        help="Strategies to run: bfs, astar or astar:<heuristic>.",
    )
    parser.add_argument("--instances-root", type=Path, help="Optional directory of .txt instances.")
    parser.add_argument("--max-size", type=int, help="Skip on-disk instances larger than this.")
    parser.add_argument("--max-expansions", type=int, help="Per-search expansion cap.")
    parser.add_argument(
        "--out", type=Path, default=Path("artifacts/eval"), help="Output directory."
    )
    return parser.parse_args(argv)


def _configs(names: Sequence[str], max_expansions: int | None) -> dict[str, SearchConfig]:
    configs: dict[str, SearchConfig] = {}
    for name in names:
        strategy, _, heuristic = name.partition(":")
        configs[name] = SearchConfig(
            strategy=strategy,
            heuristic=heuristic or "combined",
            max_expansions=max_expansions,
        )
    return configs


def _load(args: argparse.Namespace) -> list[Instance]:
    instances = random_suite(InstanceSpec(size, args.count, args.seed) for size in args.sizes)
    if args.instances_root is not None:
        instances.extend(load_instances(args.instances_root, max_size=args.max_size))
    return instances


def _result_record(
    instance: Instance, label: str, config: SearchConfig
) -> dict[str, Any]:
    target = build_target(instance.state)
    start = time.perf_counter()
    outcome = solve(instance.state, config)
    runtime = time.perf_counter() - start

    verified: bool | None = None
    verify_error: str | None = None
    if outcome.solved:
        try:
            verify_outcome(instance.state, target, outcome)
            verified = True
        except VerificationError as exc:
            verified = False
            verify_error = str(exc)

    record: dict[str, Any] = {
        "instance_id": instance.instance_id,
        "size": instance.state.size(),
        "initial": " ".join(str(v) for v in instance.state.values),
        "label": label,
        "runtime_s": runtime,
        "h_initial": get_heuristic(config.heuristic)(instance.state, target),
        "verified": verified,
        "verify_error": verify_error,
    }
    record.update(outcome_record(outcome))
    return record


def _write_summary(df: pd.DataFrame, path: Path) -> pd.DataFrame:
    solved = df[df["solved"] == True] if "solved" in df.columns else df  # noqa: E712
    if solved.empty:
        summary = pd.DataFrame(columns=["label", "size", "instances"])
    else:
        grouped = solved.groupby(["label", "size"])
        summary = grouped[SUMMARY_COLS].mean().add_suffix("_mean").reset_index()
        summary["instances"] = grouped.size().values
    summary.to_csv(path, index=False)
    return summary


def _collect_metadata(args: argparse.Namespace, labels: Iterable[str]) -> dict[str, object]:
    return {
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "networkx": nx.__version__,
        "pandas": pd.__version__,
        "sizes": list(args.sizes),
        "count": args.count,
        "seed": args.seed,
        "strategies": list(labels),
        "instances_root": str(args.instances_root) if args.instances_root else None,
        "max_expansions": args.max_expansions,
    }


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        configs = _configs(args.strategies, args.max_expansions)
        instances = _load(args)
    except (ValueError, FileNotFoundError) as exc:
        _log(str(exc))
        return 2

    records = []
    for instance in instances:
        for label, config in configs.items():
            records.append(_result_record(instance, label, config))

    out_dir = args.out.expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)
    results_path = out_dir / "results.csv"
    summary_path = out_dir / "summary.csv"
    metadata_path = out_dir / "metadata.json"

    df = pd.DataFrame(records)
    df.to_csv(results_path, index=False)
    _write_summary(df, summary_path)
    metadata_path.write_text(json.dumps(_collect_metadata(args, configs), indent=2))

    _log(f"wrote {len(df)} rows to {results_path}")
    _log(f"wrote summary to {summary_path}")
    _log(f"wrote metadata to {metadata_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
