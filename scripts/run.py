"""Cross-platform task runner for bst-swap-search.

All commands use the currently active Python interpreter (sys.executable) so they work
on POSIX and Windows without Make.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

ARTIFACTS_ENV = "ARTIFACTS"
DEFAULT_ARTIFACTS = "artifacts"


class RunError(Exception):
    """Raised when an invoked command fails."""


def _log(msg: str) -> None:
    print(f"[run] {msg}")


def _run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    _log("$ " + " ".join(cmd))
    result = subprocess.run(cmd, env=env)
    if result.returncode != 0:
        raise RunError(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")


def _artifacts_root() -> Path:
    return Path(os.environ.get(ARTIFACTS_ENV, DEFAULT_ARTIFACTS))


def cmd_lint(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "check", "."])
    _run([sys.executable, "-m", "ruff", "format", "--check", "."])


def cmd_format(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "format", "."])
    _run([sys.executable, "-m", "ruff", "check", "--fix", "."])


def cmd_test(args: argparse.Namespace) -> None:
    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_cmd.append("-q")
    _run(pytest_cmd)


def cmd_solve(args: argparse.Namespace) -> None:
    cmd = [
        sys.executable,
        "-m",
        "bst_swap_search.cli",
        "solve",
        str(args.path),
        "--strategy",
        args.strategy,
        "--heuristic",
        args.heuristic,
    ]
    _run(cmd)


def cmd_eval(args: argparse.Namespace) -> None:
    out_dir = args.out or (_artifacts_root() / "eval")
    cmd = [
        sys.executable,
        "-m",
        "bst_swap_search.eval.run_eval",
        "--sizes",
        *[str(s) for s in args.sizes],
        "--count",
        str(args.count),
        "--seed",
        str(args.seed),
        "--out",
        str(out_dir),
    ]
    if args.strategies:
        cmd += ["--strategies", *args.strategies]
    if args.instances_root:
        cmd += ["--instances-root", str(args.instances_root)]
    _run(cmd)


def cmd_invariants(args: argparse.Namespace) -> None:
    results = args.results or (_artifacts_root() / "eval" / "results.csv")
    if not results.exists():
        raise RunError("Could not locate eval results CSV; run eval first or pass --results")
    out_dir = args.out or (results.parent / "invariants")
    _run(
        [
            sys.executable,
            "-m",
            "bst_swap_search.eval.invariants",
            "--results",
            str(results),
            "--out",
            str(out_dir),
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    lint_p = sub.add_parser("lint", help="Run ruff checks")
    lint_p.set_defaults(func=cmd_lint)

    fmt_p = sub.add_parser("format", help="Apply ruff format and fixes")
    fmt_p.set_defaults(func=cmd_format)

    test_p = sub.add_parser("test", help="Run pytest")
    test_p.add_argument("--quiet", action="store_true", help="Quiet pytest output")
    test_p.set_defaults(func=cmd_test)

    solve_p = sub.add_parser("solve", help="Solve a single tree file")
    solve_p.add_argument("path", type=Path)
    solve_p.add_argument("--strategy", default="astar")
    solve_p.add_argument("--heuristic", default="combined")
    solve_p.set_defaults(func=cmd_solve)

    eval_p = sub.add_parser("eval", help="Compare strategies on random and on-disk instances")
    eval_p.add_argument("--sizes", type=int, nargs="+", default=[3, 5, 7])
    eval_p.add_argument("--count", type=int, default=5)
    eval_p.add_argument("--seed", type=int, default=0)
    eval_p.add_argument("--strategies", nargs="+", help="Override strategies")
    eval_p.add_argument("--instances-root", type=Path, help="Optional instance directory")
    eval_p.add_argument("--out", type=Path, help="Output directory (defaults to $ARTIFACTS/eval)")
    eval_p.set_defaults(func=cmd_eval)

    inv = sub.add_parser("invariants", help="Run invariant checks on results CSV")
    inv.add_argument("--results", type=Path, help="Path to results CSV (defaults to latest eval)")
    inv.add_argument("--out", type=Path, help="Output directory for report")
    inv.set_defaults(func=cmd_invariants)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except RunError as exc:  # pragma: no cover - simple CLI error
        _log(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
