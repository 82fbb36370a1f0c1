"""Command-line entry point: parse a tree file, search, verify and report."""

from __future__ import annotations

import argparse
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from bst_swap_search.eval.report import format_outcome, format_tree
from bst_swap_search.inputs.parser import InputValidationError, parse
from bst_swap_search.search.engine import STRATEGIES, SearchConfig, solve
from bst_swap_search.search.heuristics import HEURISTICS
from bst_swap_search.search.verify import VerificationError, verify_outcome
from bst_swap_search.tree.state import TreeState
from bst_swap_search.tree.target import build_target


def _log(msg: str) -> None:
    print(f"[solve] {msg}")


@contextmanager
def _step(name: str) -> Iterator[None]:
    start = time.perf_counter()
    yield
    _log(f"{name} done in {(time.perf_counter() - start) * 1000:.2f} ms")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Solve one tree file")
    solve_p.add_argument("path", type=Path, help="File of whitespace-separated values 1..n")
    solve_p.add_argument("--strategy", choices=STRATEGIES, default="astar")
    solve_p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="combined")
    solve_p.add_argument("--max-expansions", type=int, help="Stop after this many expansions")
    solve_p.add_argument("--no-verify", action="store_true", help="Skip replaying the swap path")
    solve_p.add_argument(
        "--lenient", action="store_true", help="Only tokenise the input, skip 1..n validation"
    )
    solve_p.set_defaults(func=cmd_solve)

    target_p = sub.add_parser("target", help="Print the target layout for a tree size")
    target_p.add_argument("size", type=int)
    target_p.set_defaults(func=cmd_target)
    return parser


def cmd_solve(args: argparse.Namespace) -> int:
    config = SearchConfig(
        strategy=args.strategy, heuristic=args.heuristic, max_expansions=args.max_expansions
    )
    with _step("parse"):
        values = parse(args.path, strict_validation=not args.lenient)
    initial = TreeState(values)
    _log(f"initial: {list(initial.values)}")

    with _step("build target"):
        target = build_target(initial)
    _log(f"target: {list(target.values)}")
    print(format_tree(target))

    with _step(f"search ({config.strategy})"):
        outcome = solve(initial, config)
    print(format_outcome(outcome), end="")
    if not outcome.solved:
        return 1

    if not args.no_verify:
        with _step("verify"):
            verify_outcome(initial, target, outcome)
        _log("replay reproduced the target")
    return 0


def cmd_target(args: argparse.Namespace) -> int:
    if args.size < 1:
        msg = f"Tree size must be positive, got {args.size}."
        raise ValueError(msg)
    target = build_target(TreeState(range(1, args.size + 1)))
    print(" ".join(str(v) for v in target.values))
    print(format_tree(target))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (InputValidationError, OSError) as exc:
        _log(f"input error: {exc}")
        return 2
    except VerificationError as exc:
        _log(f"verification failed at step {exc.step}: {exc}")
        return 3
    except ValueError as exc:
        _log(str(exc))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
