"""Parse a tree file, solve it and replay the swap path."""

from __future__ import annotations

import sys
from pathlib import Path

from bst_swap_search import TreeState, build_target, format_outcome, parse, replay_swaps, solve


def main(argv: list[str]) -> int:
    path = Path(argv[0]) if argv else Path("tests/fixtures/instances/small/seven_reversed.txt")
    initial = TreeState(parse(path))
    outcome = solve(initial)
    print(format_outcome(outcome), end="")
    if outcome.solved:
        final = replay_swaps(initial, build_target(initial), outcome.swap_path)
        print(f"replayed to {list(final.values)}")
    return 0 if outcome.solved else 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
