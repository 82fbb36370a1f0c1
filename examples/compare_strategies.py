"""Quick comparison between breadth-first and best-first search on one tree."""

from __future__ import annotations

from bst_swap_search import SearchConfig, TreeState, build_target, format_outcome, solve


def _print_stats(label: str, outcome) -> None:
    print(
        f"{label}: swaps={outcome.swap_count}, states_explored={outcome.states_explored}, "
        f"heuristic={outcome.heuristic}"
    )


def main() -> None:
    initial = TreeState([7, 6, 5, 4, 3, 2, 1])
    print(f"initial={list(initial.values)} target={list(build_target(initial).values)}")

    bfs = solve(initial, SearchConfig(strategy="bfs"))
    astar = solve(initial, SearchConfig(strategy="astar"))
    classic = solve(initial, SearchConfig(strategy="astar", heuristic="classic"))

    _print_stats("BFS", bfs)
    _print_stats("A* (combined)", astar)
    _print_stats("A* (classic, inadmissible)", classic)
    print()
    print(format_outcome(astar), end="")


if __name__ == "__main__":
    main()
