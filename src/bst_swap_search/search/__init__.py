"""Search engine, heuristics and path verification."""

from bst_swap_search.search.engine import (
    Exhausted,
    SearchConfig,
    SearchOutcome,
    Solved,
    exact_distances,
    solve,
    solve_astar,
    solve_bfs,
)
from bst_swap_search.search.heuristics import (
    HEURISTICS,
    combined_heuristic,
    misplaced_count,
    positional_distance,
    tree_distance,
)
from bst_swap_search.search.verify import VerificationError, replay_swaps, verify_outcome

__all__ = [
    "HEURISTICS",
    "Exhausted",
    "SearchConfig",
    "SearchOutcome",
    "Solved",
    "VerificationError",
    "combined_heuristic",
    "exact_distances",
    "misplaced_count",
    "positional_distance",
    "replay_swaps",
    "solve",
    "solve_astar",
    "solve_bfs",
    "tree_distance",
    "verify_outcome",
]
