"""bst-swap-search package."""

from bst_swap_search.benchmarks.instances import (
    Instance,
    InstanceSpec,
    load_instances,
    random_suite,
)
from bst_swap_search.eval.report import format_outcome, outcome_record
from bst_swap_search.inputs.parser import InputValidationError, parse
from bst_swap_search.search.engine import (
    Exhausted,
    SearchConfig,
    SearchOutcome,
    Solved,
    exact_distances,
    solve,
)
from bst_swap_search.search.heuristics import (
    combined_heuristic,
    misplaced_count,
    positional_distance,
    tree_distance,
)
from bst_swap_search.search.verify import VerificationError, replay_swaps
from bst_swap_search.tree.state import SwapDescription, TreeState
from bst_swap_search.tree.target import build_target

__all__ = [
    "Exhausted",
    "Instance",
    "InstanceSpec",
    "InputValidationError",
    "SearchConfig",
    "SearchOutcome",
    "Solved",
    "SwapDescription",
    "TreeState",
    "VerificationError",
    "build_target",
    "combined_heuristic",
    "exact_distances",
    "format_outcome",
    "load_instances",
    "misplaced_count",
    "outcome_record",
    "parse",
    "positional_distance",
    "random_suite",
    "replay_swaps",
    "solve",
    "solve_values",
    "tree_distance",
]


def solve_values(values, **kwargs) -> SearchOutcome:
    """Helper to solve a plain value sequence; kwargs go to :class:`SearchConfig`."""
    return solve(TreeState(values), SearchConfig(**kwargs))
