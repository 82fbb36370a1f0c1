"""Text and record views of search outcomes."""

from __future__ import annotations

from typing import Any

from bst_swap_search.search.engine import SearchOutcome
from bst_swap_search.tree.shape import depth_of
from bst_swap_search.tree.state import TreeState


def format_outcome(outcome: SearchOutcome) -> str:
    """Human-readable summary of a search outcome."""
    if not outcome.solved:
        return (
            f"No solution found ({outcome.reason}).\n"
            f"Nodes explored: {outcome.states_explored}\n"
        )
    lines = [
        f"Solution found in {outcome.swap_count} swaps:",
        f"Nodes explored: {outcome.states_explored}",
        "Swap sequence:",
    ]
    lines.extend(f"{i}. {swap}" for i, swap in enumerate(outcome.swap_path, start=1))
    return "\n".join(lines) + "\n"


def format_tree(state: TreeState) -> str:
    """One line per tree level, e.g. ``L0: 4`` / ``L1: 2 6``."""
    levels: dict[int, list[str]] = {}
    for idx, value in enumerate(state.values):
        levels.setdefault(depth_of(idx), []).append(str(value))
    return "\n".join(f"L{depth}: {' '.join(vals)}" for depth, vals in sorted(levels.items()))


def outcome_record(outcome: SearchOutcome) -> dict[str, Any]:
    """Flatten into a dictionary suitable for CSV/JSON logging."""
    record: dict[str, Any] = {
        "strategy": outcome.strategy,
        "heuristic": outcome.heuristic,
        "solved": outcome.solved,
        "states_explored": outcome.states_explored,
        "swap_count": outcome.swap_count if outcome.solved else None,
        "swap_path": (
            "|".join(f"{s.child_index}:{s.parent_index}" for s in outcome.swap_path)
            if outcome.solved
            else None
        ),
        "exhausted_reason": None if outcome.solved else outcome.reason,
    }
    record.update(outcome.extra)
    return record


__all__ = ["format_outcome", "format_tree", "outcome_record"]
