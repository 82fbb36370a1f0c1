"""Remaining-swap estimates between a tree state and its target."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from bst_swap_search.tree.shape import hop_distances
from bst_swap_search.tree.state import TreeState

Heuristic = Callable[[TreeState, TreeState], int]


def misplaced_count(current: TreeState, target: TreeState) -> int:
    """Number of positions whose value differs from the target."""
    return sum(1 for a, b in zip(current.values, target.values) if a != b)


def positional_distance(current: TreeState, target: TreeState) -> int:
    """Half the summed array-index displacement of every value (floored).

    Index distance is not tree distance: one swap between positions ``c`` and
    ``(c - 1) // 2`` moves both values by ``c - (c - 1) // 2`` indices, so
    this estimate can exceed the true remaining cost and is informative only.
    """
    pairs = _position_pairs(current, target)
    total = sum(abs(here - there) for here, there in pairs)
    return total // 2


def tree_distance(current: TreeState, target: TreeState) -> int:
    """Half the summed hop distance every value still has to travel (rounded up).

    A swap moves exactly two values by one hop each, so this never exceeds the
    true remaining cost and drops by at most one per swap.
    """
    hops = hop_distances(current.size())
    total = sum(hops[here][there] for here, there in _position_pairs(current, target))
    return (total + 1) // 2


def combined_heuristic(current: TreeState, target: TreeState) -> int:
    """Max of the admissible forms of the misplaced and distance estimates."""
    half_misplaced = (misplaced_count(current, target) + 1) // 2
    return max(half_misplaced, tree_distance(current, target))


def classic_heuristic(current: TreeState, target: TreeState) -> int:
    """Max of the raw misplaced count and positional distance.

    Kept for comparison runs; it overestimates (``[3, 1, 2]`` scores 2 but
    needs one swap), so best-first search under it is not guaranteed optimal.
    """
    return max(misplaced_count(current, target), positional_distance(current, target))


def zero_heuristic(current: TreeState, target: TreeState) -> int:
    return 0


HEURISTICS: Dict[str, Heuristic] = {
    "combined": combined_heuristic,
    "tree": tree_distance,
    "misplaced": misplaced_count,
    "positional": positional_distance,
    "classic": classic_heuristic,
    "zero": zero_heuristic,
}

# Heuristics that never overestimate; only these keep best-first search optimal.
ADMISSIBLE_HEURISTICS = frozenset({"combined", "tree", "zero"})


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        msg = f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}."
        raise ValueError(msg) from None


def _position_pairs(current: TreeState, target: TreeState) -> List[Tuple[int, int]]:
    """(current index, target index) for every target value present in ``current``.

    Values outside the target never reach it by swapping, so they add nothing;
    search over such a state drains its frontier regardless of the estimate.
    """
    current_pos = {value: idx for idx, value in enumerate(current.values)}
    return [
        (current_pos[value], idx)
        for idx, value in enumerate(target.values)
        if value in current_pos
    ]


__all__ = [
    "ADMISSIBLE_HEURISTICS",
    "HEURISTICS",
    "Heuristic",
    "classic_heuristic",
    "combined_heuristic",
    "get_heuristic",
    "misplaced_count",
    "positional_distance",
    "tree_distance",
    "zero_heuristic",
]
