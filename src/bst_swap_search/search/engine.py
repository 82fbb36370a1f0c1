"""State-space search for the minimum number of parent-child swaps."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from bst_swap_search.search.heuristics import Heuristic, get_heuristic
from bst_swap_search.tree.state import SwapDescription, TreeState
from bst_swap_search.tree.target import build_target

STRATEGIES = ("astar", "bfs")


@dataclass(frozen=True)
class SearchConfig:
    """Knobs for :func:`solve`."""

    strategy: str = "astar"
    heuristic: str = "combined"
    # Stop after this many frontier pops; None searches until done.
    max_expansions: int | None = None

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            msg = f"Unknown strategy {self.strategy!r}; expected one of {list(STRATEGIES)}."
            raise ValueError(msg)
        get_heuristic(self.heuristic)
        if self.max_expansions is not None and self.max_expansions < 1:
            msg = "max_expansions must be positive when set."
            raise ValueError(msg)


@dataclass
class Solved:
    """A swap path from the initial state to the target."""

    swap_path: List[SwapDescription]
    swap_count: int
    states_explored: int
    strategy: str = "astar"
    heuristic: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    solved = True


@dataclass
class Exhausted:
    """Search stopped without reaching the target."""

    states_explored: int
    reason: str = "frontier_empty"
    strategy: str = "astar"
    heuristic: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    solved = False


SearchOutcome = Solved | Exhausted


class _NodeArena:
    """Search nodes addressed by integer handle; handle 0 is the start state."""

    __slots__ = ("states", "parents", "swaps", "costs")

    def __init__(self, start: TreeState):
        self.states: List[TreeState] = [start]
        self.parents: List[int] = [-1]
        self.swaps: List[SwapDescription | None] = [None]
        self.costs: List[int] = [0]

    def add(self, state: TreeState, parent: int, swap: SwapDescription, cost: int) -> int:
        self.states.append(state)
        self.parents.append(parent)
        self.swaps.append(swap)
        self.costs.append(cost)
        return len(self.states) - 1

    def path_to(self, handle: int) -> List[SwapDescription]:
        path: List[SwapDescription] = []
        while handle > 0:
            swap = self.swaps[handle]
            assert swap is not None
            path.append(swap)
            handle = self.parents[handle]
        path.reverse()
        return path


# ------------------------------------------------------------------ API --
def solve(initial: TreeState, config: SearchConfig | None = None) -> SearchOutcome:
    """Find a minimum-swap path from ``initial`` to its target BST layout."""
    cfg = config or SearchConfig()
    target = build_target(initial)
    heuristic_name = cfg.heuristic if cfg.strategy == "astar" else None
    if initial == target:
        return Solved([], 0, 1, strategy=cfg.strategy, heuristic=heuristic_name)

    if cfg.strategy == "bfs":
        outcome = _breadth_first(initial, target, cfg.max_expansions)
    else:
        outcome = _best_first(
            initial, target, get_heuristic(cfg.heuristic), cfg.max_expansions
        )
    outcome.strategy = cfg.strategy
    outcome.heuristic = heuristic_name
    return outcome


def solve_bfs(initial: TreeState, *, max_expansions: int | None = None) -> SearchOutcome:
    return solve(initial, SearchConfig(strategy="bfs", max_expansions=max_expansions))


def solve_astar(
    initial: TreeState,
    *,
    heuristic: str = "combined",
    max_expansions: int | None = None,
) -> SearchOutcome:
    return solve(
        initial,
        SearchConfig(strategy="astar", heuristic=heuristic, max_expansions=max_expansions),
    )


def exact_distances(target: TreeState) -> Dict[TreeState, int]:
    """Swap distance to ``target`` for every reachable state.

    Swaps are their own inverse, so distances from the target equal distances
    to it. Enumerates all ``n!`` states; only meant for small trees.
    """
    dist: Dict[TreeState, int] = {target: 0}
    queue = deque([target])
    n = target.size()
    while queue:
        state = queue.popleft()
        d = dist[state] + 1
        for child in range(1, n):
            succ = state.swap(child)
            if succ is not None and succ not in dist:
                dist[succ] = d
                queue.append(succ)
    return dist


# ------------------------------------------------------------- strategies --
def _breadth_first(
    initial: TreeState, target: TreeState, max_expansions: int | None
) -> SearchOutcome:
    arena = _NodeArena(initial)
    frontier: deque[int] = deque([0])
    seen = {initial}
    n = initial.size()
    dequeued = 0

    while frontier:
        if max_expansions is not None and dequeued >= max_expansions:
            return Exhausted(dequeued, reason="expansion_limit")
        handle = frontier.popleft()
        dequeued += 1
        state = arena.states[handle]
        depth = arena.costs[handle]
        for child in range(1, n):
            succ = state.swap(child)
            if succ is None or succ in seen:
                continue
            seen.add(succ)
            swap = state.describe_swap(child)
            succ_handle = arena.add(succ, handle, swap, depth + 1)
            if succ == target:
                path = arena.path_to(succ_handle)
                return Solved(path, len(path), dequeued, extra={"states_seen": len(seen)})
            frontier.append(succ_handle)

    return Exhausted(dequeued)


def _best_first(
    initial: TreeState,
    target: TreeState,
    heuristic: Heuristic,
    max_expansions: int | None,
) -> SearchOutcome:
    arena = _NodeArena(initial)
    h0 = heuristic(initial, target)
    # (f, h, -g, handle): lowest f, then closest to goal, then deepest, then oldest.
    open_heap: List[Tuple[int, int, int, int]] = [(h0, h0, 0, 0)]
    best_g: Dict[TreeState, int] = {initial: 0}
    closed: set[TreeState] = set()
    n = initial.size()
    pops = 0

    while open_heap:
        if max_expansions is not None and pops >= max_expansions:
            return Exhausted(pops, reason="expansion_limit")
        _, _, _, handle = heapq.heappop(open_heap)
        pops += 1
        state = arena.states[handle]
        if state in closed:
            continue
        closed.add(state)

        g = arena.costs[handle]
        if state == target:
            return Solved(
                arena.path_to(handle), g, pops, extra={"states_closed": len(closed)}
            )

        tentative = g + 1
        for child in range(1, n):
            succ = state.swap(child)
            if succ is None or succ in closed:
                continue
            if tentative >= best_g.get(succ, tentative + 1):
                continue
            best_g[succ] = tentative
            succ_handle = arena.add(succ, handle, state.describe_swap(child), tentative)
            h = heuristic(succ, target)
            heapq.heappush(open_heap, (tentative + h, h, -tentative, succ_handle))

    return Exhausted(pops)


def strategy_runner(name: str) -> Callable[[TreeState], SearchOutcome]:
    """Return a single-argument solver for ``name`` (``bfs`` or ``astar[:heuristic]``)."""
    strategy, _, heuristic = name.partition(":")
    cfg = SearchConfig(strategy=strategy, heuristic=heuristic or "combined")
    return lambda initial: solve(initial, cfg)


__all__ = [
    "STRATEGIES",
    "Exhausted",
    "SearchConfig",
    "SearchOutcome",
    "Solved",
    "exact_distances",
    "solve",
    "solve_astar",
    "solve_bfs",
    "strategy_runner",
]
