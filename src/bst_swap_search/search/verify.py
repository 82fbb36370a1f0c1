"""Replay a reported swap path and check it lands on the target."""

from __future__ import annotations

from typing import Iterable

from bst_swap_search.search.engine import Exhausted, Solved
from bst_swap_search.tree.state import SwapDescription, TreeState


class VerificationError(ValueError):
    """Raised when a swap path does not replay onto the target."""

    def __init__(self, msg: str, *, step: int, swap: SwapDescription | None = None):
        super().__init__(msg)
        self.step = step
        self.swap = swap


def replay_swaps(
    initial: TreeState,
    target: TreeState,
    swap_path: Iterable[SwapDescription],
) -> TreeState:
    """Apply ``swap_path`` to ``initial`` in order and return the final state.

    Steps are numbered from 1. A step fails when its child index yields no
    transition or when its recorded values disagree with the state being
    swapped; the replay fails as a whole when the final state is not
    ``target``.
    """
    state = initial
    step = 0
    for step, swap in enumerate(swap_path, start=1):
        expected = state.describe_swap(swap.child_index)
        if expected is None:
            msg = f"Step {step}: node {swap.child_index} has no parent to swap with ({swap})."
            raise VerificationError(msg, step=step, swap=swap)
        if expected != swap:
            msg = f"Step {step}: recorded {swap} but the state gives {expected}."
            raise VerificationError(msg, step=step, swap=swap)
        next_state = state.swap(swap.child_index)
        assert next_state is not None
        state = next_state

    if state != target:
        msg = f"Replay of {step} swaps ended at {state!r}, expected {target!r}."
        raise VerificationError(msg, step=step)
    return state


def verify_outcome(
    initial: TreeState, target: TreeState, outcome: Solved | Exhausted
) -> TreeState:
    """Replay a solved outcome, also checking its reported swap count."""
    if isinstance(outcome, Exhausted):
        msg = f"Search did not solve the instance; nothing to replay ({outcome.reason})."
        raise VerificationError(msg, step=0)
    final = replay_swaps(initial, target, outcome.swap_path)
    if outcome.swap_count != len(outcome.swap_path):
        msg = (
            f"Reported swap count {outcome.swap_count} does not match "
            f"path length {len(outcome.swap_path)}."
        )
        raise VerificationError(msg, step=len(outcome.swap_path))
    return final


__all__ = ["VerificationError", "replay_swaps", "verify_outcome"]
