"""Target binary-search-tree layout for a given tree shape."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from bst_swap_search.tree.shape import in_order_indices, subtree_size
from bst_swap_search.tree.state import TreeState


def build_target(initial: TreeState) -> TreeState:
    """Return the BST arrangement of ``1..n`` with the same shape as ``initial``.

    Depends on the node count only, so the result is shared between searches
    of equal size.
    """
    return target_for_size(initial.size())


@lru_cache(maxsize=None)
def target_for_size(n: int) -> TreeState:
    if n < 0:
        msg = f"Tree size must be non-negative, got {n}."
        raise ValueError(msg)
    values = [0] * n
    _fill(values, list(range(1, n + 1)), 0, 0, n - 1)
    return TreeState(values)


def _fill(tree: List[int], sorted_values: List[int], index: int, start: int, end: int) -> None:
    if start > end or index >= len(tree):
        return
    # Split at the left subtree size; on a perfect subtree this is the
    # lower-middle element start + (end - start) // 2.
    mid = start + subtree_size(2 * index + 1, len(tree))
    tree[index] = sorted_values[mid]
    _fill(tree, sorted_values, 2 * index + 1, start, mid - 1)
    _fill(tree, sorted_values, 2 * index + 2, mid + 1, end)


def in_order_values(state: TreeState) -> List[int]:
    """Values of ``state`` read in in-order."""
    return [state.value_at(i) for i in in_order_indices(state.size())]


def is_search_tree(state: TreeState) -> bool:
    values = in_order_values(state)
    return all(a < b for a, b in zip(values, values[1:]))


__all__ = ["build_target", "in_order_values", "is_search_tree", "target_for_size"]
