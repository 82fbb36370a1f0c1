"""Tree state, shape and target layout."""

from bst_swap_search.tree.state import SwapDescription, TreeState
from bst_swap_search.tree.target import build_target, in_order_values, is_search_tree

__all__ = ["SwapDescription", "TreeState", "build_target", "in_order_values", "is_search_tree"]
