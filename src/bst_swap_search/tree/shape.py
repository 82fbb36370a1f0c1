"""Shape helpers for complete array-encoded binary trees."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple

import networkx as nx


@lru_cache(maxsize=None)
def shape_graph(n: int) -> nx.Graph:
    """Undirected parent-child graph of an ``n``-node complete tree.

    Callers must not mutate the returned graph; it is shared across calls.
    """
    if n < 0:
        msg = f"Tree size must be non-negative, got {n}."
        raise ValueError(msg)
    g = nx.Graph()
    g.add_nodes_from(range(n))
    g.add_edges_from(((child - 1) // 2, child) for child in range(1, n))
    return g


def subtree_size(index: int, n: int) -> int:
    """Number of nodes in the subtree rooted at ``index``."""
    if index >= n:
        return 0
    return 1 + subtree_size(2 * index + 1, n) + subtree_size(2 * index + 2, n)


@lru_cache(maxsize=None)
def in_order_indices(n: int) -> Tuple[int, ...]:
    """Array indices of an ``n``-node tree in in-order (left, node, right)."""
    order: List[int] = []
    stack: List[int] = []
    node = 0
    while stack or node < n:
        while node < n:
            stack.append(node)
            node = 2 * node + 1
        node = stack.pop()
        order.append(node)
        node = 2 * node + 2
    return tuple(order)


@lru_cache(maxsize=None)
def hop_distances(n: int) -> Tuple[Tuple[int, ...], ...]:
    """All-pairs hop distances between tree positions as an ``n x n`` table."""
    graph = shape_graph(n)
    lengths: Dict[int, Dict[int, int]] = {
        src: dict(dist) for src, dist in nx.all_pairs_shortest_path_length(graph)
    }
    return tuple(tuple(lengths[u][v] for v in range(n)) for u in range(n))


def depth_of(index: int) -> int:
    return (index + 1).bit_length() - 1


__all__ = ["depth_of", "hop_distances", "in_order_indices", "shape_graph", "subtree_size"]
