import pytest

from bst_swap_search.tree.shape import hop_distances, in_order_indices, shape_graph
from bst_swap_search.tree.state import TreeState
from bst_swap_search.tree.target import build_target, in_order_values, is_search_tree


def _median_layout(n: int) -> list[int]:
    """Lower-middle placement; only valid on perfect trees."""
    tree = [0] * n

    def fill(idx: int, start: int, end: int) -> None:
        if start > end or idx >= n:
            return
        mid = start + (end - start) // 2
        tree[idx] = mid + 1
        fill(2 * idx + 1, start, mid - 1)
        fill(2 * idx + 2, mid + 1, end)

    fill(0, 0, n - 1)
    return tree


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1], [1]),
        ([1, 2], [2, 1]),
        ([3, 1, 2], [2, 1, 3]),
        ([1, 2, 3, 4], [3, 2, 4, 1]),
        ([1, 2, 3, 4, 5, 6, 7], [4, 2, 6, 1, 3, 5, 7]),
    ],
)
def test_known_targets(values, expected):
    assert list(build_target(TreeState(values)).values) == expected


@pytest.mark.parametrize("n", range(1, 41))
def test_target_reads_one_to_n_in_order(n):
    target = build_target(TreeState(range(1, n + 1)))
    assert target.size() == n
    assert in_order_values(target) == list(range(1, n + 1))
    assert is_search_tree(target)


@pytest.mark.parametrize("n", [1, 3, 7, 15, 31])
def test_perfect_trees_use_lower_middle_split(n):
    assert list(build_target(TreeState(range(1, n + 1))).values) == _median_layout(n)


def test_target_depends_on_size_only():
    a = build_target(TreeState([3, 1, 2, 5, 4]))
    b = build_target(TreeState([5, 4, 3, 2, 1]))
    assert a == b


def test_sorted_array_is_not_a_search_tree():
    assert not is_search_tree(TreeState([1, 2, 3, 4, 5, 6, 7]))


def test_shape_helpers():
    assert in_order_indices(7) == (3, 1, 4, 0, 5, 2, 6)
    graph = shape_graph(6)
    assert graph.number_of_nodes() == 6
    assert sorted(graph.edges()) == [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]
    hops = hop_distances(7)
    assert hops[3][6] == 4
    assert hops[0][0] == 0
    assert hops[1][2] == 2
