import pytest

from bst_swap_search.search.engine import Solved, solve_bfs
from bst_swap_search.search.verify import VerificationError, replay_swaps, verify_outcome
from bst_swap_search.tree.state import SwapDescription, TreeState
from bst_swap_search.tree.target import build_target


def _case():
    initial = TreeState([1, 2, 3, 4, 5, 6, 7])
    target = build_target(initial)
    outcome = solve_bfs(initial)
    return initial, target, outcome


def test_replay_of_solved_path_returns_target():
    initial, target, outcome = _case()
    assert replay_swaps(initial, target, outcome.swap_path) == target
    assert verify_outcome(initial, target, outcome) == target


def test_empty_path_on_target_is_valid():
    target = build_target(TreeState([1, 2, 3]))
    assert replay_swaps(target, target, []) == target


def test_root_swap_fails_with_step():
    initial, target, outcome = _case()
    bad = [SwapDescription(0, 1, 0, 1), *outcome.swap_path]
    with pytest.raises(VerificationError) as excinfo:
        replay_swaps(initial, target, bad)
    assert excinfo.value.step == 1
    assert excinfo.value.swap == bad[0]


def test_mismatched_values_fail_at_that_step():
    initial, target, outcome = _case()
    path = list(outcome.swap_path)
    second = path[1]
    path[1] = SwapDescription(
        second.child_index, second.parent_value, second.parent_index, second.child_value
    )
    with pytest.raises(VerificationError) as excinfo:
        replay_swaps(initial, target, path)
    assert excinfo.value.step == 2


def test_truncated_path_fails_on_final_state():
    initial, target, outcome = _case()
    path = outcome.swap_path[:-1]
    with pytest.raises(VerificationError) as excinfo:
        replay_swaps(initial, target, path)
    assert excinfo.value.step == len(path)
    assert excinfo.value.swap is None


def test_verify_outcome_checks_reported_count():
    initial, target, outcome = _case()
    wrong = Solved(outcome.swap_path, outcome.swap_count + 1, outcome.states_explored)
    with pytest.raises(VerificationError):
        verify_outcome(initial, target, wrong)


def test_verify_outcome_rejects_unsolved_search():
    initial = TreeState([7, 6, 5, 4, 3, 2, 1])
    outcome = solve_bfs(initial, max_expansions=1)
    with pytest.raises(VerificationError) as excinfo:
        verify_outcome(initial, build_target(initial), outcome)
    assert excinfo.value.step == 0
    assert excinfo.value.swap is None
