"""Immutable array-backed tree state and its swap transition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class SwapDescription:
    """One parent-child exchange, with values as they stood before the swap."""

    child_index: int
    child_value: int
    parent_index: int
    parent_value: int

    def __str__(self) -> str:
        return (
            f"Swap node {self.child_index} (value {self.child_value}) "
            f"with node {self.parent_index} (value {self.parent_value})"
        )

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.child_index, self.child_value, self.parent_index, self.parent_value)


class TreeState:
    """Complete binary tree stored level by level; index 0 is the root.

    Equality and hashing only look at the value sequence, so two states built
    along different swap paths dedupe to the same entry in the search tables.
    """

    __slots__ = ("_values", "_hash")

    def __init__(self, values: Iterable[int]):
        self._values: Tuple[int, ...] = tuple(int(v) for v in values)
        self._hash = hash(self._values)

    # ------------------------------------------------------------------ API --
    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    def size(self) -> int:
        """Number of nodes."""
        return len(self._values)

    def value_at(self, index: int) -> int:
        self._check_index(index)
        return self._values[index]

    def parent_index(self, index: int) -> int | None:
        """Parent position of ``index``, ``None`` for the root."""
        self._check_index(index)
        if index == 0:
            return None
        return (index - 1) // 2

    def left_child_index(self, index: int) -> int | None:
        self._check_index(index)
        child = 2 * index + 1
        return child if child < len(self._values) else None

    def right_child_index(self, index: int) -> int | None:
        self._check_index(index)
        child = 2 * index + 2
        return child if child < len(self._values) else None

    def swap(self, child_index: int) -> TreeState | None:
        """Return a new state with ``child_index`` exchanged with its parent.

        ``None`` means there is no such transition: the root has no parent and
        indices outside ``[0, n)`` have no node.
        """
        if child_index <= 0 or child_index >= len(self._values):
            return None
        parent = (child_index - 1) // 2
        values = list(self._values)
        values[child_index], values[parent] = values[parent], values[child_index]
        return TreeState(values)

    def describe_swap(self, child_index: int) -> SwapDescription | None:
        """Describe the edge ``swap(child_index)`` would take from this state."""
        if child_index <= 0 or child_index >= len(self._values):
            return None
        parent = (child_index - 1) // 2
        return SwapDescription(
            child_index=child_index,
            child_value=self._values[child_index],
            parent_index=parent,
            parent_value=self._values[parent],
        )

    # ------------------------------------------------------------ protocols --
    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, index: int) -> int:
        return self.value_at(index)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TreeState):
            return NotImplemented
        return self._hash == other._hash and self._values == other._values

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"TreeState({list(self._values)})"

    # -------------------------------------------------------------- internal --
    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._values):
            msg = f"Node index {index} is out of bounds for tree size {len(self._values)}."
            raise IndexError(msg)


__all__ = ["SwapDescription", "TreeState"]
