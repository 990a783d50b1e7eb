"""Minimal edit scripts between two sequences (greedy forward Myers diff)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class DeltaType(Enum):
    """Kind of a single delta in an edit script."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    CHANGE = "change"


@dataclass(frozen=True)
class Chunk(Generic[T]):
    """Contiguous run of elements starting at `position` in one sequence."""

    position: int
    elements: tuple[T, ...]

    @property
    def end(self) -> int:
        return self.position + len(self.elements)


@dataclass(frozen=True)
class Delta(Generic[T]):
    """One aligned region of source and target sequences."""

    type: DeltaType
    source: Chunk[T]
    target: Chunk[T]


@dataclass(frozen=True)
class _Snake:
    # Matching run of `length` elements at source[i:] / target[j:], linked to the previous run.
    i: int
    j: int
    length: int
    prev: _Snake | None


def _find_snakes(source: Sequence[T], target: Sequence[T]) -> list[_Snake]:
    """Walk the edit graph and return the matching runs of a shortest path, in order."""
    n = len(source)
    m = len(target)
    # diagonal k -> (furthest source index, last matching run on that path)
    frontier: dict[int, tuple[int, _Snake | None]] = {1: (0, None)}
    for d in range(n + m + 1):
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and frontier[k - 1][0] < frontier[k + 1][0]):
                i, trail = frontier[k + 1]
            else:
                i, trail = frontier[k - 1]
                i += 1
            j = i - k
            start = i
            while i < n and j < m and source[i] == target[j]:
                i += 1
                j += 1
            if i > start:
                trail = _Snake(start, start - k, i - start, trail)
            frontier[k] = (i, trail)
            if i >= n and j >= m:
                snakes: list[_Snake] = []
                while trail is not None:
                    snakes.append(trail)
                    trail = trail.prev
                snakes.reverse()
                return snakes
    raise RuntimeError("Edit graph walk ended without reaching the end of both sequences.")


def _edit_delta(source: Sequence[T], target: Sequence[T], i0: int, i1: int, j0: int, j1: int) -> Delta[T]:
    source_chunk = Chunk(i0, tuple(source[i0:i1]))
    target_chunk = Chunk(j0, tuple(target[j0:j1]))
    if i0 == i1:
        delta_type = DeltaType.INSERT
    elif j0 == j1:
        delta_type = DeltaType.DELETE
    else:
        delta_type = DeltaType.CHANGE
    return Delta(delta_type, source_chunk, target_chunk)


def compute_deltas(
    source: Sequence[T],
    target: Sequence[T],
    *,
    include_equal: bool = False,
) -> list[Delta[T]]:
    """Return the minimal edit script turning `source` into `target`.

    Deltas are ordered by source position and never overlap. Every run of
    non-matching elements between two matching runs becomes a single delta, so
    a deletion directly followed by an insertion is reported as one CHANGE.
    With `include_equal`, matching runs are returned as EQUAL deltas and the
    source and target chunks together cover both sequences exactly once.
    """
    deltas: list[Delta[T]] = []
    i = 0
    j = 0
    for snake in [*_find_snakes(source, target), _Snake(len(source), len(target), 0, None)]:
        if snake.i > i or snake.j > j:
            deltas.append(_edit_delta(source, target, i, snake.i, j, snake.j))
        if snake.length and include_equal:
            deltas.append(
                Delta(
                    DeltaType.EQUAL,
                    Chunk(snake.i, tuple(source[snake.i : snake.i + snake.length])),
                    Chunk(snake.j, tuple(target[snake.j : snake.j + snake.length])),
                )
            )
        i = snake.i + snake.length
        j = snake.j + snake.length
    return deltas
