"""Change records produced by comparing two texts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Modified:
    """A single original line replaced by a similar revised line."""

    line_number: int
    original_line: str
    revised_line: str


@dataclass(frozen=True)
class Removed:
    """Consecutive original lines, starting at `line_number`, with no counterpart."""

    line_number: int
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Added:
    """Consecutive revised lines inserted after original line `line_number` (0 = before the first line)."""

    line_number: int
    lines: tuple[str, ...]


Change = Union[Modified, Removed, Added]


def change_position(change: Change) -> int:
    """Return the original line a record is reported at, used for ordering."""
    if isinstance(change, (Modified, Removed)):
        return change.line_number
    if isinstance(change, Added):
        # Additions belong to the gap after their anchor line.
        return change.line_number + 1
    raise TypeError(f"Unsupported change record: {change!r}")
