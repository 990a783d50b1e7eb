"""Collect change records from line deltas in report order."""

from __future__ import annotations

from typing import Iterable

from text_compare.alignment import Delta
from text_compare.classifier import classify_delta
from text_compare.models import Change, change_position


def collect_changes(deltas: Iterable[Delta[str]]) -> list[Change]:
    """Classify every delta and order the records by their original line.

    The sort is stable: a removal and the addition replacing it share a
    position and stay adjacent, removal first.
    """
    changes: list[Change] = []
    for delta in deltas:
        changes.extend(classify_delta(delta))
    return sorted(changes, key=change_position)
