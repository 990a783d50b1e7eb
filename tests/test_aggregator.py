"""Change aggregation and ordering tests."""

from __future__ import annotations

import pytest

from text_compare.aggregator import collect_changes
from text_compare.alignment import Chunk, Delta, DeltaType
from text_compare.lines import diff_lines
from text_compare.models import Added, Modified, Removed, change_position


def test_change_position_places_additions_after_their_anchor_line() -> None:
    assert change_position(Modified(4, "a", "b")) == 4
    assert change_position(Removed(4, ("a",))) == 4
    assert change_position(Added(4, ("a",))) == 5


def test_change_position_rejects_unknown_records() -> None:
    with pytest.raises(TypeError, match="Unsupported change record"):
        change_position("not a change")  # type: ignore[arg-type]


def test_collect_changes_orders_records_by_original_line() -> None:
    deltas = [
        Delta(DeltaType.INSERT, Chunk(6, ()), Chunk(5, ("late",))),
        Delta(DeltaType.DELETE, Chunk(1, ("early",)), Chunk(1, ())),
    ]

    assert collect_changes(deltas) == [
        Removed(2, ("early",)),
        Added(6, ("late",)),
    ]


def test_collect_changes_keeps_replacement_pair_adjacent() -> None:
    deltas = [
        Delta(
            DeltaType.CHANGE,
            Chunk(2, ("xxxxxxxxxx", "yyyyyyyyyy")),
            Chunk(2, ("1111111111", "2222222222")),
        ),
    ]

    assert collect_changes(deltas) == [
        Removed(3, ("xxxxxxxxxx", "yyyyyyyyyy")),
        Added(2, ("1111111111", "2222222222")),
    ]


def test_collect_changes_for_mixed_removals_and_additions() -> None:
    original = "\n".join(
        [
            "First line",
            "Second line",
            "Line to be removed",
            "Third line",
            "Another line to remove",
            "Fourth line",
            "Fifth line",
        ]
    )
    revised = "\n".join(
        [
            "First line",
            "Second line",
            "Third line",
            "New line here",
            "Fourth line",
            "Another new line",
            "Fifth line",
            "Added at the end",
        ]
    )

    changes = collect_changes(diff_lines(original, revised))

    assert changes == [
        Removed(3, ("Line to be removed",)),
        Removed(5, ("Another line to remove",)),
        Added(4, ("New line here",)),
        Added(6, ("Another new line",)),
        Added(7, ("Added at the end",)),
    ]
    positions = [change_position(change) for change in changes]
    assert positions == sorted(positions)


def test_collect_changes_returns_empty_list_for_no_deltas() -> None:
    assert collect_changes([]) == []
