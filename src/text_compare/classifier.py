"""Turn line deltas into change records, choosing inline or whole-line rendering."""

from __future__ import annotations

from text_compare.alignment import Delta, DeltaType
from text_compare.models import Added, Change, Modified, Removed

SHORT_LINE_LENGTH = 5
SIMILARITY_THRESHOLD = 0.5


def similarity(first: str, second: str) -> float:
    """Approximate how much of the longer line the shorter line covers, in order.

    Each character of the shorter line is matched against its next occurrence in
    the longer line, searching forward from just after the previous match.
    """
    if len(first) > len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first
    if not longer:
        return 1.0

    matches = 0
    start = 0
    for char in shorter:
        index = longer.find(char, start)
        if index != -1:
            matches += 1
            start = index + 1
    return matches / len(longer)


def should_show_character_diff(original: str, revised: str) -> bool:
    """Return True when a line pair reads better as an inline character diff."""
    if len(original) < SHORT_LINE_LENGTH or len(revised) < SHORT_LINE_LENGTH:
        return True
    return similarity(original, revised) > SIMILARITY_THRESHOLD


def _replacement(first_line: int, removed: list[str], added: list[str]) -> list[Change]:
    changes: list[Change] = []
    if removed:
        changes.append(Removed(first_line, tuple(removed)))
    if added:
        changes.append(Added(first_line - 1, tuple(added)))
    return changes


def _classify_change(delta: Delta[str]) -> list[Change]:
    source_lines = delta.source.elements
    target_lines = delta.target.elements
    first_line = delta.source.position + 1

    changes: list[Change] = []
    run_start: int | None = None
    removed: list[str] = []
    added: list[str] = []
    for index in range(max(len(source_lines), len(target_lines))):
        has_original = index < len(source_lines)
        has_revised = index < len(target_lines)
        if has_original and has_revised:
            original_line = source_lines[index]
            revised_line = target_lines[index]
            if should_show_character_diff(original_line, revised_line):
                if run_start is not None:
                    changes.extend(_replacement(first_line + run_start, removed, added))
                    run_start, removed, added = None, [], []
                changes.append(Modified(first_line + index, original_line, revised_line))
                continue

        if run_start is None:
            run_start = index
        if has_original:
            removed.append(source_lines[index])
        if has_revised:
            added.append(target_lines[index])

    if run_start is not None:
        changes.extend(_replacement(first_line + run_start, removed, added))
    return changes


def classify_delta(delta: Delta[str]) -> list[Change]:
    """Expand one line delta into zero or more change records."""
    if delta.type is DeltaType.EQUAL:
        return []
    if delta.type is DeltaType.DELETE:
        return [Removed(delta.source.position + 1, delta.source.elements)]
    if delta.type is DeltaType.INSERT:
        return [Added(delta.source.position, delta.target.elements)]
    if delta.type is DeltaType.CHANGE:
        return _classify_change(delta)
    raise TypeError(f"Unsupported delta type: {delta.type!r}")
