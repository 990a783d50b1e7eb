"""Character-level rendering of a modified line."""

from __future__ import annotations

from text_compare.alignment import DeltaType, compute_deltas


def _deleted(char: str) -> str:
    return f"[-{char}-]"


def _added(char: str) -> str:
    return f"[+{char}+]"


def render_character_diff(original: str, revised: str) -> str:
    """Render `original` with inline `[-x-]` / `[+y+]` markers leading to `revised`.

    Unchanged characters are copied as is. In each changed region deleted and
    added characters alternate pairwise, and the leftovers of the longer side
    follow. Whitespace is never elided, so `[- -]` marks a removed space.
    """
    if original == revised:
        return original

    parts: list[str] = []
    for delta in compute_deltas(list(original), list(revised), include_equal=True):
        if delta.type is DeltaType.EQUAL:
            parts.extend(delta.source.elements)
            continue
        deleted = delta.source.elements
        inserted = delta.target.elements
        for index in range(max(len(deleted), len(inserted))):
            if index < len(deleted):
                parts.append(_deleted(deleted[index]))
            if index < len(inserted):
                parts.append(_added(inserted[index]))
    return "".join(parts)
