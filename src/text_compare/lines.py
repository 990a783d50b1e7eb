"""Line-level alignment of two texts."""

from __future__ import annotations

from text_compare.alignment import Delta, compute_deltas


def split_lines(text: str) -> list[str]:
    """Split on newline only; a trailing newline yields a trailing empty line."""
    return text.split("\n")


def diff_lines(original: str, revised: str) -> list[Delta[str]]:
    """Return the non-equal line deltas between two texts."""
    return compute_deltas(split_lines(original), split_lines(revised))
