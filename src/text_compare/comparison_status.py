"""UI-friendly formatting for comparison results."""

from __future__ import annotations

from text_compare.aggregator import collect_changes
from text_compare.lines import diff_lines
from text_compare.report import format_report


def describe_comparison(original: str, revised: str) -> tuple[str, str]:
    """Return UI-ready status text and report body for two texts."""
    if original == revised:
        return "Comparison status: Identical", "(texts are identical)"

    changes = collect_changes(diff_lines(original, revised))
    noun = "change" if len(changes) == 1 else "changes"
    return (
        f"Comparison status: Different ({len(changes)} {noun})",
        format_report(original, revised, changes),
    )
