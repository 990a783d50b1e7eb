"""Text comparison report rendering and the public `compare_text` entrypoint."""

from __future__ import annotations

import logging
from typing import Sequence

from text_compare.aggregator import collect_changes
from text_compare.inline import render_character_diff
from text_compare.lines import diff_lines, split_lines
from text_compare.models import Added, Change, Modified, Removed

LOGGER = logging.getLogger("text_compare.report")

PREAMBLE = (
    "Text comparison failed:\n"
    "Format description:\n"
    "• [-d-] shows deleted character\n"
    "• [+a+] shows added character\n"
    "• Spaces are marked explicitly in changes\n"
    "• Changes are shown character by character\n"
    "• Multiple line additions are presented as complete lines\n"
    "• Changes are reported in line number order with related changes grouped together\n"
)

ORIGINAL_HEADER = "┌─ original"
REVISED_SEPARATOR = "└─ differs from revised"
DIFFERENCES_SEPARATOR = "└─ differences"
END_MARKER = "└─"
TEXT_PREFIX = "│ "
CONTENT_PREFIX = "| "


def _text_block(text: str) -> list[str]:
    return [f"{TEXT_PREFIX}{line}" for line in split_lines(text)]


def _change_block(change: Change) -> list[str]:
    if isinstance(change, Modified):
        return [
            f"{TEXT_PREFIX}• line {change.line_number}:",
            f"{CONTENT_PREFIX}{render_character_diff(change.original_line, change.revised_line)}",
        ]
    if isinstance(change, Removed):
        header = f"{TEXT_PREFIX}• removed line {change.line_number}:"
    elif isinstance(change, Added):
        header = f"{TEXT_PREFIX}• added after line {change.line_number}:"
    else:
        raise TypeError(f"Unsupported change record: {change!r}")
    return [header, *(f"{CONTENT_PREFIX}{line}" for line in change.lines)]


def format_report(original: str, revised: str, changes: Sequence[Change]) -> str:
    """Render the full report for two texts and their ordered change records."""
    lines = [ORIGINAL_HEADER, *_text_block(original), REVISED_SEPARATOR, *_text_block(revised)]
    lines.append(DIFFERENCES_SEPARATOR)
    for change in changes:
        lines.extend(_change_block(change))
    lines.append(END_MARKER)
    return PREAMBLE + "\n" + "\n".join(lines)


def compare_text(original: str, revised: str) -> str:
    """Describe how `revised` differs from `original`; return "" when they are equal."""
    if original == revised:
        return ""

    deltas = diff_lines(original, revised)
    changes = collect_changes(deltas)
    LOGGER.debug("Compared texts: %d line deltas, %d change records.", len(deltas), len(changes))
    return format_report(original, revised, changes)
