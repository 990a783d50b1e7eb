"""Two-level text comparison producing readable difference reports."""

from __future__ import annotations

from text_compare.report import compare_text

__version__ = "0.1.0"

__all__ = [
    "compare_text",
    "alignment",
    "lines",
    "models",
    "classifier",
    "inline",
    "aggregator",
    "report",
    "assertions",
    "comparison_status",
    "config",
]
